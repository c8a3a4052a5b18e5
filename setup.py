"""Celsius SDK setup."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="celsius-sdk",
    version="0.1.0",
    packages=find_packages(include=["celsius", "celsius.*"]),
    install_requires=[
        "requests>=2.28.0",
        "httpx>=0.24.0",
        "cryptography>=41.0.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    python_requires=">=3.10",
    author="Celsius Network",
    author_email="",
    description="Celsius partner API client with signed-response verification",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Office/Business :: Financial",
    ],
    keywords="celsius, crypto, kyc, wallet, sdk",
)
