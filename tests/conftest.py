"""Pytest fixtures for SDK tests."""

import base64
import json

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from celsius.config import AuthMethod, resolve

TEST_BASE_URL = "https://wallet-api.test.celsius.network"
TEST_PARTNER_KEY = "test-partner-key-0123456789"
TEST_USER_TOKEN = "test-user-token-abcdef"


@pytest.fixture(scope="session")
def signing_key():
    """Operator-side signing key used to sign test responses."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_pem(signing_key):
    """PEM of the test trust anchor."""
    return signing_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


@pytest.fixture(scope="session")
def sign(signing_key):
    """Sign a body the way the server does; returns the header value."""
    def _sign(body: bytes) -> str:
        signature = signing_key.sign(body, padding.PKCS1v15(), hashes.SHA256())
        return base64.b64encode(signature).decode("ascii")
    return _sign


@pytest.fixture
def signed_body(sign):
    """JSON-encode a payload and return (body, signature header value)."""
    def _signed(payload) -> tuple[bytes, str]:
        body = json.dumps(payload).encode()
        return body, sign(body)
    return _signed


@pytest.fixture
def test_config(public_pem):
    """Resolved configuration pointing at the test server and test key."""
    return resolve(
        environment="staging",
        auth_method=AuthMethod.USER_TOKEN,
        partner_key=TEST_PARTNER_KEY,
        base_url=TEST_BASE_URL,
        public_key=public_pem,
        timeout=5.0,
    )


@pytest.fixture
def api_key_config(public_pem):
    """Configuration using api-key user authentication."""
    return resolve(
        auth_method=AuthMethod.API_KEY,
        partner_key=TEST_PARTNER_KEY,
        base_url=TEST_BASE_URL,
        public_key=public_pem,
    )
