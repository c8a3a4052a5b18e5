"""
Exception classes for the Celsius partner SDK.
"""

from typing import Any


def error_detail(body: Any) -> str | None:
    """Pull the human-readable message out of an error body."""
    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            value = body.get(key)
            if isinstance(value, str):
                return value
    elif isinstance(body, str) and body:
        return body
    return None


class CelsiusError(Exception):
    """Base exception for Celsius SDK errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(CelsiusError):
    """Client configuration is invalid. Raised only at construction."""
    pass


class InvalidAuthMethod(ConfigurationError):
    """Auth method is neither API_KEY nor USER_TOKEN."""
    pass


class InvalidPartnerKey(ConfigurationError):
    """Partner key is missing or empty."""
    pass


class InvalidPublicKey(ConfigurationError):
    """Trust anchor could not be loaded or uses an unsupported key type."""
    pass


class InvalidUserSecret(CelsiusError, ValueError):
    """Per-call user token or api key is missing or empty."""
    pass


class DocumentError(CelsiusError):
    """A KYC document file could not be read."""
    pass


class NetworkError(CelsiusError):
    """Transport failure: connection refused, DNS failure or timeout."""
    pass


class SignatureVerificationFailed(CelsiusError):
    """Response signature did not validate against the trust anchor.

    The unverified body is never attached to this exception.
    """
    pass


class UnexpectedResponseError(CelsiusError):
    """A verified response did not have the expected shape."""
    pass


class RemoteError(CelsiusError):
    """The server answered with a non-success status."""

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__(message, status_code=status_code)
        self.body = body

    @property
    def detail(self) -> str | None:
        """Server-supplied error message, when the body carries one."""
        return error_detail(self.body)


class AuthenticationError(RemoteError):
    """Partner or user credential rejected (401)."""
    pass


class AuthorizationError(RemoteError):
    """Credential not allowed to perform this operation (403)."""
    pass


class NotFoundError(RemoteError):
    """Resource, coin or transaction does not exist (404)."""
    pass


class RateLimitError(RemoteError):
    """Too many requests - rate limit exceeded (429)."""

    def __init__(self, message: str, body: Any = None, retry_after: int | None = None):
        super().__init__(message, status_code=429, body=body)
        self.retry_after = retry_after


class ServerError(RemoteError):
    """Server encountered an error (5xx)."""
    pass
