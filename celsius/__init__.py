"""
Celsius SDK - Partner API client with signed-response verification.

Usage:
    from celsius import AsyncCelsius, AuthMethod, Pagination

    async with AsyncCelsius(
        auth_method=AuthMethod.USER_TOKEN,
        partner_key=partner_key,
        environment="production",
    ) as client:
        status = await client.get_kyc_status(user_token)
        page = await client.get_coin_transactions("BTC", Pagination(1, 20), user_token)
        tx_id = await client.withdraw("BTC", {"address": addr, "amount": 0.5}, user_token)

A blocking ``Celsius`` client with the same operations is available for
scripts. Responses whose signature does not verify against the pinned
environment key raise ``SignatureVerificationFailed`` and are never returned.
"""

__version__ = "0.1.0"

from celsius.config import (
    AuthMethod,
    Configuration,
    Environment,
    resolve,
    resolve_from_env,
)
from celsius.errors import (
    CelsiusError,
    ConfigurationError,
    InvalidAuthMethod,
    InvalidPartnerKey,
    InvalidPublicKey,
    InvalidUserSecret,
    DocumentError,
    NetworkError,
    SignatureVerificationFailed,
    UnexpectedResponseError,
    RemoteError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RateLimitError,
    ServerError,
)
from celsius.models import KycStatus, Pagination, TransactionPage
from celsius.client import Celsius
from celsius.async_client import AsyncCelsius
from celsius.logging import configure_logging

__all__ = [
    # Clients
    "Celsius",
    "AsyncCelsius",
    # Configuration
    "AuthMethod",
    "Configuration",
    "Environment",
    "resolve",
    "resolve_from_env",
    # Models
    "KycStatus",
    "Pagination",
    "TransactionPage",
    # Errors
    "CelsiusError",
    "ConfigurationError",
    "InvalidAuthMethod",
    "InvalidPartnerKey",
    "InvalidPublicKey",
    "InvalidUserSecret",
    "DocumentError",
    "NetworkError",
    "SignatureVerificationFailed",
    "UnexpectedResponseError",
    "RemoteError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    # Logging
    "configure_logging",
]
