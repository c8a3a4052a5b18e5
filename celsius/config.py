"""Client configuration.

Resolves caller-supplied settings against per-environment defaults and
validates them once, at client construction.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from celsius.errors import (
    ConfigurationError,
    InvalidAuthMethod,
    InvalidPartnerKey,
)
from celsius.logging import get_logger
from celsius.trust_anchors import TRUST_ANCHORS
from celsius.verifier import load_public_key

logger = get_logger(__name__)


class Environment(str, Enum):
    """Deployment the client talks to."""
    PRODUCTION = "production"
    STAGING = "staging"
    DEVELOPMENT = "development"


class AuthMethod(str, Enum):
    """How end users are identified to the backend."""
    API_KEY = "api-key"
    USER_TOKEN = "user-token"


DEFAULT_TIMEOUT = 30.0  # seconds

ENVIRONMENT_DEFAULTS = MappingProxyType({
    Environment.PRODUCTION: MappingProxyType({
        "base_url": "https://wallet-api.celsius.network",
        "public_key": TRUST_ANCHORS[Environment.PRODUCTION.value],
        "timeout": DEFAULT_TIMEOUT,
    }),
    Environment.STAGING: MappingProxyType({
        "base_url": "https://wallet-api.staging.celsius.network",
        "public_key": TRUST_ANCHORS[Environment.STAGING.value],
        "timeout": DEFAULT_TIMEOUT,
    }),
    Environment.DEVELOPMENT: MappingProxyType({
        "base_url": "https://wallet-api.dev.celsius.network",
        "public_key": TRUST_ANCHORS[Environment.DEVELOPMENT.value],
        "timeout": DEFAULT_TIMEOUT,
    }),
})


class Configuration(BaseModel):
    """Resolved, immutable client configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    environment: Environment
    auth_method: AuthMethod
    partner_key: SecretStr
    base_url: str
    public_key: str  # PEM trust anchor
    timeout: float = Field(gt=0)

    @field_validator("partner_key")
    @classmethod
    def validate_partner_key(cls, value: SecretStr) -> SecretStr:
        """Reject an empty or blank partner key."""
        if not value.get_secret_value().strip():
            raise ValueError("partner_key must not be empty")
        return value

    @property
    def is_production(self) -> bool:
        """Check if the client targets production."""
        return self.environment == Environment.PRODUCTION


class ClientSettings(BaseSettings):
    """Configuration fields loaded from CELSIUS_* environment variables."""

    environment: Optional[str] = None
    auth_method: Optional[str] = None
    partner_key: Optional[str] = None
    base_url: Optional[str] = None
    public_key: Optional[str] = None
    timeout: Optional[float] = None

    model_config = SettingsConfigDict(
        env_prefix="CELSIUS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


def _coerce_environment(value: Any) -> Environment | None:
    if isinstance(value, Environment):
        return value
    if isinstance(value, str):
        try:
            return Environment(value.lower())
        except ValueError:
            return None
    return None


def _coerce_auth_method(value: Any) -> AuthMethod:
    if isinstance(value, AuthMethod):
        return value
    if isinstance(value, str):
        if value in AuthMethod.__members__:
            return AuthMethod[value]
        try:
            return AuthMethod(value)
        except ValueError:
            pass
    raise InvalidAuthMethod(
        f"Invalid auth method {value!r}: expected one of "
        f"{', '.join(m.value for m in AuthMethod)}"
    )


def resolve(user_config: Mapping[str, Any] | None = None, **overrides: Any) -> Configuration:
    """Build a Configuration from caller settings and environment defaults.

    Defaults are selected by ``environment`` (production when absent or
    unrecognized); every field the caller supplies wins over the default.
    ``None`` values count as not supplied.

    Args:
        user_config: Mapping of configuration fields
        **overrides: Configuration fields, applied after ``user_config``

    Returns:
        Validated Configuration

    Raises:
        InvalidAuthMethod: If auth_method is not API_KEY or USER_TOKEN
        InvalidPartnerKey: If partner_key is missing or empty
        ConfigurationError: If any other field is malformed
    """
    supplied = {
        key: value
        for key, value in {**(user_config or {}), **overrides}.items()
        if value is not None
    }

    requested = supplied.get("environment")
    environment = _coerce_environment(requested)
    if environment is None:
        if requested is not None:
            logger.warning(
                "Unknown environment %r, using production defaults", requested
            )
        environment = Environment.PRODUCTION

    merged = {**ENVIRONMENT_DEFAULTS[environment], **supplied}
    merged["environment"] = environment
    merged["auth_method"] = _coerce_auth_method(merged.get("auth_method"))

    partner_key = merged.get("partner_key")
    if isinstance(partner_key, SecretStr):
        partner_key = partner_key.get_secret_value()
    if not isinstance(partner_key, str) or not partner_key.strip():
        raise InvalidPartnerKey("Partner key is missing or empty")

    if isinstance(merged.get("base_url"), str):
        merged["base_url"] = merged["base_url"].rstrip("/")

    # Fails fast on a malformed or unsupported trust anchor
    load_public_key(merged.get("public_key"))

    try:
        config = Configuration(**merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    logger.debug(
        "Resolved configuration",
        environment=config.environment.value,
        auth_method=config.auth_method.value,
        base_url=config.base_url,
    )
    return config


def resolve_from_env(**overrides: Any) -> Configuration:
    """Resolve configuration from CELSIUS_* environment variables.

    Keyword overrides win over the environment, which wins over defaults.
    """
    settings = ClientSettings()
    return resolve(settings.model_dump(exclude_none=True), **overrides)
