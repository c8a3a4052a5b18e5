"""
Blocking Celsius partner API client.
"""

from typing import Any, Callable, Mapping

import requests

from celsius.config import Configuration, resolve
from celsius.dispatch import Dispatcher
from celsius.operations import Operations
from celsius.request import RequestDescriptor
from celsius.response import read_verified
from celsius.verifier import load_public_key


class Celsius(Operations):
    """
    Blocking client for the Celsius partner API.

    Every response is checked against the environment's pinned public key
    before a value is returned.

    Example:
        client = Celsius(
            auth_method=AuthMethod.USER_TOKEN,
            partner_key=os.environ["CELSIUS_PARTNER_KEY"],
            environment="staging",
        )
        status = client.get_kyc_status(user_token)
    """

    def __init__(
        self,
        config: Configuration | Mapping[str, Any] | None = None,
        *,
        session: requests.Session | None = None,
        user_agent: str | None = None,
        **settings: Any,
    ):
        """
        Initialize the client.

        Args:
            config: Resolved Configuration, or a mapping of configuration fields
            session: requests Session to send through (not closed by the client)
            user_agent: Custom user agent string
            **settings: Configuration fields (environment, auth_method,
                partner_key, base_url, public_key, timeout)

        Raises:
            ConfigurationError: If auth method, partner key or trust anchor
                are invalid
        """
        if isinstance(config, Configuration) and not settings:
            self.config = config
        else:
            base = config.model_dump() if isinstance(config, Configuration) else config
            self.config = resolve(base, **settings)

        self._public_key = load_public_key(self.config.public_key)
        self._dispatcher = Dispatcher(self.config, session=session, user_agent=user_agent)

    def _call(
        self,
        descriptor: RequestDescriptor,
        user_secret: str,
        parse: Callable[[Any], Any],
    ) -> Any:
        envelope = self._dispatcher.send(descriptor, user_secret)
        return parse(read_verified(envelope, self._public_key))

    def close(self):
        """Close the client session."""
        self._dispatcher.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
