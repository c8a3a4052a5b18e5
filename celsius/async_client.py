"""
Asynchronous Celsius partner API client.
"""

from typing import Any, Callable, Mapping

import httpx

from celsius.config import Configuration, resolve
from celsius.dispatch import AsyncDispatcher
from celsius.operations import Operations
from celsius.request import RequestDescriptor
from celsius.response import read_verified
from celsius.verifier import load_public_key


class AsyncCelsius(Operations):
    """
    Asynchronous client for the Celsius partner API.

    Every operation is a coroutine that resolves to a verified value or
    raises a CelsiusError. Calls share no mutable state and may be issued
    concurrently.

    Example:
        async with AsyncCelsius(auth_method="api-key", partner_key=key) as client:
            address = await client.get_deposit("BTC", user_api_key)
    """

    def __init__(
        self,
        config: Configuration | Mapping[str, Any] | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        user_agent: str | None = None,
        **settings: Any,
    ):
        """
        Initialize the async client.

        Args:
            config: Resolved Configuration, or a mapping of configuration fields
            http_client: httpx AsyncClient to send through (not closed by the client)
            transport: httpx transport for the client-owned AsyncClient
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
        self._dispatcher = AsyncDispatcher(
            self.config,
            http_client=http_client,
            transport=transport,
            user_agent=user_agent,
        )

    async def _call(
        self,
        descriptor: RequestDescriptor,
        user_secret: str,
        parse: Callable[[Any], Any],
    ) -> Any:
        envelope = await self._dispatcher.send(descriptor, user_secret)
        return parse(read_verified(envelope, self._public_key))

    async def aclose(self):
        """Close the client."""
        await self._dispatcher.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
