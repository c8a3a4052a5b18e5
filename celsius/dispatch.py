"""HTTP dispatch for authenticated API requests.

``AsyncDispatcher`` (httpx) backs the async client and ``Dispatcher``
(requests) backs the blocking one. Both return the response unverified as a
``SignedResponse``; verification is the caller's next step. Neither retries:
a transport failure surfaces immediately as ``NetworkError``.
Neither follows redirects: a 3xx answer is verified and mapped like any other
non-success status, and credentials never reach another host.
"""

import asyncio
from typing import Any

import httpx
import requests

from celsius.config import Configuration
from celsius.errors import InvalidUserSecret, NetworkError
from celsius.logging import get_logger, mask_sensitive
from celsius.request import RequestDescriptor, auth_headers, encode_payload
from celsius.verifier import SIGNATURE_HEADER, SignedResponse

logger = get_logger(__name__)


def default_headers(user_agent: str | None = None) -> dict[str, str]:
    return {
        "Accept": "application/json",
        "User-Agent": user_agent or f"celsius-sdk-python/{__import__('celsius').__version__}",
    }


class _BaseDispatcher:
    """Request preparation shared by both transports."""

    def __init__(self, config: Configuration):
        self.config = config

    def _prepare(
        self,
        descriptor: RequestDescriptor,
        user_secret: str,
    ) -> tuple[str, dict[str, str]]:
        if not isinstance(user_secret, str) or not user_secret.strip():
            raise InvalidUserSecret("user_secret must be a non-empty string")

        url = f"{self.config.base_url}{descriptor.path}"
        headers = auth_headers(self.config, user_secret)

        logger.debug(
            "Dispatching request",
            method=descriptor.method,
            path=descriptor.path,
            payload=type(descriptor.payload).__name__,
            headers=mask_sensitive(headers),
        )
        return url, headers

    @staticmethod
    def _envelope(status_code: int, content: bytes, headers: Any) -> SignedResponse:
        return SignedResponse(
            status_code=status_code,
            body=content,
            signature=headers.get(SIGNATURE_HEADER),
            headers=headers,
        )


class Dispatcher(_BaseDispatcher):
    """Blocking dispatcher on a requests Session."""

    def __init__(
        self,
        config: Configuration,
        session: requests.Session | None = None,
        user_agent: str | None = None,
    ):
        super().__init__(config)
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._default_headers = default_headers(user_agent)
        if self._owns_session:
            self._session.headers.update(self._default_headers)

    def send(self, descriptor: RequestDescriptor, user_secret: str) -> SignedResponse:
        """Send one request and return the raw signed response.

        Raises:
            InvalidUserSecret: If user_secret is empty
            DocumentError: If a document path cannot be read
            NetworkError: On connection failure or timeout
        """
        url, headers = self._prepare(descriptor, user_secret)
        if not self._owns_session:
            # Injected sessions keep their own defaults
            headers = {**self._default_headers, **headers}
        kwargs = encode_payload(descriptor.payload)

        try:
            response = self._session.request(
                descriptor.method,
                url,
                headers=headers,
                timeout=self.config.timeout,
                allow_redirects=False,
                **kwargs,
            )
        except requests.Timeout as e:
            raise NetworkError(f"Request to {descriptor.path} timed out") from e
        except requests.RequestException as e:
            raise NetworkError(f"Request to {descriptor.path} failed: {e}") from e

        logger.debug(
            "Response received",
            path=descriptor.path,
            status_code=response.status_code,
        )
        return self._envelope(response.status_code, response.content, response.headers)

    def close(self):
        if self._owns_session:
            self._session.close()


class AsyncDispatcher(_BaseDispatcher):
    """Non-blocking dispatcher on an httpx AsyncClient."""

    def __init__(
        self,
        config: Configuration,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        user_agent: str | None = None,
    ):
        super().__init__(config)
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                headers=default_headers(user_agent),
                timeout=config.timeout,
                transport=transport,
            )
        self._client = http_client

    async def send(self, descriptor: RequestDescriptor, user_secret: str) -> SignedResponse:
        """Send one request and return the raw signed response.

        Raises:
            InvalidUserSecret: If user_secret is empty
            DocumentError: If a document path cannot be read
            NetworkError: On connection failure or timeout
        """
        url, headers = self._prepare(descriptor, user_secret)
        if getattr(descriptor.payload, "reads_files", False):
            loop = asyncio.get_running_loop()
            kwargs = await loop.run_in_executor(None, encode_payload, descriptor.payload)
        else:
            kwargs = encode_payload(descriptor.payload)

        try:
            response = await self._client.request(
                descriptor.method,
                url,
                headers=headers,
                timeout=self.config.timeout,
                follow_redirects=False,
                **kwargs,
            )
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request to {descriptor.path} timed out") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request to {descriptor.path} failed: {e}") from e

        logger.debug(
            "Response received",
            path=descriptor.path,
            status_code=response.status_code,
        )
        return self._envelope(response.status_code, response.content, response.headers)

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()
