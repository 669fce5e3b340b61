"""HTTP transport for JSON-RPC clients.

Each send() is one POST; the response body is the reply payload. Non-2xx
statuses still return their body, because servers commonly report JSON-RPC
errors inside e.g. a 500 response. Only failing to get any response at all
is a transport failure.
"""

import logging
from typing import Any
from urllib.parse import urlparse

import httpx

from jrpc.core.errors import TransportFailureError
from jrpc.transport.base import Transport

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: float = 30.0
DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class HttpTransport(Transport):
    """POST payloads to a remote JSON-RPC service.

    Usage:
        async with HttpTransport("http://localhost:8080/rpc") as transport:
            reply = await transport.send(b'{"method":"echo","params":[],"id":1}')

    Attributes:
        url: Remote JSON-RPC service URL.
        timeout: Request timeout in seconds.
        verbose: Log request and reply bodies at DEBUG level.
    """

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        verbose: bool = False,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            url: Remote service URL (http or https).
            timeout: Request timeout in seconds.
            headers: Extra HTTP headers; override the defaults.
            verbose: Log payloads at DEBUG level.
            client: Pre-built httpx client (e.g. with a MockTransport). The
                transport closes it on close().

        Raises:
            ValueError: If the URL is not an http(s) URL.
        """
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Invalid server URL: {url!r} (expected http:// or https://)")

        self._url = url
        self._timeout = timeout
        self._headers = {**DEFAULT_HEADERS, **(headers or {})}
        self._verbose = verbose
        self._client = client

    @property
    def url(self) -> str:
        return self._url

    @property
    def endpoint(self) -> str:
        return self._url

    @property
    def timeout(self) -> float:
        return self._timeout

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=False,
            )
        return self._client

    async def send(self, payload: bytes) -> bytes:
        client = self._get_client()
        if self._verbose:
            logger.debug("POST %s: %s", self._url, payload.decode("utf-8", "replace"))

        try:
            response = await client.post(self._url, content=payload, headers=self._headers)
        except httpx.TimeoutException as e:
            logger.warning("Request to %s timed out after %ss", self._url, self._timeout)
            raise TransportFailureError(
                self._url,
                f'JSON-RPC http request timed out. Remote service at "{self._url}" '
                f"did not respond within {self._timeout}s.",
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Connection failed to %s: %s", self._url, e)
            raise TransportFailureError(
                self._url,
                f'JSON-RPC http connection failed. Remote service at "{self._url}" '
                f"is not responding: {e}",
            ) from e

        if response.is_error:
            logger.debug("HTTP %d from %s", response.status_code, self._url)
        if self._verbose:
            logger.debug("Reply from %s: %s", self._url, response.text)
        return response.content

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def __repr__(self) -> str:
        return f"HttpTransport(url={self._url!r}, timeout={self._timeout})"

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
