"""Async JSON-RPC client.

Sequences one exchange per call: build DTO -> encode -> transport.send ->
decode -> validate -> correlate. Protocol rules live in jrpc.rpc; delivery
lives in jrpc.transport. Errors from either side propagate unchanged.
"""

import logging
from typing import Any, cast

from jrpc.config.schema import ClientConfig
from jrpc.core.errors import InvalidResponseError, RpcFaultError, TransportFailureError
from jrpc.rpc.jsonrpc1 import JsonRpc1
from jrpc.rpc.protocol import Protocol, get_protocol
from jrpc.rpc.types import Reply, Request, Response
from jrpc.transport.base import Transport
from jrpc.transport.http import HttpTransport

logger = logging.getLogger(__name__)


class JsonRpcClient:
    """Client for a remote JSON-RPC service.

    Usage:
        async with JsonRpcClient(HttpTransport("http://localhost:8080/rpc")) as client:
            total = await client.request("math.sum", [1, 2])
            await client.notify("log.write", ["done"])

        # Or from configuration:
        async with JsonRpcClient.from_config(load_config()) as client:
            ...
    """

    def __init__(self, transport: Transport, protocol: Protocol | None = None) -> None:
        """Initialize the client.

        Args:
            transport: Delivers encoded payloads to the remote service.
            protocol: JSON-RPC version to speak. Defaults to JSON-RPC 1.0.
        """
        self._transport = transport
        self._protocol = protocol if protocol is not None else JsonRpc1()
        logger.debug(
            "JsonRpcClient initialized: endpoint=%s, protocol=%s",
            transport.endpoint,
            self._protocol.version,
        )

    @classmethod
    def from_config(cls, config: ClientConfig) -> "JsonRpcClient":
        """Create a client with an HTTP transport built from config."""
        transport = HttpTransport(
            config.url,
            timeout=config.timeout,
            headers=config.headers,
            verbose=config.verbose,
        )
        return cls(transport, get_protocol(config.protocol_version))

    @property
    def protocol(self) -> Protocol:
        return self._protocol

    @property
    def transport(self) -> Transport:
        return self._transport

    async def __aenter__(self) -> "JsonRpcClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._transport.close()

    async def call(self, request: Request) -> Reply:
        """Send a request or notification.

        Returns:
            The validated Response, or None for a notification (no reply is
            read, whatever the server sends back).

        Raises:
            InvalidArgumentError: If the request breaks the protocol's rules.
            TransportFailureError: If no reply could be obtained.
            InvalidResponseError: If the reply is malformed or answers another request.
            RpcFaultError: If the remote service reports an error.
        """
        payload = self._protocol.encode_request(request)
        logger.debug("RPC call: method=%s, id=%s", request.method, request.id)

        try:
            raw = await self._transport.send(payload)
        except TransportFailureError as e:
            logger.warning("Transport failure for method=%s: %s", request.method, e)
            raise

        if self._protocol.is_notification(request):
            return None

        try:
            response = self._protocol.decode_response(raw)
        except RpcFaultError as e:
            logger.warning("RPC error %d for method=%s: %s", e.code, request.method, e.message)
            raise
        except InvalidResponseError as e:
            logger.warning("Invalid server response for method=%s: %s", request.method, e)
            raise

        if not self._protocol.match(request, response):
            logger.warning(
                "Response id mismatch for method=%s: sent %r, got %r",
                request.method,
                request.id,
                response.id,
            )
            raise InvalidResponseError(
                f"Response id {response.id!r} does not match request id {request.id!r}."
            )
        return response

    async def request(self, method: str, params: Any = None) -> Any:
        """Invoke a remote method and return its result."""
        response = await self.call(self._protocol.create_request(method, params))
        return cast(Response, response).result

    async def notify(self, method: str, params: Any = None) -> None:
        """Send a notification. No reply is expected."""
        await self.call(self._protocol.create_notification(method, params))
