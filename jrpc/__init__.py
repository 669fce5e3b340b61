"""jrpc: JSON-RPC client protocol engine.

Example usage:
    from jrpc import HttpTransport, JsonRpcClient

    async with JsonRpcClient(HttpTransport("http://localhost:8080/rpc")) as client:
        result = await client.request("math.sum", [1, 2])
"""

from jrpc.client import JsonRpcClient
from jrpc.core.errors import (
    ConfigError,
    InvalidArgumentError,
    InvalidResponseError,
    JrpcError,
    RpcFaultError,
    TransportFailureError,
)
from jrpc.rpc import (
    JsonEndec,
    JsonRpc1,
    JsonRpc2,
    Notification,
    Protocol,
    Request,
    Response,
    RpcFault,
    get_protocol,
)
from jrpc.transport import HttpTransport, Transport

__version__ = "0.1.0"

__all__ = [
    "JsonRpcClient",
    # Protocols
    "Protocol",
    "JsonRpc1",
    "JsonRpc2",
    "get_protocol",
    "JsonEndec",
    # Types
    "Request",
    "Notification",
    "Response",
    "RpcFault",
    # Transports
    "Transport",
    "HttpTransport",
    # Errors
    "JrpcError",
    "InvalidArgumentError",
    "InvalidResponseError",
    "RpcFaultError",
    "TransportFailureError",
    "ConfigError",
]
