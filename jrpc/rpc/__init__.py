"""JSON-RPC protocol layer.

Builds requests and notifications, maps them to DTOs, validates reply DTOs
and correlates replies with requests. Protocols perform no I/O; pair them
with a transport (see jrpc.transport) or use jrpc.client.JsonRpcClient.

Example usage:
    protocol = JsonRpc1()
    request = protocol.create_request("math.sum", [1, 2])
    payload = protocol.encode_request(request)
    ...
    response = protocol.decode_response(reply_bytes)
    assert protocol.match(request, response)
"""

from jrpc.rpc.endec import Endec, JsonEndec
from jrpc.rpc.ids import RequestIdGenerator
from jrpc.rpc.jsonrpc1 import JsonRpc1
from jrpc.rpc.jsonrpc2 import JsonRpc2
from jrpc.rpc.protocol import (
    SUPPORTED_VERSIONS,
    Protocol,
    get_protocol,
    loose_id_equal,
)
from jrpc.rpc.types import (
    ErrorReply,
    Malformed,
    Notification,
    Reply,
    ReplyVariant,
    Request,
    Response,
    RpcFault,
    SuccessReply,
)

__all__ = [
    # Types
    "Request",
    "Notification",
    "Response",
    "Reply",
    "RpcFault",
    # Reply variants
    "SuccessReply",
    "ErrorReply",
    "Malformed",
    "ReplyVariant",
    # Protocols
    "Protocol",
    "JsonRpc1",
    "JsonRpc2",
    "SUPPORTED_VERSIONS",
    "get_protocol",
    "loose_id_equal",
    # Ids
    "RequestIdGenerator",
    # Endec
    "Endec",
    "JsonEndec",
]
