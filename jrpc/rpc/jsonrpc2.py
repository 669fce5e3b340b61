"""JSON-RPC 2.0 protocol.

Differences from 1.0 that matter on the client side:
- every message carries "jsonrpc": "2.0";
- params may be positional (array) or named (object), and may be omitted;
- notifications omit the "id" key instead of sending null;
- method names starting with "rpc." are reserved;
- a reply holds exactly one of "result" or "error".
"""

from collections.abc import Mapping
from typing import Any

from jrpc.core.errors import InvalidArgumentError
from jrpc.rpc.protocol import Protocol, classify_error_object, is_integer, type_name
from jrpc.rpc.types import Malformed, ReplyVariant, Request, SuccessReply

JSONRPC_VERSION = "2.0"
RESERVED_METHOD_PREFIX = "rpc."


class JsonRpc2(Protocol):
    """JSON-RPC 2.0 protocol."""

    @property
    def version(self) -> str:
        return JSONRPC_VERSION

    def validate_request(self, request: Request) -> Request:
        method = request.method
        if not isinstance(method, str):
            raise InvalidArgumentError(
                f"Invalid method type. Remote method name must be string. "
                f"{type_name(method)} detected."
            )
        if method.startswith(RESERVED_METHOD_PREFIX):
            raise InvalidArgumentError(
                f'Invalid remote method. Method name cannot start with "{RESERVED_METHOD_PREFIX}".'
            )

        params = request.params
        if params is not None and not isinstance(params, (list, tuple, Mapping)):
            raise InvalidArgumentError(
                f"Invalid parameters structure. Parameters must be an array or an object. "
                f"{type_name(params)} detected."
            )

        if not request.is_notification():
            if not isinstance(request.id, str) and not is_integer(request.id):
                raise InvalidArgumentError(
                    f"Invalid request id type. Request id must be string or integer. "
                    f"Request id of {type_name(request.id)} type detected."
                )
        return request

    def get_request_dto(self, request: Request) -> dict[str, Any]:
        self.validate_request(request)
        dto: dict[str, Any] = {
            "jsonrpc": JSONRPC_VERSION,
            "method": request.method,
        }
        if isinstance(request.params, Mapping):
            dto["params"] = dict(request.params)
        elif request.params is not None:
            dto["params"] = list(request.params)
        if not request.is_notification():
            dto["id"] = request.id
        return dto

    def classify_response(self, dto: Any) -> ReplyVariant:
        if not isinstance(dto, Mapping):
            return Malformed(
                f"Incorrect response type detected. An object expected. "
                f"{type_name(dto)} detected."
            )

        if dto.get("jsonrpc") != JSONRPC_VERSION:
            return Malformed(f"jsonrpc must be '2.0', got: {dto.get('jsonrpc')!r}")

        if "id" not in dto:
            return Malformed("Response id not defined.")
        response_id = dto["id"]
        if response_id is not None and not isinstance(response_id, str) and not is_integer(response_id):
            return Malformed(
                f"Invalid response id type. Response id must be integer, string or null. "
                f"Response id of {type_name(response_id)} type detected."
            )

        has_result = "result" in dto
        has_error = "error" in dto
        if has_result and has_error:
            return Malformed("Response cannot have both 'result' and 'error'.")
        if not has_result and not has_error:
            return Malformed("Error object or result not found in response.")

        if has_error:
            return classify_error_object(dto["error"], response_id)
        return SuccessReply(result=dto["result"], id=response_id)
