"""JSON-RPC 1.0 protocol.

Wire shapes:
    request:  {"method": str, "params": array, "id": str|number|null}
    success:  {"result": any, "error": null, "id": str|int|null}
    error:    {"result": null, "error": {"code": int, "message": str, "data"?: any},
               "id": str|int|null}

1.0 only knows positional params and always emits the "id" key; a null id
marks a notification.
"""

from collections.abc import Mapping
from typing import Any

from jrpc.core.errors import InvalidArgumentError
from jrpc.rpc.protocol import (
    Protocol,
    classify_error_object,
    is_integer,
    is_number,
    type_name,
)
from jrpc.rpc.types import Malformed, ReplyVariant, Request, SuccessReply


class JsonRpc1(Protocol):
    """JSON-RPC 1.0 protocol."""

    @property
    def version(self) -> str:
        return "1.0"

    def _validate_method(self, method: Any) -> None:
        # 1.0 does not reserve the "rpc." prefix; any string is accepted.
        if not isinstance(method, str):
            raise InvalidArgumentError(
                f"Invalid method type. Remote method name must be string. "
                f"{type_name(method)} detected."
            )

    def _validate_params(self, params: Any) -> None:
        if params is None or isinstance(params, (list, tuple)):
            return
        if isinstance(params, Mapping):
            raise InvalidArgumentError(
                "Invalid parameters structure. Named parameters are not supported "
                "in JSON-RPC 1.0; parameters must be held within an indexed-only sequence."
            )
        raise InvalidArgumentError(
            f"Invalid parameters structure. Parameters must be held within an "
            f"indexed-only sequence. {type_name(params)} detected."
        )

    def _validate_id(self, request_id: Any) -> None:
        if not isinstance(request_id, str) and not is_number(request_id):
            raise InvalidArgumentError(
                f"Invalid request id type. Request id must be string or numeric. "
                f"Request id of {type_name(request_id)} type detected."
            )

    def validate_request(self, request: Request) -> Request:
        self._validate_method(request.method)
        self._validate_params(request.params)
        if not request.is_notification():
            self._validate_id(request.id)
        return request

    def get_request_dto(self, request: Request) -> dict[str, Any]:
        self.validate_request(request)
        return {
            "method": request.method,
            "params": list(request.params) if request.params is not None else [],
            "id": None if request.is_notification() else request.id,
        }

    def classify_response(self, dto: Any) -> ReplyVariant:
        if not isinstance(dto, Mapping):
            return Malformed(
                f"Incorrect response type detected. An object expected. "
                f"{type_name(dto)} detected."
            )

        if "id" not in dto:
            return Malformed("Response id not defined.")
        response_id = dto["id"]
        if response_id is not None and not isinstance(response_id, str) and not is_integer(response_id):
            return Malformed(
                f"Invalid response id type. Response id must be integer, string or null. "
                f"Response id of {type_name(response_id)} type detected."
            )

        if "result" not in dto and "error" not in dto:
            return Malformed("Error object or result not found in response.")

        # A non-null error wins over any result value
        if dto.get("error") is not None:
            return classify_error_object(dto["error"], response_id)

        if "result" not in dto:
            return Malformed(
                "Incorrect error object detected. An object expected. null detected."
            )
        return SuccessReply(result=dto["result"], id=response_id)
