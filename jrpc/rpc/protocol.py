"""Protocol contract shared by every JSON-RPC version.

A Protocol builds requests, turns them into DTOs (plain dicts/lists ready for
an Endec), validates reply DTOs and correlates replies with requests. Callers
only talk to this interface, so adding a version means adding a subclass.

Protocols do no I/O and no logging. Every validation failure is raised
synchronously, before any DTO is built.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from jrpc.core.errors import ConfigError, InvalidResponseError, RpcFaultError
from jrpc.rpc.endec import Endec, JsonEndec
from jrpc.rpc.ids import RequestIdGenerator
from jrpc.rpc.types import (
    ErrorReply,
    Malformed,
    Notification,
    ReplyVariant,
    Request,
    Response,
    RpcFault,
    SuccessReply,
)

SUPPORTED_VERSIONS: tuple[str, ...] = ("1.0", "2.0")


def type_name(value: Any) -> str:
    """Short type name used in validation messages."""
    return "null" if value is None else type(value).__name__


def is_number(value: Any) -> bool:
    """True for int/float values. bool is not a number on the wire."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# Decimal numeric text as PHP and JSON readers accept it. ASCII digits only.
_NUMERIC_ID = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_ID_WHITESPACE = " \t\n\r\v\f"


def _numeric_text_equal(number: int | float, text: str) -> bool:
    """Compare a numeric id with a string id without losing precision.

    Integers are compared exactly, so ids beyond 2**53 never collide.
    Floats are compared as floats, since that is all they carry.
    """
    text = text.strip(_ID_WHITESPACE)
    if not _NUMERIC_ID.fullmatch(text):
        return False
    if isinstance(number, float):
        return float(text) == number
    return Decimal(text) == number


def loose_id_equal(left: Any, right: Any) -> bool:
    """Compare two ids the way they compare after a trip through text.

    Equal values match. A numeric id and a string id match when the string
    is plain decimal text for the same number (1 == "1" == "01" == "1.0").
    Spellings such as "1_000", "inf" or non-ASCII digits never match.
    None only matches None.
    """
    if left is None or right is None:
        return left is None and right is None
    if type(left) is type(right) or (is_number(left) and is_number(right)):
        return bool(left == right)
    if is_number(left) and isinstance(right, str):
        return _numeric_text_equal(left, right)
    if is_number(right) and isinstance(left, str):
        return _numeric_text_equal(right, left)
    return False


def classify_error_object(error: Any, response_id: Any) -> ReplyVariant:
    """Validate a reply's error object, returning ErrorReply or Malformed."""
    if not isinstance(error, Mapping):
        return Malformed(
            f"Incorrect error object detected. An object expected. {type_name(error)} detected."
        )
    if "code" not in error:
        return Malformed("Response error code is not defined.")
    if not is_integer(error["code"]):
        return Malformed(
            f"Response error code must be an integer. {type_name(error['code'])} detected."
        )
    if "message" not in error:
        return Malformed("Response error message is not defined.")
    if not isinstance(error["message"], str):
        return Malformed(
            f"Response error message must be a string. {type_name(error['message'])} detected."
        )
    fault = RpcFault(code=error["code"], message=error["message"], data=error.get("data"))
    return ErrorReply(fault=fault, id=response_id)


class Protocol(ABC):
    """Operations every JSON-RPC version must provide.

    Attributes:
        endec: Encoder/decoder for this protocol's DTOs (JSON by default).
    """

    def __init__(self, endec: Endec | None = None) -> None:
        self._endec = endec if endec is not None else JsonEndec()
        self._ids = RequestIdGenerator()

    @property
    @abstractmethod
    def version(self) -> str:
        """Version tag, e.g. "1.0"."""
        ...

    @property
    def endec(self) -> Endec:
        return self._endec

    def get_version(self) -> str:
        return self.version

    # === Construction ===

    def create_notification(self, method: Any, params: Any = None) -> Notification:
        """Build a notification. Wire rules are checked when the DTO is built."""
        return Notification(method, params)

    def create_request(self, method: Any, params: Any = None, id: Any = None) -> Request:
        """Build a request, generating an id when none is given."""
        if id is None:
            id = self.generate_request_id()
        return Request(method, params, id)

    def create_response(self, dto: Any) -> Response:
        """Validate a reply DTO and map it to a Response.

        Raises:
            RpcFaultError: If the DTO carries a well-formed error object.
            InvalidResponseError: If the DTO is structurally malformed.
        """
        reply = self._resolve(dto)
        return Response(result=reply.result, id=reply.id)

    def generate_request_id(self) -> int:
        """Return an id unique for the lifetime of this protocol instance."""
        return self._ids.next_id()

    # === Validation & mapping ===

    @abstractmethod
    def validate_request(self, request: Request) -> Request:
        """Check a request against this version's rules.

        Returns:
            The same request, unchanged.

        Raises:
            InvalidArgumentError: On the first rule the request violates.
        """
        ...

    @abstractmethod
    def get_request_dto(self, request: Request) -> dict[str, Any]:
        """Validate a request and return its DTO."""
        ...

    @abstractmethod
    def classify_response(self, dto: Any) -> ReplyVariant:
        """Sort a raw reply DTO into SuccessReply, ErrorReply or Malformed."""
        ...

    def validate_response_dto(self, dto: Any) -> None:
        """Return normally only for a well-formed result DTO.

        Raises:
            RpcFaultError: If the DTO carries a well-formed error object.
            InvalidResponseError: If the DTO is structurally malformed.
        """
        self._resolve(dto)

    def _resolve(self, dto: Any) -> SuccessReply:
        reply = self.classify_response(dto)
        if isinstance(reply, Malformed):
            raise InvalidResponseError(reply.reason)
        if isinstance(reply, ErrorReply):
            raise RpcFaultError(reply.fault)
        return reply

    # === Correlation ===

    def is_notification(self, request: Request) -> bool:
        return request.is_notification()

    def match(self, request: Request, response: Response) -> bool:
        """True iff response is the reply to request (ids loosely equal)."""
        return loose_id_equal(request.id, response.id)

    # === Wire helpers ===

    def encode_request(self, request: Request) -> bytes:
        """Validate, map and encode a request to wire bytes."""
        return self._endec.encode(self.get_request_dto(request))

    def decode_response(self, payload: bytes) -> Response:
        """Decode wire bytes and build a validated Response."""
        return self.create_response(self._endec.decode(payload))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(version={self.version!r})"


def get_protocol(version: str, endec: Endec | None = None) -> Protocol:
    """Return a new protocol instance for a version tag.

    Raises:
        ConfigError: If the version is not supported.
    """
    if version == "1.0":
        from jrpc.rpc.jsonrpc1 import JsonRpc1
        return JsonRpc1(endec)
    if version == "2.0":
        from jrpc.rpc.jsonrpc2 import JsonRpc2
        return JsonRpc2(endec)
    raise ConfigError(
        f"Unsupported JSON-RPC version: {version!r} (supported: {', '.join(SUPPORTED_VERSIONS)})"
    )
