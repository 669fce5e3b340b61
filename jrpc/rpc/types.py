"""Value objects for JSON-RPC requests, responses and faults."""

from dataclasses import dataclass, field
from typing import Any, TypeAlias

ResponseId: TypeAlias = str | int | None


@dataclass(frozen=True)
class Request:
    """Outbound JSON-RPC call.

    Attributes:
        method: Name of the remote method to invoke.
        params: Positional parameters (named parameters only where the
            protocol version allows them). None means "no params".
        id: Request identifier. None means notification (no reply expected).

    Frozen, but params is held as given: a list stays a list. Hashing uses
    method and id only, so requests with list params can key a dict.
    """

    method: Any
    params: Any = field(default=None, hash=False)
    id: Any = None

    def is_notification(self) -> bool:
        """Return True if this call carries no id and expects no reply."""
        return self.id is None


@dataclass(frozen=True, init=False)
class Notification(Request):
    """Fire-and-forget call. The id is always None, whatever is passed."""

    def __init__(self, method: Any, params: Any = None, id: Any = None) -> None:
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "params", params)
        object.__setattr__(self, "id", None)


@dataclass(frozen=True)
class Response:
    """Validated reply to a Request.

    Only protocols create these, after the reply DTO passed validation.
    """

    result: Any = field(hash=False)
    id: ResponseId


Reply: TypeAlias = Response | None
"""A Response, or None when no reply was expected (after a notification)."""


@dataclass(frozen=True)
class RpcFault:
    """Application-level error reported by the remote service."""

    code: int
    message: str
    data: Any = None


# === Reply variants produced by Protocol.classify_response() ===


@dataclass(frozen=True)
class SuccessReply:
    """Well-formed reply carrying a result."""

    result: Any
    id: ResponseId


@dataclass(frozen=True)
class ErrorReply:
    """Well-formed reply carrying a remote fault."""

    fault: RpcFault
    id: ResponseId


@dataclass(frozen=True)
class Malformed:
    """Reply that failed structural validation."""

    reason: str


ReplyVariant: TypeAlias = SuccessReply | ErrorReply | Malformed
