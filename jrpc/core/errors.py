"""Typed exception hierarchy for jrpc."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from jrpc.rpc.types import RpcFault


class JrpcError(Exception):
    """Base class for all jrpc errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(JrpcError):
    """Raised when a request or notification violates the protocol's rules.

    This is a caller error (bad method type, keyed params under 1.0, bad id
    type) and is never worth retrying.
    """


class InvalidResponseError(JrpcError):
    """Raised when the remote party sends a structurally malformed reply."""


class RpcFaultError(JrpcError):
    """Raised when the remote party reports an error via a valid error object.

    Attributes:
        fault: The remote-supplied fault (code, message, optional data).
    """

    def __init__(self, fault: RpcFault) -> None:
        self.fault = fault
        super().__init__(fault.message)

    @property
    def code(self) -> int:
        return self.fault.code

    @property
    def data(self) -> Any:
        return self.fault.data


class TransportFailureError(JrpcError):
    """Raised when a reply could not be obtained from the remote endpoint."""

    def __init__(self, endpoint: str, message: str) -> None:
        self.endpoint = endpoint
        super().__init__(message)


class ConfigError(JrpcError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""

