"""Core errors, constants and logging setup."""

from jrpc.core.errors import (
    ConfigError,
    InvalidArgumentError,
    InvalidResponseError,
    JrpcError,
    RpcFaultError,
    TransportFailureError,
)
from jrpc.core.logging import configure_logging

__all__ = [
    "JrpcError",
    "InvalidArgumentError",
    "InvalidResponseError",
    "RpcFaultError",
    "TransportFailureError",
    "ConfigError",
    "configure_logging",
]
