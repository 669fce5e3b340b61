"""Transports that carry encoded JSON-RPC payloads to a remote service."""

from jrpc.transport.base import Transport
from jrpc.transport.http import DEFAULT_TIMEOUT, HttpTransport

__all__ = [
    "Transport",
    "HttpTransport",
    "DEFAULT_TIMEOUT",
]
