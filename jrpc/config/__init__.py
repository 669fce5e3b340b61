"""Configuration loading and validation."""

from jrpc.config.loader import load_config
from jrpc.config.schema import ClientConfig, ProtocolVersion

__all__ = [
    "ClientConfig",
    "ProtocolVersion",
    "load_config",
]
