"""Encoders/decoders between DTO structures and wire bytes."""

import json
from abc import ABC, abstractmethod
from typing import Any

from jrpc.core.errors import InvalidArgumentError, InvalidResponseError


class Endec(ABC):
    """Paired encoder/decoder used by protocols.

    Any format works as long as it round-trips mappings, ordered sequences,
    strings, numbers and null.
    """

    @abstractmethod
    def encode(self, value: Any) -> bytes:
        """Turn a DTO into wire bytes."""
        ...

    @abstractmethod
    def decode(self, payload: bytes) -> Any:
        """Turn wire bytes back into a DTO."""
        ...


class JsonEndec(Endec):
    """JSON endec (UTF-8, compact separators)."""

    def encode(self, value: Any) -> bytes:
        try:
            text = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Value is not JSON serializable: {e}") from e
        return text.encode("utf-8")

    def decode(self, payload: bytes) -> Any:
        """Decode a JSON payload. An empty payload decodes to None."""
        if not payload.strip():
            return None
        try:
            return json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidResponseError(f"Invalid JSON: {e}") from e
