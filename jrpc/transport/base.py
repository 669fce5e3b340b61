"""Transport contract.

A transport takes an already-encoded request payload and returns the raw
reply payload. Failures to obtain a reply raise TransportFailureError naming
the endpoint. Transports never retry.
"""

from abc import ABC, abstractmethod
from typing import Any


class Transport(ABC):
    """Delivers one encoded payload and returns the raw reply."""

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """Identity of the remote endpoint, used in error messages."""
        ...

    @abstractmethod
    async def send(self, payload: bytes) -> bytes:
        """Send payload and return the reply bytes (may be empty).

        Raises:
            TransportFailureError: If the endpoint is unreachable or does not respond.
        """
        ...

    async def close(self) -> None:
        """Release any held resources."""

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
