"""Request id generation.

Each protocol instance owns one RequestIdGenerator. Ids are unique for the
lifetime of the generator, including when several threads share one client.
No cross-process uniqueness is promised.
"""

import itertools
import threading


class RequestIdGenerator:
    """Thread-safe source of distinct integer request ids."""

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return an id never returned before by this generator."""
        with self._lock:
            return next(self._counter)

    __call__ = next_id
