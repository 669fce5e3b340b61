"""Shared pytest fixtures and configuration for pytest."""

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def restore_jrpc_logger() -> Iterator[None]:
    """Undo configure_logging() side effects so caplog keeps working."""
    jrpc_logger = logging.getLogger("jrpc")
    handlers = list(jrpc_logger.handlers)
    level = jrpc_logger.level
    propagate = jrpc_logger.propagate
    yield
    jrpc_logger.handlers[:] = handlers
    jrpc_logger.setLevel(level)
    jrpc_logger.propagate = propagate
