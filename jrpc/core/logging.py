"""Logging setup for the jrpc namespace.

Library modules only call logging.getLogger(__name__); applications (the CLI
included) call configure_logging() once to attach handlers.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "jrpc"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure stderr (and optionally rotating file) logging for jrpc.

    Safe to call repeatedly: existing handlers on the jrpc logger are
    replaced, not duplicated.

    Args:
        level: Logging level for all handlers.
        log_file: Optional log file path (max 5MB per file, 3 backups).

    Returns:
        The configured jrpc logger.
    """
    jrpc_logger = logging.getLogger(LOGGER_NAME)
    jrpc_logger.setLevel(level)
    jrpc_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    jrpc_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        jrpc_logger.addHandler(file_handler)

    # Don't propagate to root logger
    jrpc_logger.propagate = False
    return jrpc_logger
