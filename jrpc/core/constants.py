"""Core constants and paths for jrpc."""

from pathlib import Path

JRPC_DIR_NAME = ".jrpc"


def get_jrpc_dir() -> Path:
    """Get ~/.jrpc (global config directory)."""
    return Path.home() / JRPC_DIR_NAME


def get_default_config_path() -> Path:
    """Get default config file path."""
    return get_jrpc_dir() / "config.json"
