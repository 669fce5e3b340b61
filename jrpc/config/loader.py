"""Configuration loading with fail-fast behavior.

Values are taken from, in order of increasing precedence:
1. An explicit config file path, or ~/.jrpc/config.json when none is given
2. Overrides passed by the caller (e.g. CLI flags); None values are ignored
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from jrpc.config.schema import ClientConfig
from jrpc.core.constants import get_default_config_path
from jrpc.core.errors import ConfigError

logger = logging.getLogger(__name__)


def _read_config_file(path: Path) -> dict[str, Any]:
    """Read a client config file into a dict of ClientConfig fields.

    An empty file yields no settings. A UTF-8 BOM is tolerated.

    Raises:
        ConfigError: If the file is unreadable, is not JSON, or does not hold
            a JSON object.
    """
    try:
        content = path.read_text(encoding="utf-8-sig").strip()
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e

    if not content:
        logger.debug("Config file is empty: %s", path)
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {path} must hold an object of client settings, "
            f"got {type(data).__name__}"
        )
    return data


def load_config(
    path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> ClientConfig:
    """Load and validate client configuration.

    Args:
        path: Explicit config file path. Must exist if given.
        overrides: Values applied on top of the file contents.

    Returns:
        Validated ClientConfig object.

    Raises:
        ConfigError: If the file is missing (explicit path only), contains
            invalid JSON, or the merged config fails validation.
    """
    if path is not None:
        source = path
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        data = _read_config_file(path)
    else:
        source = get_default_config_path()
        if source.is_file():
            logger.debug("Loading config file: %s", source)
            data = _read_config_file(source)
        else:
            logger.debug("No config file at %s, using overrides only", source)
            data = {}

    merged = dict(data)
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        config = ClientConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed ({source}): {e}") from e

    logger.debug("Loaded config for %s (protocol %s)", config.url, config.protocol_version)
    return config
