"""Configuration file loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Final, Sequence

import yaml

from .errors import ConfigError

PASSWORD_ENV_VAR: Final[str] = "GOSTRUCTIFY_PASSWORD"

# Keys accepted at the top level of a config file
CONFIG_KEYS: Final[frozenset[str]] = frozenset({
    "connection",
    "databases",
    "tables",
    "directory",
    "file",
    "output",
    "nullable_type",
    "tags",
    "methods",
    "strict",
    "workers",
})


def load_config(config_path: Path) -> dict[str, Any]:
    """Load and validate a gostructify config from a YAML file.

    Args:
        config_path: Path to the config file.

    Returns:
        The parsed config mapping.

    Raises:
        ConfigError: If the file cannot be read, parsed, or has unknown keys.
    """
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}", str(config_path)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", str(config_path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping", str(config_path))

    unknown = sorted(set(data) - CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}", str(config_path))

    connection = data.get("connection", {})
    if not isinstance(connection, dict):
        raise ConfigError("'connection' must be a mapping", str(config_path))

    return data


def split_list(value: str | Sequence[str] | None) -> tuple[str, ...]:
    """Normalize a comma separated string or a sequence into a tuple of names.

    Empty entries are dropped and surrounding whitespace is stripped; order is
    preserved.
    """
    if value is None:
        return ()
    items = value.split(",") if isinstance(value, str) else [str(item) for item in value]
    return tuple(item.strip() for item in items if item.strip())


def password_from_env() -> str | None:
    """Return the password set in the environment, if any."""
    return os.environ.get(PASSWORD_ENV_VAR)
