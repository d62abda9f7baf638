"""Shared utilities for gostructify."""

from .config import (
    PASSWORD_ENV_VAR,
    load_config,
    password_from_env,
    split_list,
)
from .naming import (
    to_camel_case,
    to_pascal_case,
)
from .errors import (
    StructifyError,
    ConfigError,
    DialectError,
    GenerationError,
    ConnectionFailure,
    QueryFailure,
    NoColumnsReturned,
    UnrecognizedColumnType,
    UnrecognizedNullability,
    UnrecognizedOption,
    FormattingError,
)

__all__ = [
    # Configuration
    "PASSWORD_ENV_VAR",
    "load_config",
    "password_from_env",
    "split_list",
    # Naming utilities
    "to_camel_case",
    "to_pascal_case",
    # Errors
    "StructifyError",
    "ConfigError",
    "DialectError",
    "GenerationError",
    "ConnectionFailure",
    "QueryFailure",
    "NoColumnsReturned",
    "UnrecognizedColumnType",
    "UnrecognizedNullability",
    "UnrecognizedOption",
    "FormattingError",
]
