"""
Schema providers for the supported database dialects.

Every provider exposes ``resolve(database, table) -> Table``. The provider is
picked by explicit dialect name through :func:`create_provider`.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Final, Mapping

from ..shared.errors import ConfigError, DialectError
from .introspection import normalize_type, parse_boolean_flag, parse_yes_no, resolve_type
from .mariadb import MariaDB
from .models import Column, SchemaProvider, Table, TypeDefinition
from .postgresql import PostgreSQL
from .type_maps import TYPE_MAPS, dialect_types
from .vertica import Vertica

__all__ = [
    "Column",
    "MariaDB",
    "PostgreSQL",
    "PROVIDERS",
    "SchemaProvider",
    "Table",
    "TypeDefinition",
    "TYPE_MAPS",
    "Vertica",
    "create_provider",
    "dialect_types",
    "normalize_type",
    "parse_boolean_flag",
    "parse_yes_no",
    "resolve_type",
]

PROVIDERS: Final[Mapping[str, Callable[..., SchemaProvider]]] = {
    "mariadb": partial(MariaDB, dialect="mariadb"),
    "mysql": partial(MariaDB, dialect="mysql"),
    "postgresql": PostgreSQL,
    "vertica": Vertica,
}


def create_provider(dialect: str, **settings: Any) -> SchemaProvider:
    """
    Create the schema provider for a dialect.

    Args:
        dialect: One of ``mariadb``, ``mysql``, ``postgresql`` or ``vertica``
        **settings: Connection settings accepted by that provider

    Returns:
        A provider instance

    Raises:
        DialectError: If the dialect is not supported
        ConfigError: If the settings do not fit the provider
    """
    factory = PROVIDERS.get(dialect)
    if factory is None:
        raise DialectError(dialect, f"unsupported dialect, expected one of {', '.join(PROVIDERS)}")
    try:
        return factory(**settings)
    except TypeError as e:
        raise ConfigError(f"Invalid connection settings for {dialect}: {e}") from e
