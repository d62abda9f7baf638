"""Normalization and resolution of information-schema rows.

Schema providers only differ in how they connect and which metadata query
they run. Everything that happens to the returned rows, type normalization,
type lookup and nullability parsing, is shared here so each dialect gets the
same treatment.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Final, Iterable, Mapping, Optional, Sequence

from ..shared.errors import (
    NoColumnsReturned,
    UnrecognizedColumnType,
    UnrecognizedNullability,
)
from .models import Column, Table, TypeDefinition

logger = logging.getLogger(__name__)

# Matches "(255)" and "(10,2)" size/precision groups
_PARAMETERS_PATTERN: Final = re.compile(r"\(\s*\d+\s*(?:,\s*\d+\s*)?\)")
_WHITESPACE_PATTERN: Final = re.compile(r"\s+")

_YES_NO: Final[Mapping[str, bool]] = {"YES": True, "NO": False}
_BOOLEAN_FLAGS: Final[Mapping[str, bool]] = {
    "t": True,
    "true": True,
    "1": True,
    "f": False,
    "false": False,
    "0": False,
}

NullableParser = Callable[[Any], Optional[bool]]


def normalize_type(raw_type: str) -> str:
    """Strip size and precision parameters from a raw database type.

    Examples:
        >>> normalize_type("varchar(255)")
        'varchar'
        >>> normalize_type("numeric(10, 2)")
        'numeric'
        >>> normalize_type("timestamp(6) without time zone")
        'timestamp without time zone'
    """
    stripped = _PARAMETERS_PATTERN.sub("", raw_type)
    return _WHITESPACE_PATTERN.sub(" ", stripped).strip()


def parse_yes_no(flag: Any) -> bool | None:
    """Parse an information_schema ``IS_NULLABLE`` value ("YES"/"NO")."""
    if not isinstance(flag, str):
        return None
    return _YES_NO.get(flag.strip().upper())


def parse_boolean_flag(flag: Any) -> bool | None:
    """Parse a boolean-like nullability value (bool, "t"/"f", "true"/"false", "1"/"0")."""
    if isinstance(flag, bool):
        return flag
    if isinstance(flag, int):
        return {1: True, 0: False}.get(flag)
    if isinstance(flag, str):
        return _BOOLEAN_FLAGS.get(flag.strip().lower())
    return None


def resolve_type(
    raw_type: str,
    type_map: Mapping[str, TypeDefinition],
    *,
    dialect: str,
    database: str,
    table: str,
    column: str | None = None,
) -> tuple[str, TypeDefinition]:
    """Normalize a raw type and look it up in a dialect type table.

    Returns:
        The normalized type name and its TypeDefinition.

    Raises:
        UnrecognizedColumnType: If the normalized type has no mapping.
    """
    normalized = normalize_type(raw_type)
    definition = type_map.get(normalized)
    if definition is None:
        raise UnrecognizedColumnType(dialect, database, table, raw_type, normalized, column)
    return normalized, definition


def build_table(
    rows: Iterable[Sequence[Any]],
    type_map: Mapping[str, TypeDefinition],
    parse_nullable: NullableParser,
    *,
    dialect: str,
    database: str,
    table: str,
) -> Table:
    """Build a Table from ``(name, data_type, is_nullable)`` rows.

    Row order is kept as the field order of the generated struct.

    Raises:
        UnrecognizedColumnType: If any column type has no mapping.
        UnrecognizedNullability: If a nullability flag cannot be parsed.
        NoColumnsReturned: If there are no rows.
    """
    columns: list[Column] = []
    for name, raw_type, flag in rows:
        name = str(name)
        normalized, definition = resolve_type(
            str(raw_type),
            type_map,
            dialect=dialect,
            database=database,
            table=table,
            column=name,
        )
        nullable = parse_nullable(flag)
        if nullable is None:
            raise UnrecognizedNullability(dialect, database, table, flag, name)
        columns.append(
            Column(
                name=name,
                database_type=str(raw_type),
                normalized_type=normalized,
                nullable_flag=flag,
                nullable=nullable,
                definition=definition,
            )
        )

    if not columns:
        raise NoColumnsReturned(dialect, database, table)

    logger.debug("Resolved %d column(s) for %s.%s (%s)", len(columns), database, table, dialect)
    return Table(name=table, columns=tuple(columns), database=database)


def require_names(database: str, table: str) -> None:
    """Validate that both the database and table names are given."""
    if not database or not database.strip():
        raise ValueError("database name must be a non-empty string")
    if not table or not table.strip():
        raise ValueError("table name must be a non-empty string")
