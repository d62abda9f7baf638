"""Canonical table and column descriptions produced by schema providers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class TypeDefinition:
    """Go type spellings for one database type.

    The three fields are alternative nullability representations of the same
    value, not alternative precisions.
    """

    plain_type: str
    guregu_type: str
    sql_type: str


@dataclass(frozen=True, slots=True)
class Column:
    """A table column resolved against a dialect's type table."""

    name: str
    database_type: str
    normalized_type: str
    nullable_flag: Any
    nullable: bool
    definition: TypeDefinition


@dataclass(frozen=True, slots=True)
class Table:
    """A table and its columns, in information-schema order."""

    name: str
    columns: tuple[Column, ...]
    database: str = ""


class SchemaProvider(Protocol):
    """Resolves a table's columns from one database dialect."""

    dialect: str

    def resolve(self, database: str, table: str) -> Table:
        ...
