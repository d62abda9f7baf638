"""Vertica schema provider over ODBC."""

from __future__ import annotations

import logging
from contextlib import closing
from dataclasses import dataclass
from typing import Any, Final

from ..shared.errors import ConnectionFailure, QueryFailure
from .introspection import build_table, parse_boolean_flag, require_names
from .models import Table
from .type_maps import dialect_types

logger = logging.getLogger(__name__)

VERTICA_COLUMN_QUERY: Final[str] = (
    "SELECT column_name, data_type, is_nullable FROM v_catalog.columns "
    "WHERE table_schema = ? AND table_name = ? "
    "ORDER BY ordinal_position"
)


@dataclass(frozen=True, slots=True)
class Vertica:
    """Resolves tables from Vertica through a configured ODBC data source.

    ``v_catalog.columns.is_nullable`` is a boolean, so nullability is parsed
    from boolean-like values rather than "YES"/"NO".
    """

    dsn: str
    schema: str | None = None
    dialect: str = "vertica"

    def connection_string(self) -> str:
        # ex: "DSN=vertica;ResultBufferSize=0;ConnectionLoadBalance=1;"
        return f"DSN={self.dsn};ResultBufferSize=0;ConnectionLoadBalance=1;"

    def fetch_columns(self, database: str, table: str) -> list[tuple[Any, ...]]:
        """Return ``(column_name, data_type, is_nullable)`` rows for a table.

        Raises:
            ConnectionFailure: If the ODBC connection cannot be opened.
            QueryFailure: If the catalog query fails.
        """
        # pyodbc needs an ODBC driver manager at import time
        import pyodbc

        logger.debug("Connecting to ODBC data source %s", self.dsn)
        try:
            connection = pyodbc.connect(self.connection_string())
        except pyodbc.Error as e:
            raise ConnectionFailure(str(e), self.dialect, database, table) from e

        with closing(connection):
            try:
                cursor = connection.cursor()
                cursor.execute(VERTICA_COLUMN_QUERY, self.schema or database, table)
                return [tuple(row) for row in cursor.fetchall()]
            except pyodbc.Error as e:
                raise QueryFailure(str(e), self.dialect, database, table) from e

    def resolve(self, database: str, table: str) -> Table:
        """Build the canonical Table description for ``database.table``."""
        require_names(database, table)
        rows = self.fetch_columns(database, table)
        return build_table(
            rows,
            dialect_types(self.dialect),
            parse_boolean_flag,
            dialect=self.dialect,
            database=database,
            table=table,
        )
