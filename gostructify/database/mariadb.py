"""MariaDB and MySQL schema provider."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Final

from sqlalchemy import text
from sqlalchemy.engine import URL

from .connection import fetch_rows
from .introspection import build_table, parse_yes_no, require_names
from .models import Table
from .type_maps import dialect_types

MARIADB_COLUMN_QUERY: Final = text(
    "SELECT COLUMN_NAME, DATA_TYPE, IS_NULLABLE FROM INFORMATION_SCHEMA.COLUMNS "
    "WHERE TABLE_SCHEMA = :schema AND TABLE_NAME = :table "
    "ORDER BY ORDINAL_POSITION"
)


@dataclass(frozen=True, slots=True)
class MariaDB:
    """Resolves tables from a MariaDB or MySQL server.

    The same provider serves both dialects; ``dialect`` only changes the name
    reported in errors and the type table it is looked up under.
    """

    hostname: str = "localhost"
    port: int = 3306
    username: str = ""
    password: str = field(default="", repr=False)
    dialect: str = "mariadb"

    def connection_url(self, database: str) -> URL:
        return URL.create(
            "mysql+mysqlconnector",
            username=self.username or None,
            password=self.password or None,
            host=self.hostname,
            port=self.port,
            database=database,
        )

    def fetch_columns(self, database: str, table: str) -> list[tuple[Any, ...]]:
        """Return ``(name, data_type, is_nullable)`` rows for a table."""
        return fetch_rows(
            self.connection_url(database),
            MARIADB_COLUMN_QUERY,
            {"schema": database, "table": table},
            dialect=self.dialect,
            database=database,
            table=table,
        )

    def resolve(self, database: str, table: str) -> Table:
        """Build the canonical Table description for ``database.table``."""
        require_names(database, table)
        rows = self.fetch_columns(database, table)
        return build_table(
            rows,
            dialect_types(self.dialect),
            parse_yes_no,
            dialect=self.dialect,
            database=database,
            table=table,
        )
