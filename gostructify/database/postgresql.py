"""PostgreSQL schema provider."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Final

from sqlalchemy import text
from sqlalchemy.engine import URL

from .connection import fetch_rows
from .introspection import build_table, parse_yes_no, require_names
from .models import Table
from .type_maps import dialect_types

POSTGRES_COLUMN_QUERY: Final = text(
    "SELECT column_name, data_type, is_nullable FROM information_schema.columns "
    "WHERE table_schema = :schema AND table_name = :table "
    "ORDER BY ordinal_position"
)


@dataclass(frozen=True, slots=True)
class PostgreSQL:
    """Resolves tables from a PostgreSQL server.

    Columns are looked up in the schema named after the database unless
    ``schema`` is given.
    """

    hostname: str = "localhost"
    port: int = 5432
    username: str = ""
    password: str = field(default="", repr=False)
    sslmode: str = "disable"
    schema: str | None = None
    dialect: str = "postgresql"

    def connection_url(self, database: str) -> URL:
        return URL.create(
            "postgresql+psycopg2",
            username=self.username or None,
            password=self.password or None,
            host=self.hostname,
            port=self.port,
            database=database,
            query={"sslmode": self.sslmode},
        )

    def fetch_columns(self, database: str, table: str) -> list[tuple[Any, ...]]:
        """Return ``(column_name, data_type, is_nullable)`` rows for a table."""
        return fetch_rows(
            self.connection_url(database),
            POSTGRES_COLUMN_QUERY,
            {"schema": self.schema or database, "table": table},
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
