"""Custom exceptions for gostructify."""

from __future__ import annotations

from typing import Any


class StructifyError(Exception):
    """Base exception for all gostructify errors."""


class ConfigError(StructifyError):
    """Raised for invalid configuration files or option values."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        full_message = f"{message}" if not source else f"[{source}] {message}"
        super().__init__(full_message)


class DialectError(StructifyError):
    """Raised when a dialect name has no schema provider or type table."""

    def __init__(self, dialect: str, message: str = "unsupported dialect") -> None:
        self.dialect = dialect
        super().__init__(f"Dialect '{dialect}': {message}")


class GenerationError(StructifyError):
    """Base exception for failures that abort one table's generation."""

    def __init__(self, message: str, dialect: str, database: str, table: str) -> None:
        self.dialect = dialect
        self.database = database
        self.table = table
        super().__init__(f"[{dialect}] {database}.{table}: {message}")


class ConnectionFailure(GenerationError):
    """Raised when the database cannot be reached or authenticated against."""


class QueryFailure(GenerationError):
    """Raised when the metadata query is rejected or cannot be read."""


class NoColumnsReturned(GenerationError):
    """Raised when the information schema returns no columns for a table."""

    def __init__(self, dialect: str, database: str, table: str) -> None:
        super().__init__(
            "no columns returned from the information schema",
            dialect,
            database,
            table,
        )


class UnrecognizedColumnType(GenerationError):
    """Raised when a database type has no mapping for the active dialect."""

    def __init__(
        self,
        dialect: str,
        database: str,
        table: str,
        raw_type: str,
        normalized_type: str | None = None,
        column: str | None = None,
    ) -> None:
        self.raw_type = raw_type
        self.normalized_type = normalized_type if normalized_type is not None else raw_type
        self.column = column
        message = f"unrecognized column type '{raw_type}'"
        if self.normalized_type != raw_type:
            message += f" (normalized to '{self.normalized_type}')"
        if column:
            message = f"column '{column}': {message}"
        super().__init__(message, dialect, database, table)


class UnrecognizedNullability(GenerationError):
    """Raised when a nullability flag uses an encoding the dialect does not define."""

    def __init__(
        self,
        dialect: str,
        database: str,
        table: str,
        flag: Any,
        column: str | None = None,
    ) -> None:
        self.flag = flag
        self.column = column
        message = f"unrecognized nullability flag {flag!r}"
        if column:
            message = f"column '{column}': {message}"
        super().__init__(message, dialect, database, table)


class UnrecognizedOption(StructifyError):
    """Raised in strict mode for an unknown tag kind or method option."""

    def __init__(self, kind: str, option: str) -> None:
        self.kind = kind
        self.option = option
        super().__init__(f"Unrecognized {kind} option: '{option}'")


class FormattingError(StructifyError):
    """Raised when the external Go formatter rejects the generated source."""

    def __init__(self, tool: str, stderr: str) -> None:
        self.tool = tool
        self.stderr = stderr
        super().__init__(f"{tool} failed: {stderr.strip()}")
