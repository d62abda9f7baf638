"""Per-dialect mappings from normalized database type names to Go types."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from ..shared.errors import DialectError
from .models import TypeDefinition

INTEGER: Final = TypeDefinition("int", "null.Int", "sql.NullInt64")
TEXT: Final = TypeDefinition("string", "null.String", "sql.NullString")
TEMPORAL: Final = TypeDefinition("time.Time", "null.Time", "sql.NullTime")
FLOAT: Final = TypeDefinition("float64", "null.Float", "sql.NullFloat64")
BINARY: Final = TypeDefinition("[]byte", "[]byte", "[]byte")
BOOLEAN: Final = TypeDefinition("bool", "null.Bool", "sql.NullBool")

BUCKETS: Final[Mapping[str, TypeDefinition]] = MappingProxyType({
    "integer": INTEGER,
    "text": TEXT,
    "temporal": TEMPORAL,
    "float": FLOAT,
    "binary": BINARY,
    "boolean": BOOLEAN,
})

MARIADB_TYPES: Final[Mapping[str, TypeDefinition]] = MappingProxyType({
    # integer fields
    "tinyint": INTEGER,
    "int": INTEGER,
    "smallint": INTEGER,
    "mediumint": INTEGER,
    "bigint": INTEGER,
    # string fields
    "char": TEXT,
    "set": TEXT,
    "enum": TEXT,
    "varchar": TEXT,
    "tinytext": TEXT,
    "longtext": TEXT,
    "mediumtext": TEXT,
    "text": TEXT,
    # time fields
    "date": TEMPORAL,
    "datetime": TEMPORAL,
    "time": TEMPORAL,
    "year": TEMPORAL,
    "timestamp": TEMPORAL,
    # float fields
    "decimal": FLOAT,
    "double": FLOAT,
    "float": FLOAT,
    # binary fields
    "binary": BINARY,
    "blob": BINARY,
    "tinyblob": BINARY,
    "longblob": BINARY,
    "mediumblob": BINARY,
    "varbinary": BINARY,
})

POSTGRES_TYPES: Final[Mapping[str, TypeDefinition]] = MappingProxyType({
    # integer fields
    "bigint": INTEGER,
    "bigserial": INTEGER,
    "integer": INTEGER,
    "int": INTEGER,
    "int4": INTEGER,
    "smallint": INTEGER,
    "int2": INTEGER,
    "smallserial": INTEGER,
    "serial2": INTEGER,
    "serial": INTEGER,
    "serial4": INTEGER,
    # string fields
    "char": TEXT,
    "character": TEXT,
    "character varying": TEXT,
    "varchar": TEXT,
    "cidr": TEXT,
    "inet": TEXT,
    "json": TEXT,
    "macaddr": TEXT,
    "text": TEXT,
    "uuid": TEXT,
    "xml": TEXT,
    # time fields
    "date": TEMPORAL,
    "time": TEMPORAL,
    "time without time zone": TEMPORAL,
    "time with time zone": TEMPORAL,
    "timetz": TEMPORAL,
    "timestamp": TEMPORAL,
    "timestamp without time zone": TEMPORAL,
    "timestamp with time zone": TEMPORAL,
    "timestamptz": TEMPORAL,
    "interval": TEMPORAL,
    # float fields
    "double precision": FLOAT,
    "float8": FLOAT,
    "money": FLOAT,
    "numeric": FLOAT,
    "decimal": FLOAT,
    "real": FLOAT,
    # binary fields
    "bit": BINARY,
    "bit varying": BINARY,
    "bytea": BINARY,
    "jsonb": BINARY,
    # bool
    "boolean": BOOLEAN,
})

VERTICA_TYPES: Final[Mapping[str, TypeDefinition]] = MappingProxyType({
    # integer fields
    "tinyint": INTEGER,
    "int": INTEGER,
    "smallint": INTEGER,
    "mediumint": INTEGER,
    "bigint": INTEGER,
    # string fields
    "char": TEXT,
    "character": TEXT,
    "varchar": TEXT,
    "character varying": TEXT,
    "long varchar": TEXT,
    # time fields
    "date": TEMPORAL,
    "datetime": TEMPORAL,
    "smalldatetime": TEMPORAL,
    "time": TEMPORAL,
    "timestamp": TEMPORAL,
    # float fields
    "float": FLOAT,
    "float8": FLOAT,
    "float16": FLOAT,
    "float32": FLOAT,
    "float64": FLOAT,
    "numeric": FLOAT,
    "number": FLOAT,
    "double precision": FLOAT,
    "real precision": FLOAT,
    # binary fields
    "binary": BINARY,
    "varbinary": BINARY,
    "binary varying": BINARY,
    "bytea": BINARY,
    "raw": BINARY,
    # bool
    "boolean": BOOLEAN,
})

TYPE_MAPS: Final[Mapping[str, Mapping[str, TypeDefinition]]] = MappingProxyType({
    "mariadb": MARIADB_TYPES,
    "mysql": MARIADB_TYPES,
    "postgresql": POSTGRES_TYPES,
    "vertica": VERTICA_TYPES,
})


def dialect_types(dialect: str) -> Mapping[str, TypeDefinition]:
    """Return the type table for a dialect.

    Raises:
        DialectError: If the dialect has no type table.
    """
    try:
        return TYPE_MAPS[dialect]
    except KeyError:
        raise DialectError(dialect, "no type mapping table") from None
