import sys
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError, ProgrammingError

from gostructify.database import (
    PROVIDERS,
    MariaDB,
    PostgreSQL,
    Vertica,
    create_provider,
)
from gostructify.database.connection import fetch_rows
from gostructify.database.mariadb import MARIADB_COLUMN_QUERY
from gostructify.database.postgresql import POSTGRES_COLUMN_QUERY
from gostructify.database.type_maps import INTEGER, TEXT
from gostructify.database.vertica import VERTICA_COLUMN_QUERY
from gostructify.shared.errors import (
    ConfigError,
    ConnectionFailure,
    DialectError,
    NoColumnsReturned,
    QueryFailure,
    UnrecognizedColumnType,
)


class FakeOdbcError(Exception):
    pass


def fake_pyodbc(connection=None, connect_error=None):
    module = SimpleNamespace(Error=FakeOdbcError, connect=MagicMock())
    if connect_error is not None:
        module.connect.side_effect = connect_error
    else:
        module.connect.return_value = connection
    return module


class TestCreateProvider:
    def test_known_dialects(self):
        assert set(PROVIDERS) == {"mariadb", "mysql", "postgresql", "vertica"}

    def test_mariadb(self):
        provider = create_provider("mariadb", hostname="db", port=3307, username="root", password="pw")
        assert isinstance(provider, MariaDB)
        assert provider.dialect == "mariadb"
        assert provider.port == 3307

    def test_mysql_uses_mariadb_provider(self):
        provider = create_provider("mysql", username="root")
        assert isinstance(provider, MariaDB)
        assert provider.dialect == "mysql"

    def test_postgresql(self):
        provider = create_provider("postgresql", sslmode="require", schema="public")
        assert isinstance(provider, PostgreSQL)
        assert provider.sslmode == "require"
        assert provider.schema == "public"

    def test_vertica(self):
        provider = create_provider("vertica", dsn="warehouse")
        assert isinstance(provider, Vertica)
        assert provider.dsn == "warehouse"

    def test_unknown_dialect(self):
        with pytest.raises(DialectError, match="expected one of mariadb, mysql, postgresql, vertica"):
            create_provider("oracle")

    def test_invalid_settings(self):
        with pytest.raises(ConfigError, match="Invalid connection settings for vertica"):
            create_provider("vertica", hostname="localhost")

    def test_password_not_in_repr(self):
        provider = create_provider("postgresql", password="hunter2")
        assert "hunter2" not in repr(provider)


class TestMariaDB:
    def test_connection_url(self):
        provider = MariaDB(hostname="db.internal", port=3307, username="app", password="pw")
        url = provider.connection_url("shop")
        assert url.drivername == "mysql+mysqlconnector"
        assert url.host == "db.internal"
        assert url.port == 3307
        assert url.database == "shop"
        assert url.username == "app"
        assert "pw" not in url.render_as_string(hide_password=True)

    def test_fetch_columns_queries_information_schema(self):
        provider = MariaDB(username="root", password="pw")
        with patch("gostructify.database.mariadb.fetch_rows", return_value=[]) as mock_fetch:
            provider.fetch_columns("test", "users")

        args, kwargs = mock_fetch.call_args
        assert args[1] is MARIADB_COLUMN_QUERY
        assert args[2] == {"schema": "test", "table": "users"}
        assert kwargs == {"dialect": "mariadb", "database": "test", "table": "users"}

    def test_resolve(self):
        rows = [("id", "int(11)", "NO"), ("email", "varchar(255)", "YES")]
        with patch.object(MariaDB, "fetch_columns", return_value=rows):
            table = MariaDB().resolve("app", "user_accounts")

        assert [column.name for column in table.columns] == ["id", "email"]
        assert table.columns[0].definition is INTEGER
        assert table.columns[1].definition is TEXT
        assert table.columns[1].nullable

    def test_resolve_does_not_exist(self):
        with patch.object(MariaDB, "fetch_columns", return_value=[]):
            with pytest.raises(NoColumnsReturned) as exc_info:
                MariaDB().resolve("test", "does_not_exist")
        assert "test.does_not_exist" in str(exc_info.value)

    def test_resolve_unmapped_type(self):
        rows = [("location", "geometry", "YES")]
        with patch.object(MariaDB, "fetch_columns", return_value=rows):
            with pytest.raises(UnrecognizedColumnType):
                MariaDB().resolve("test", "places")

    def test_resolve_rejects_empty_names(self):
        with patch.object(MariaDB, "fetch_columns") as mock_fetch:
            with pytest.raises(ValueError):
                MariaDB().resolve("", "users")
        mock_fetch.assert_not_called()

    def test_mysql_errors_report_dialect(self):
        with patch.object(MariaDB, "fetch_columns", return_value=[]):
            with pytest.raises(NoColumnsReturned) as exc_info:
                MariaDB(dialect="mysql").resolve("test", "missing")
        assert exc_info.value.dialect == "mysql"


class TestPostgreSQL:
    def test_connection_url_carries_sslmode(self):
        provider = PostgreSQL(hostname="pg", port=5433, username="app", sslmode="require")
        url = provider.connection_url("shop")
        assert url.drivername == "postgresql+psycopg2"
        assert url.port == 5433
        assert url.query["sslmode"] == "require"

    def test_schema_defaults_to_database(self):
        with patch("gostructify.database.postgresql.fetch_rows", return_value=[]) as mock_fetch:
            PostgreSQL().fetch_columns("app", "users")
        args, _ = mock_fetch.call_args
        assert args[1] is POSTGRES_COLUMN_QUERY
        assert args[2] == {"schema": "app", "table": "users"}

    def test_explicit_schema(self):
        with patch("gostructify.database.postgresql.fetch_rows", return_value=[]) as mock_fetch:
            PostgreSQL(schema="public").fetch_columns("app", "users")
        args, _ = mock_fetch.call_args
        assert args[2] == {"schema": "public", "table": "users"}

    def test_resolve(self, user_account_rows):
        with patch.object(PostgreSQL, "fetch_columns", return_value=user_account_rows):
            table = PostgreSQL().resolve("app", "user_accounts")
        assert table.database == "app"
        assert [column.normalized_type for column in table.columns] == [
            "integer",
            "character varying",
        ]

    def test_resolve_jsonb_is_binary(self):
        rows = [("payload", "jsonb", "NO")]
        with patch.object(PostgreSQL, "fetch_columns", return_value=rows):
            table = PostgreSQL().resolve("app", "events")
        assert table.columns[0].definition.plain_type == "[]byte"


class TestFetchRows:
    def _engine(self):
        engine = MagicMock()
        connection = MagicMock()
        engine.connect.return_value = connection
        return engine, connection

    def test_returns_rows_and_disposes(self):
        engine, connection = self._engine()
        connection.execute.return_value = [("id", "int", "NO")]
        url = MariaDB().connection_url("test")

        with patch("gostructify.database.connection.create_engine", return_value=engine):
            rows = fetch_rows(
                url,
                MARIADB_COLUMN_QUERY,
                {"schema": "test", "table": "users"},
                dialect="mariadb",
                database="test",
                table="users",
            )

        assert rows == [("id", "int", "NO")]
        connection.execute.assert_called_once_with(
            MARIADB_COLUMN_QUERY, {"schema": "test", "table": "users"}
        )
        engine.dispose.assert_called_once()

    def test_connection_failure(self):
        engine, _ = self._engine()
        engine.connect.side_effect = OperationalError("connect", {}, Exception("Access denied"))
        url = MariaDB().connection_url("test")

        with patch("gostructify.database.connection.create_engine", return_value=engine):
            with pytest.raises(ConnectionFailure) as exc_info:
                fetch_rows(url, MARIADB_COLUMN_QUERY, {}, dialect="mariadb", database="test", table="t")

        assert "Access denied" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OperationalError)
        engine.dispose.assert_called_once()

    def test_query_failure(self):
        engine, connection = self._engine()
        connection.execute.side_effect = ProgrammingError("SELECT", {}, Exception("syntax error"))
        url = PostgreSQL().connection_url("app")

        with patch("gostructify.database.connection.create_engine", return_value=engine):
            with pytest.raises(QueryFailure) as exc_info:
                fetch_rows(
                    url, POSTGRES_COLUMN_QUERY, {}, dialect="postgresql", database="app", table="t"
                )

        assert exc_info.value.dialect == "postgresql"
        assert "syntax error" in str(exc_info.value)
        engine.dispose.assert_called_once()


class TestVertica:
    def test_connection_string(self):
        assert Vertica(dsn="vertica").connection_string() == (
            "DSN=vertica;ResultBufferSize=0;ConnectionLoadBalance=1;"
        )

    def test_fetch_columns(self):
        connection = MagicMock()
        cursor = connection.cursor.return_value
        cursor.fetchall.return_value = [("id", "int", False)]
        module = fake_pyodbc(connection)

        with patch.dict(sys.modules, {"pyodbc": module}):
            rows = Vertica(dsn="warehouse").fetch_columns("analytics", "events")

        assert rows == [("id", "int", False)]
        module.connect.assert_called_once_with(
            "DSN=warehouse;ResultBufferSize=0;ConnectionLoadBalance=1;"
        )
        cursor.execute.assert_called_once_with(VERTICA_COLUMN_QUERY, "analytics", "events")
        connection.close.assert_called_once()

    def test_fetch_columns_with_schema(self):
        connection = MagicMock()
        cursor = connection.cursor.return_value
        cursor.fetchall.return_value = []
        module = fake_pyodbc(connection)

        with patch.dict(sys.modules, {"pyodbc": module}):
            Vertica(dsn="warehouse", schema="public").fetch_columns("analytics", "events")

        cursor.execute.assert_called_once_with(VERTICA_COLUMN_QUERY, "public", "events")

    def test_connection_failure(self):
        module = fake_pyodbc(connect_error=FakeOdbcError("Data source name not found"))

        with patch.dict(sys.modules, {"pyodbc": module}):
            with pytest.raises(ConnectionFailure, match="Data source name not found"):
                Vertica(dsn="missing").fetch_columns("analytics", "events")

    def test_query_failure_closes_connection(self):
        connection = MagicMock()
        connection.cursor.return_value.execute.side_effect = FakeOdbcError("permission denied")
        module = fake_pyodbc(connection)

        with patch.dict(sys.modules, {"pyodbc": module}):
            with pytest.raises(QueryFailure):
                Vertica(dsn="warehouse").fetch_columns("analytics", "events")

        connection.close.assert_called_once()

    def test_resolve_parses_boolean_nullability(self):
        rows = [("id", "int", False), ("note", "long varchar", True)]
        with patch.object(Vertica, "fetch_columns", return_value=rows):
            table = Vertica(dsn="warehouse").resolve("analytics", "events")

        assert [column.nullable for column in table.columns] == [False, True]
        assert table.columns[1].definition is TEXT
