import pytest

from gostructify.database.models import Column, Table
from gostructify.database.type_maps import INTEGER, TEXT


def make_column(name, definition=TEXT, nullable=False, database_type="text"):
    return Column(
        name=name,
        database_type=database_type,
        normalized_type=database_type,
        nullable_flag="YES" if nullable else "NO",
        nullable=nullable,
        definition=definition,
    )


@pytest.fixture
def user_accounts():
    return Table(
        name="user_accounts",
        columns=(
            make_column("id", INTEGER, nullable=False, database_type="integer"),
            make_column("email", TEXT, nullable=True, database_type="character varying"),
        ),
        database="app",
    )


@pytest.fixture
def user_account_rows():
    return [
        ("id", "integer", "NO"),
        ("email", "character varying", "YES"),
    ]


@pytest.fixture
def column_factory():
    return make_column
