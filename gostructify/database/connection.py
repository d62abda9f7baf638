"""SQLAlchemy plumbing shared by the MariaDB/MySQL and PostgreSQL providers."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy import create_engine
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool
from sqlalchemy.sql.elements import TextClause

from ..shared.errors import ConnectionFailure, QueryFailure

logger = logging.getLogger(__name__)


def _describe(error: SQLAlchemyError) -> str:
    """Prefer the driver's own message over SQLAlchemy's wrapped one."""
    original = getattr(error, "orig", None)
    return str(original if original is not None else error)


def fetch_rows(
    url: URL,
    query: TextClause,
    params: Mapping[str, Any],
    *,
    dialect: str,
    database: str,
    table: str,
) -> list[tuple[Any, ...]]:
    """Run a metadata query on a fresh, unpooled connection.

    The engine is disposed before returning so no connection outlives the
    call.

    Raises:
        ConnectionFailure: If the connection cannot be opened.
        QueryFailure: If the query fails or its rows cannot be read.
    """
    engine = create_engine(url, poolclass=NullPool)
    try:
        logger.debug("Connecting to %s as %s", url.render_as_string(hide_password=True), dialect)
        try:
            connection = engine.connect()
        except SQLAlchemyError as e:
            raise ConnectionFailure(_describe(e), dialect, database, table) from e

        with connection:
            try:
                result = connection.execute(query, dict(params))
                return [tuple(row) for row in result]
            except SQLAlchemyError as e:
                raise QueryFailure(_describe(e), dialect, database, table) from e
    finally:
        engine.dispose()
