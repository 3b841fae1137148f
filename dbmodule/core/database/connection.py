"""
Database connection handle.

``Database`` wraps exactly one live SQLAlchemy connection and exposes only
what the layer needs: executing a statement with positional parameters and
iterating the rows of a query. Statements are handed to the driver as
written (``exec_driver_sql``), so the catalog SQL uses the driver's own
parameter style (``?`` for SQLite).

Use it as a context manager so the connection is released on every path::

    with Database.open("./project.db") as database:
        database.execute(catalog.create_user)
"""

from __future__ import annotations

from contextlib import closing, contextmanager
from typing import Any, Iterator, Optional, Sequence

from sqlalchemy import Connection, Engine, Row
from sqlalchemy.exc import SQLAlchemyError

from dbmodule.core.errors import DatabaseConnectionError, SQLError
from dbmodule.core.logging_config import get_logger

from .utils import create_engine

logger = get_logger(__name__)


class Database:
    """Handle over a single database connection."""

    def __init__(self, engine: Engine, connection: Connection, data_source: str) -> None:
        """Initialize the handle. Prefer ``Database.open``.

        Args:
            engine: Engine the connection was checked out from
            connection: Live connection all statements go through
            data_source: Identifier the handle was opened with
        """
        self._engine = engine
        self._connection: Optional[Connection] = connection
        self.data_source = data_source

    @classmethod
    def open(cls, data_source: str) -> "Database":
        """Open a connection to ``data_source``.

        Args:
            data_source: File path, ``:memory:`` or database URL

        Returns:
            An open handle

        Raises:
            DatabaseConnectionError: The store cannot be opened
        """
        try:
            engine = create_engine(data_source)
        except (SQLAlchemyError, ImportError) as e:
            # ImportError: the URL names a dialect whose driver is not installed
            raise DatabaseConnectionError(data_source, str(e)) from e
        try:
            connection = engine.connect()
        except SQLAlchemyError as e:
            engine.dispose()
            raise DatabaseConnectionError(data_source, str(e)) from e
        logger.info(f"Opened database {data_source}")
        return cls(engine, connection, data_source)

    @property
    def closed(self) -> bool:
        return self._connection is None

    def close(self) -> None:
        """Release the connection and the engine. Safe to call twice."""
        if self._connection is None:
            return
        try:
            self._connection.close()
        finally:
            self._connection = None
            self._engine.dispose()
            logger.info(f"Closed database {self.data_source}")

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _checked(self, sql: str) -> Connection:
        if self._connection is None:
            raise SQLError("Database handle is closed", statement=sql)
        if not sql or not sql.strip():
            raise SQLError("Empty SQL statement", statement=sql)
        return self._connection

    def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        """Execute one statement with positional parameters.

        Args:
            sql: SQL text
            params: Values bound to the statement placeholders in order

        Returns:
            Number of rows affected as reported by the driver

        Raises:
            SQLError: The statement could not be prepared or executed
        """
        connection = self._checked(sql)
        try:
            with closing(connection.exec_driver_sql(sql, tuple(params))) as result:
                return result.rowcount
        except SQLAlchemyError as e:
            raise SQLError(f"Statement failed: {e}", statement=sql) from e

    @contextmanager
    def query(self, sql: str) -> Iterator[Iterator[Row]]:
        """Run a query and yield an iterator over its rows.

        The cursor is closed when the ``with`` block exits, whichever way it
        exits. Driver errors raised while fetching are reported as
        ``SQLError``.

        Raises:
            SQLError: The query could not be executed or its rows fetched
        """
        connection = self._checked(sql)
        try:
            result = connection.exec_driver_sql(sql)
        except SQLAlchemyError as e:
            raise SQLError(f"Query failed: {e}", statement=sql) from e
        with closing(result):
            if not result.returns_rows:
                raise SQLError("Statement does not return rows", statement=sql)
            yield _fetch(result, sql)


def _fetch(result, sql: str) -> Iterator[Row]:
    try:
        for row in result:
            yield row
    except SQLAlchemyError as e:
        raise SQLError(f"Fetching rows failed: {e}", statement=sql) from e
