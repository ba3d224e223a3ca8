"""
==================================================
Connection and transaction client for SQLite.
==================================================

The Client owns one SQLAlchemy connection and at most one open transaction
on it. Statements run inside that transaction when one is open; otherwise
each statement is committed as soon as it has run.

Key Features:
    - Raw execution with positional '?' parameters
    - CRUD requests built by sql.build_statement
    - Single transaction per client; a second begin is refused
    - Per-table facade via client.table(name)

Example:
    >>> from client import Client
    >>>
    >>> with Client(':memory:') as client:
    ...     _ = client.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT)")
    ...     users = client.table('users')
    ...     client.begin_transaction()
    ...     _ = users.insert({'name': 'Alice'})
    ...     client.commit()
    ...     users.select({'name': 'Alice'})
    [{'id': 1, 'name': 'Alice'}]
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence

from sqlalchemy.engine import Connection, CursorResult, Engine, Transaction
from sqlalchemy.exc import SQLAlchemyError

from client.table import Table
from core.config import config
from sql.request import OperationRequest
from sql.statement import build_statement
from utils.database_utils import (
    DatabaseConnectionError,
    create_sqlite_engine,
    describe_database,
)

logger = logging.getLogger(__name__)

Row = Dict[str, Any]
RowSet = List[Row]


class ClientError(Exception):
    """Base exception for client state errors."""
    pass


class TransactionConflict(ClientError):
    """Exception raised when beginning a transaction while one is open.

    The open transaction is left untouched.
    """
    pass


class Client:
    """SQLite client holding a connection and an optional transaction.

    Attributes:
        db_path: Database file path or ':memory:'

    Example:
        >>> client = Client('app.db')
        >>> client.begin_transaction()
        >>> client.table('users').delete({'id': 5})
        >>> client.rollback()
        >>> client.close()
    """

    def __init__(
        self,
        db_path: Optional[str] = None,
        echo: Optional[bool] = None,
        immediate: Optional[bool] = None,
        engine: Optional[Engine] = None
    ):
        """Open a connection to the database.

        Args:
            db_path: Database file path or ':memory:' (defaults to config.db_path)
            echo: Enable SQLAlchemy statement logging (defaults to config)
            immediate: Begin transactions with BEGIN IMMEDIATE (defaults to config)
            engine: Pre-built engine to use instead of creating one

        Raises:
            DatabaseConnectionError: If the connection cannot be opened
        """
        self.db_path = db_path if db_path is not None else config.db_path

        self._owns_engine = engine is None
        self._engine = engine if engine is not None else create_sqlite_engine(
            self.db_path, echo=echo, immediate=immediate
        )
        self._transaction: Optional[Transaction] = None

        try:
            self._connection: Connection = self._engine.connect()
        except SQLAlchemyError as e:
            logger.error(f"Failed to connect to {describe_database(self.db_path)}: {e}")
            if self._owns_engine:
                self._engine.dispose()
            raise DatabaseConnectionError(
                f"Failed to connect to {describe_database(self.db_path)}: {e}"
            ) from e

        logger.debug(f"Connected to {describe_database(self.db_path)}")

    def __enter__(self) -> 'Client':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    @property
    def in_transaction(self) -> bool:
        """True while a transaction begun by this client is open."""
        return self._transaction is not None

    # ── Transactions ────────────────────────────────────────────────

    def begin_transaction(self) -> None:
        """
        Begin a transaction on this client's connection.

        Raises:
            TransactionConflict: If a transaction is already open
        """
        if self._transaction is not None:
            raise TransactionConflict("Transaction already in progress")

        self._transaction = self._connection.begin()
        logger.info("Begin transaction")

    def commit(self) -> None:
        """Commit the open transaction; a no-op when none is open."""
        transaction, self._transaction = self._transaction, None
        if transaction is None:
            return

        logger.info("Commit transaction")
        transaction.commit()

    def rollback(self) -> None:
        """Roll back the open transaction; a no-op when none is open."""
        transaction, self._transaction = self._transaction, None
        if transaction is None:
            return

        logger.info("Rollback transaction")
        transaction.rollback()

    @contextmanager
    def transaction(self) -> Iterator['Client']:
        """
        Run a block inside a transaction.

        Commits when the block finishes, rolls back and re-raises when it
        raises.

        Example:
            >>> with client.transaction():
            ...     client.table('users').update({'id': 5}, {'age': 31})
        """
        self.begin_transaction()
        try:
            yield self
        except BaseException:
            self.rollback()
            raise
        self.commit()

    # ── Execution ───────────────────────────────────────────────────

    @staticmethod
    def _collect_rows(result: CursorResult) -> RowSet:
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings()]

    def execute(self, sql: str, params: Sequence[Any] = ()) -> RowSet:
        """
        Execute SQL with positional '?' parameters.

        Inside an open transaction the statement joins it. Otherwise the
        statement is committed on success and rolled back on failure.

        Args:
            sql: SQL text using '?' placeholders
            params: Values bound left to right

        Returns:
            Rows as dicts; empty for statements that return no rows

        Raises:
            SQLAlchemyError: Driver errors, unmodified
        """
        params = tuple(params)

        if self._transaction is not None:
            logger.debug(f"Querying with transaction: {sql} {params}")
            try:
                return self._collect_rows(self._connection.exec_driver_sql(sql, params))
            except SQLAlchemyError as e:
                logger.error(f"Query failed inside transaction: {e}")
                raise

        logger.debug(f"Querying without transaction: {sql} {params}")
        try:
            rows = self._collect_rows(self._connection.exec_driver_sql(sql, params))
            self._connection.commit()
            return rows
        except SQLAlchemyError as e:
            logger.error(f"Query failed: {e}")
            try:
                self._connection.rollback()
            except SQLAlchemyError as rollback_error:
                # The statement error is the one the caller needs to see
                logger.error(f"Rollback after failed query also failed: {rollback_error}")
            raise

    def query(self, request: OperationRequest) -> RowSet:
        """
        Build and execute a CRUD request.

        Args:
            request: Table, operation and payloads

        Returns:
            Rows returned by the statement

        Raises:
            MalformedRequest: If the request shape is invalid
            UnsupportedValueKind: If a payload holds an array or object
            SQLAlchemyError: Driver errors, unmodified
        """
        statement = build_statement(request)
        return self.execute(statement.text, statement.parameters)

    def table(self, table_name: str) -> Table:
        """Get a CRUD facade bound to one table."""
        return Table(self, table_name)

    # ── Lifecycle ───────────────────────────────────────────────────

    def close(self) -> None:
        """Roll back any open transaction and close the connection."""
        if self._transaction is not None:
            logger.warning("Closing client with an open transaction, rolling back")
            self.rollback()

        self._connection.close()
        if self._owns_engine:
            self._engine.dispose()
