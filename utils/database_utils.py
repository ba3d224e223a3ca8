"""
==================================================
Database connectivity utilities for SQLite.
==================================================

Provides connection URL building, engine creation and an availability
check for the embedded SQLite database.

Transactions:
    The pysqlite driver normally opens transactions lazily and on its own
    schedule. With ``immediate=True`` the engine disables that behaviour and
    emits ``BEGIN IMMEDIATE`` whenever SQLAlchemy begins a transaction, so
    the write lock is taken as soon as a transaction starts.

Example:
    >>> from utils.database_utils import create_sqlite_engine, get_connection_string
    >>>
    >>> get_connection_string('app.db')
    'sqlite:///app.db'
    >>> engine = create_sqlite_engine(':memory:')
    >>> with engine.connect() as conn:
    ...     conn.exec_driver_sql("SELECT 1").scalar()
    1
"""

import logging
from typing import Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from core.config import MEMORY_DATABASE, DatabaseConfig, config

logger = logging.getLogger(__name__)


class DatabaseConnectionError(Exception):
    """Exception raised when a database connection cannot be opened."""
    pass


def get_connection_string(db_path: Optional[str] = None) -> str:
    """
    Build SQLite connection string.

    Args:
        db_path: Database file path or ':memory:' (defaults to config.db_path)

    Returns:
        SQLite connection URL

    Example:
        >>> get_connection_string(':memory:')
        'sqlite://'
    """
    db_path = db_path if db_path is not None else config.db_path
    return DatabaseConfig(path=db_path).get_connection_string()


def _use_immediate_transactions(engine: Engine) -> None:
    """Register the pysqlite hooks that make every BEGIN an IMMEDIATE one."""

    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_sqlite_engine(
    db_path: Optional[str] = None,
    echo: Optional[bool] = None,
    immediate: Optional[bool] = None
) -> Engine:
    """
    Create SQLAlchemy engine for a SQLite database.

    Args:
        db_path: Database file path or ':memory:' (defaults to config.db_path)
        echo: Enable SQL statement logging (defaults to config.db_echo)
        immediate: Begin transactions with BEGIN IMMEDIATE
            (defaults to config.immediate_transactions)

    Returns:
        Configured SQLAlchemy Engine
    """
    echo = config.db_echo if echo is None else echo
    immediate = config.immediate_transactions if immediate is None else immediate

    engine = create_engine(get_connection_string(db_path), echo=echo)
    if immediate:
        _use_immediate_transactions(engine)
    return engine


def check_database_available(db_path: Optional[str] = None) -> bool:
    """
    Check if the SQLite database can be opened and queried.

    Args:
        db_path: Database file path (defaults to config.db_path)

    Returns:
        True if 'SELECT 1' succeeds, False otherwise
    """
    db_path = db_path if db_path is not None else config.db_path
    engine = create_sqlite_engine(db_path, echo=False, immediate=False)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.debug(f"Database not available at {db_path}: {e}")
        return False
    finally:
        engine.dispose()


def describe_database(db_path: Optional[str] = None) -> str:
    """Human-readable name of the database, for log messages."""
    db_path = db_path if db_path is not None else config.db_path
    return "in-memory database" if db_path == MEMORY_DATABASE else f"'{db_path}'"
