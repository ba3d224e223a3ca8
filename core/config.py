"""
================================================
Configuration management for the query client.
================================================

Loads all configuration from environment variables (.env file) and provides
a centralized Config singleton for application-wide access.

Environment variables:
    SQLITE_DB_PATH: Database file path, or ':memory:' (default 'database.db')
    SQLITE_ECHO: Log every SQL statement through SQLAlchemy (default false)
    SQLITE_IMMEDIATE_TRANSACTIONS: Start transactions with BEGIN IMMEDIATE
        (default true)
    LOG_LEVEL: Default application log level (default 'INFO')

Example:
    >>> from core.config import config
    >>>
    >>> engine_url = config.get_connection_string()
    >>> print(f"Database: {config.db_path}")
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

MEMORY_DATABASE = ':memory:'

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass
class DatabaseConfig:
    """Database configuration settings.

    Attributes:
        path: SQLite database file path or ':memory:'
        echo: Enable SQLAlchemy statement logging
        immediate_transactions: Acquire the write lock when a transaction begins
    """

    path: str
    echo: bool = False
    immediate_transactions: bool = True

    @property
    def is_memory(self) -> bool:
        """True when the database lives only in memory."""
        return self.path == MEMORY_DATABASE

    def get_connection_string(self) -> str:
        """Get SQLite connection string.

        Returns:
            SQLAlchemy-compatible SQLite URL ('sqlite://' for in-memory)
        """
        if self.is_memory:
            return "sqlite://"
        return f"sqlite:///{self.path}"


@dataclass
class LoggingConfig:
    """Logging configuration settings.

    Attributes:
        level: Default log level name (DEBUG/INFO/WARNING/ERROR/CRITICAL)
    """

    level: str = 'INFO'


class Config:
    """Centralized configuration manager.

    Attributes:
        db: DatabaseConfig instance with database settings
        logging: LoggingConfig instance with logging settings

    Properties:
        db_path: Database file path
        db_echo: SQLAlchemy echo flag
        immediate_transactions: BEGIN IMMEDIATE flag
        log_level: Default log level

    Example:
        >>> config = Config()
        >>> conn_str = config.get_connection_string()
    """

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.db = DatabaseConfig(
            path=os.getenv('SQLITE_DB_PATH', 'database.db'),
            echo=_env_flag('SQLITE_ECHO', False),
            immediate_transactions=_env_flag('SQLITE_IMMEDIATE_TRANSACTIONS', True)
        )
        self.logging = LoggingConfig(
            level=os.getenv('LOG_LEVEL', 'INFO').upper()
        )

    @property
    def db_path(self) -> str:
        """Get database file path."""
        return self.db.path

    @property
    def db_echo(self) -> bool:
        """Get SQLAlchemy echo flag."""
        return self.db.echo

    @property
    def immediate_transactions(self) -> bool:
        """Get BEGIN IMMEDIATE flag."""
        return self.db.immediate_transactions

    @property
    def log_level(self) -> str:
        """Get default log level."""
        return self.logging.level

    def get_connection_string(self) -> str:
        """Get database connection string."""
        return self.db.get_connection_string()


# Global configuration instance
config = Config()
