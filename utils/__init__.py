"""
==========================
Utility Functions Package.
==========================

Reusable helpers for database connectivity.

Modules:
    database_utils: SQLite engine creation and availability checks
"""

__version__ = "1.0.0"
__all__ = [
    'DatabaseConnectionError',
    'check_database_available',
    'create_sqlite_engine',
    'describe_database',
    'get_connection_string',
]

from .database_utils import (
    DatabaseConnectionError,
    check_database_available,
    create_sqlite_engine,
    describe_database,
    get_connection_string,
)
