"""
==================================
Database client package.
==================================

Connection, transaction and per-table access for the SQLite database.

Modules:
    client: Client, TransactionConflict
    table: Table CRUD facade

Example:
    >>> from client import Client
    >>>
    >>> with Client('app.db') as client:
    ...     client.table('users').select({'id': 5})
"""

__version__ = "1.0.0"
__all__ = ['Client', 'ClientError', 'Row', 'RowSet', 'Table', 'TransactionConflict']

from client.client import Client, ClientError, Row, RowSet, TransactionConflict
from client.table import Table
