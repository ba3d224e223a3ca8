"""
===============================================
SQL statement construction package.
===============================================

This package turns JSON-shaped CRUD requests into parameterized SQL with
'?' placeholders. All functions are pure: they build strings and parameter
tuples and never touch a database.

The package follows a clear organization:
    - coercion.py: JSON scalar -> bound parameter conversion
    - request.py: Operation, OperationRequest and Statement types
    - query_builder.py: Shared clause builders and SELECT (_builder suffix)
    - dml.py: INSERT/UPDATE/DELETE builders
    - statement.py: build_statement dispatch over Operation
    - exceptions.py: MalformedRequest and UnsupportedValueKind

Example:
    >>> from sql import Operation, OperationRequest, build_statement
    >>>
    >>> statement = build_statement(OperationRequest(
    ...     table_name='users',
    ...     operation=Operation.INSERT,
    ...     data={'name': 'Alice', 'age': 30}
    ... ))
    >>> statement.text
    'INSERT INTO users (name, age) VALUES (?, ?) RETURNING *;'
"""

__version__ = "1.0.0"
__all__ = [
    # Types
    'Operation', 'OperationRequest', 'Statement', 'BoundParameter',
    # Builders
    'build_statement', 'select_builder', 'insert_builder', 'update_builder',
    'delete_builder', 'where_builder', 'set_builder', 'values_builder',
    # Coercion
    'coerce_value', 'coerce_values',
    # Errors
    'QueryBuildError', 'MalformedRequest', 'UnsupportedValueKind'
]

from .coercion import BoundParameter, coerce_value, coerce_values
from .dml import delete_builder, insert_builder, update_builder
from .exceptions import MalformedRequest, QueryBuildError, UnsupportedValueKind
from .query_builder import select_builder, set_builder, values_builder, where_builder
from .request import Operation, OperationRequest, Statement
from .statement import build_statement
