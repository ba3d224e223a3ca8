"""
=====================================
Statement construction entry point.
=====================================

Dispatches an OperationRequest to the builder for its operation kind.
The dispatch table is closed over the Operation enum; every member must
have an entry.

Example:
    >>> from sql.request import Operation, OperationRequest
    >>> from sql.statement import build_statement
    >>>
    >>> request = OperationRequest('users', Operation.DELETE, conditions={'id': 5})
    >>> statement = build_statement(request)
    >>> statement.text
    'DELETE FROM users WHERE id = ?;'
    >>> statement.parameters
    (5,)
"""

from typing import Callable, Dict

from .dml import delete_builder, insert_builder, update_builder
from .exceptions import MalformedRequest
from .query_builder import select_builder
from .request import Operation, OperationRequest, Statement

_BUILDERS: Dict[Operation, Callable[[OperationRequest], Statement]] = {
    Operation.SELECT: lambda request: select_builder(request.table_name, request.conditions),
    Operation.INSERT: lambda request: insert_builder(request.table_name, request.data),
    Operation.UPDATE: lambda request: update_builder(
        request.table_name, request.data, request.conditions
    ),
    Operation.DELETE: lambda request: delete_builder(request.table_name, request.conditions),
}


def build_statement(request: OperationRequest) -> Statement:
    """
    Build the parameterized statement for a request.

    Args:
        request: Table, operation kind and payloads

    Returns:
        Statement with one parameter per placeholder

    Raises:
        MalformedRequest: If the operation is not an Operation member or a
            payload has the wrong shape
        UnsupportedValueKind: If a payload value is an array or object
    """
    if not isinstance(request.operation, Operation):
        raise MalformedRequest(f"Unknown operation: {request.operation!r}")
    return _BUILDERS[request.operation](request)
