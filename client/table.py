"""
Per-table CRUD facade over a Client.
"""

from typing import TYPE_CHECKING, Optional

from sql.request import FieldMap, Operation, OperationRequest

if TYPE_CHECKING:
    from client.client import Client, RowSet


class Table:
    """Basic CRUD operations on one table.

    Attributes:
        client: Client executing the statements
        table_name: Target table
    """

    def __init__(self, client: 'Client', table_name: str):
        self.client = client
        self.table_name = table_name

    def _run(
        self,
        operation: Operation,
        conditions: Optional[FieldMap] = None,
        data: Optional[FieldMap] = None
    ) -> 'RowSet':
        request = OperationRequest(
            table_name=self.table_name,
            operation=operation,
            conditions=conditions,
            data=data
        )
        return self.client.query(request)

    def select(self, conditions: Optional[FieldMap] = None) -> 'RowSet':
        """Rows matching all conditions; every row when conditions is empty."""
        return self._run(Operation.SELECT, conditions=conditions)

    def insert(self, data: FieldMap) -> 'RowSet':
        """Insert one row and return it."""
        return self._run(Operation.INSERT, data=data)

    def update(self, conditions: FieldMap, data: FieldMap) -> 'RowSet':
        """Update matching rows; None values in data are left unchanged."""
        return self._run(Operation.UPDATE, conditions=conditions, data=data)

    def delete(self, conditions: FieldMap) -> 'RowSet':
        """Delete matching rows."""
        return self._run(Operation.DELETE, conditions=conditions)
