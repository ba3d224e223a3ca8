"""
=====================================
Request and statement data structures.
=====================================

Plain data carriers shared by the statement builders and the client:

- Operation: the closed set of supported operations
- OperationRequest: what the caller wants done to which table
- Statement: the built SQL text and its ordered bound parameters

A FieldMap is any ``Mapping[str, scalar]``; dicts keep insertion order,
which is the column order used in the generated SQL.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from .coercion import BoundParameter

FieldMap = Mapping[str, Any]

PLACEHOLDER = '?'


class Operation(Enum):
    """Supported CRUD operations."""

    SELECT = 'select'
    INSERT = 'insert'
    UPDATE = 'update'
    DELETE = 'delete'


@dataclass(frozen=True)
class OperationRequest:
    """A single CRUD request against one table.

    Attributes:
        table_name: Target table
        operation: Operation kind
        conditions: Equality filters, AND-joined (select/update/delete)
        data: Column values (insert) or assignments (update)
    """

    table_name: str
    operation: Operation
    conditions: Optional[FieldMap] = None
    data: Optional[FieldMap] = None


@dataclass(frozen=True)
class Statement:
    """Parameterized SQL text with its positional parameters.

    Attributes:
        text: SQL using '?' placeholders
        parameters: One bound value per placeholder, in placeholder order
    """

    text: str
    parameters: Tuple[BoundParameter, ...] = field(default_factory=tuple)

    @property
    def placeholder_count(self) -> int:
        """Number of '?' placeholders in the SQL text.

        Built statements only interpolate identifier table and column names,
        so every '?' in their text is a placeholder.
        """
        return self.text.count(PLACEHOLDER)
