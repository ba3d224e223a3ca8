"""
==============================
Statement construction errors.
==============================

Exceptions raised while turning an operation request into a parameterized
SQL statement. Both are raised before anything reaches the database, so a
failed build never leaves a partial statement behind and never touches an
in-flight transaction.

Hierarchy:
    QueryBuildError
    ├── MalformedRequest: a required map is absent, empty or not map-shaped
    └── UnsupportedValueKind: a leaf value is not a JSON scalar
"""

from typing import Any


class QueryBuildError(Exception):
    """Base exception for all statement construction failures."""
    pass


class MalformedRequest(QueryBuildError):
    """Exception raised when a request's shape cannot produce a statement.

    Raised for absent or empty ``data`` on insert/update, absent or empty
    ``conditions`` on update/delete, non-mapping payloads and blank table
    names.
    """
    pass


class UnsupportedValueKind(QueryBuildError):
    """Exception raised when a value cannot be bound as a SQL parameter.

    Arrays and objects are rejected outright rather than flattened or
    serialized.

    Attributes:
        value: The offending value
        kind: Short name of the value's kind (e.g. 'array', 'object')
    """

    def __init__(self, value: Any, kind: str):
        self.value = value
        self.kind = kind
        super().__init__(f"Unsupported value kind '{kind}': {value!r}")
