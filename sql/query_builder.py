"""
============================
SQL Query Builder Utilities.
============================

This module provides the low-level clause builders shared by every
statement. All builders follow the _builder naming convention and return
the clause text together with the parameters it binds, collected in the
same pass that emits the placeholders.

Clause Builders:
- where_builder: Build ' WHERE a = ? AND b = ?;' from a conditions map
- set_builder: Build 'a = ?, b = ?' from an update data map (nulls dropped)
- values_builder: Build the column list and '?' list for an INSERT

Query Builders:
- select_builder: Build 'SELECT * FROM table' with an optional WHERE clause

Validation:
- validate_table_name: Reject table names that are not identifiers
- validate_field_map: Check a payload is a mapping keyed by column identifiers

Usage:
    from sql.query_builder import select_builder, where_builder

    clause, params = where_builder({'id': 5, 'active': True})
    # clause == ' WHERE id = ? AND active = ?;'
    # params == [5, True]

    statement = select_builder('users', {'id': 5})
    # statement.text == 'SELECT * FROM users WHERE id = ?;'
"""

import re
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from .coercion import BoundParameter, coerce_value
from .exceptions import MalformedRequest
from .request import PLACEHOLDER, FieldMap, Statement

# Column names and table names are interpolated into the SQL text, so only
# plain identifiers are accepted. Tables may be schema-qualified.
COLUMN_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")
TABLE_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?\Z")


def validate_table_name(table_name: Any) -> str:
    """
    Check that a table name is an identifier, optionally schema-qualified.

    Args:
        table_name: Candidate table name, e.g. 'users' or 'main.users'

    Returns:
        The table name unchanged

    Raises:
        MalformedRequest: If the name is not a string, is blank, or is not
            an identifier
    """
    if not isinstance(table_name, str) or not table_name.strip():
        raise MalformedRequest(f"Table name must be a non-empty string, got {table_name!r}")
    if not TABLE_NAME.match(table_name):
        raise MalformedRequest(f"Table name must be an identifier, got {table_name!r}")
    return table_name


def validate_field_map(
    value: Any,
    name: str,
    required: bool = False
) -> FieldMap:
    """
    Check that a conditions/data payload is usable as a field map.

    Args:
        value: Candidate payload (None is treated as an empty map)
        name: Payload name for error messages ('conditions' or 'data')
        required: If True, the map must contain at least one entry

    Returns:
        The payload, or an empty dict when value is None

    Raises:
        MalformedRequest: If the payload is not a mapping, has a key that is
            not an identifier string, or is empty while required
    """
    if value is None:
        value = {}
    if not isinstance(value, Mapping):
        raise MalformedRequest(
            f"'{name}' must be an object, got {type(value).__name__}"
        )
    for key in value:
        if not isinstance(key, str):
            raise MalformedRequest(f"'{name}' keys must be strings, got {key!r}")
        if not COLUMN_NAME.match(key):
            raise MalformedRequest(f"'{name}' keys must be column identifiers, got {key!r}")
    if required and not value:
        raise MalformedRequest(f"'{name}' must be a non-empty object")
    return value


def _assignments(fields: FieldMap) -> Tuple[List[str], List[BoundParameter]]:
    """Emit '<col> = ?' and its coerced value for each entry in one pass."""
    parts = []
    params = []
    for column, value in fields.items():
        parts.append(f"{column} = {PLACEHOLDER}")
        params.append(coerce_value(value))
    return parts, params


def where_builder(conditions: Optional[FieldMap]) -> Tuple[str, List[BoundParameter]]:
    """
    Build a WHERE clause of AND-joined equality predicates.

    Args:
        conditions: Column -> value filters; None or empty means no filter

    Returns:
        Tuple of (clause, params). The clause carries a leading space and
        the statement terminator, or is '' when there are no conditions.
    """
    conditions = validate_field_map(conditions, 'conditions')
    if not conditions:
        return "", []

    predicates, params = _assignments(conditions)
    return f" WHERE {' AND '.join(predicates)};", params


def set_builder(data: FieldMap) -> Tuple[str, List[BoundParameter]]:
    """
    Build the SET list of an UPDATE.

    Null-valued entries mean "leave unchanged" and are dropped before the
    list is built.

    Args:
        data: Column -> new value assignments

    Returns:
        Tuple of (assignments, params), e.g. ('age = ?, name = ?', [31, 'Al'])
    """
    data = validate_field_map(data, 'data')
    non_null = {column: value for column, value in data.items() if value is not None}

    assignments, params = _assignments(non_null)
    return ", ".join(assignments), params


def values_builder(data: FieldMap) -> Tuple[str, str, List[BoundParameter]]:
    """
    Build the column list and placeholder list of an INSERT.

    Null values are kept and bound as NULL.

    Args:
        data: Column -> value pairs

    Returns:
        Tuple of (columns, placeholders, params), e.g.
        ('name, age', '?, ?', ['Alice', 30])
    """
    data = validate_field_map(data, 'data')
    columns = []
    params = []
    for column, value in data.items():
        columns.append(column)
        params.append(coerce_value(value))

    placeholders = ", ".join([PLACEHOLDER] * len(columns))
    return ", ".join(columns), placeholders, params


def select_builder(
    table: str,
    conditions: Optional[FieldMap] = None
) -> Statement:
    """
    Build a SELECT * statement.

    Args:
        table: Table name
        conditions: Optional equality filters; without them all rows match

    Returns:
        Statement, e.g. 'SELECT * FROM users' or
        'SELECT * FROM users WHERE id = ?;'
    """
    table = validate_table_name(table)
    sql = f"SELECT * FROM {table}"

    where_clause, params = where_builder(conditions)
    sql += where_clause

    return Statement(sql, tuple(params))
