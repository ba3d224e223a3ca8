"""
===========================================
Data Manipulation Language (DML) Utilities.
===========================================

This module provides the INSERT, UPDATE and DELETE statement builders.
Each returns a Statement whose '?' placeholders line up one-to-one with
its parameters.

Functions:
- insert_builder: INSERT ... VALUES (...) RETURNING *
- update_builder: UPDATE ... SET ... WHERE ... (null data fields skipped)
- delete_builder: DELETE FROM ... WHERE ...

Update and delete always require conditions; statements that would touch
every row are rejected with MalformedRequest.

Usage:
    from sql.dml import insert_builder, update_builder

    insert_builder('users', {'name': 'Alice', 'age': 30})
    # Statement('INSERT INTO users (name, age) VALUES (?, ?) RETURNING *;',
    #           ('Alice', 30))

    update_builder('users', {'age': 31, 'email': None}, {'id': 5})
    # Statement('UPDATE users SET age = ? WHERE id = ?;', (31, 5))
"""

from typing import Optional

from .exceptions import MalformedRequest
from .query_builder import (
    set_builder,
    validate_field_map,
    validate_table_name,
    values_builder,
    where_builder,
)
from .request import FieldMap, Statement


def insert_builder(table: str, data: Optional[FieldMap]) -> Statement:
    """
    Build an INSERT statement returning the inserted row.

    Args:
        table: Table name
        data: Column -> value pairs; column order follows the map's order

    Returns:
        Statement for 'INSERT INTO <table> (<cols>) VALUES (<?...>) RETURNING *;'

    Raises:
        MalformedRequest: If data is absent, empty or not a mapping
    """
    table = validate_table_name(table)
    data = validate_field_map(data, 'data', required=True)

    columns, placeholders, params = values_builder(data)
    sql = f"INSERT INTO {table} ({columns}) VALUES ({placeholders}) RETURNING *;"

    return Statement(sql, tuple(params))


def update_builder(
    table: str,
    data: Optional[FieldMap],
    conditions: Optional[FieldMap]
) -> Statement:
    """
    Build an UPDATE statement.

    Args:
        table: Table name
        data: Column -> new value; None values are left unchanged
        conditions: Equality filters selecting the rows to update

    Returns:
        Statement for 'UPDATE <table> SET a = ?, ... WHERE k = ? AND ...;'

    Raises:
        MalformedRequest: If data or conditions is absent, empty or not a
            mapping, or if every data value is None
    """
    table = validate_table_name(table)
    data = validate_field_map(data, 'data', required=True)
    conditions = validate_field_map(conditions, 'conditions', required=True)

    assignments, set_params = set_builder(data)
    if not assignments:
        raise MalformedRequest("'data' has no non-null values to update")

    where_clause, where_params = where_builder(conditions)
    sql = f"UPDATE {table} SET {assignments}{where_clause}"

    return Statement(sql, tuple(set_params + where_params))


def delete_builder(table: str, conditions: Optional[FieldMap]) -> Statement:
    """
    Build a DELETE statement.

    Args:
        table: Table name
        conditions: Equality filters selecting the rows to delete

    Returns:
        Statement for 'DELETE FROM <table> WHERE k = ? AND ...;'

    Raises:
        MalformedRequest: If conditions is absent, empty or not a mapping
    """
    table = validate_table_name(table)
    conditions = validate_field_map(conditions, 'conditions', required=True)

    where_clause, params = where_builder(conditions)
    sql = f"DELETE FROM {table}{where_clause}"

    return Statement(sql, tuple(params))
