"""
Tests for client/table.py.
"""

from unittest.mock import MagicMock

import pytest

from client.table import Table
from sql import Operation, OperationRequest


@pytest.fixture
def users():
    client = MagicMock()
    client.query.return_value = [{"id": 1}]
    return Table(client, "users")


@pytest.mark.unit
def test_select_defaults_to_all_rows(users):
    assert users.select() == [{"id": 1}]

    users.client.query.assert_called_once_with(
        OperationRequest("users", Operation.SELECT, conditions=None, data=None)
    )


@pytest.mark.unit
def test_insert_passes_data(users):
    users.insert({"name": "Alice"})

    users.client.query.assert_called_once_with(
        OperationRequest("users", Operation.INSERT, data={"name": "Alice"})
    )


@pytest.mark.unit
def test_update_passes_conditions_and_data(users):
    users.update({"id": 5}, {"age": 31})

    request = users.client.query.call_args.args[0]
    assert request.operation is Operation.UPDATE
    assert request.conditions == {"id": 5}
    assert request.data == {"age": 31}


@pytest.mark.unit
def test_delete_passes_conditions(users):
    users.delete({"id": 5})

    request = users.client.query.call_args.args[0]
    assert request == OperationRequest("users", Operation.DELETE, conditions={"id": 5})
