"""
========================================================
Comprehensive pytest suite for utils/database_utils.py
========================================================

Sections:
---------
1. Unit tests - Connection strings and engine creation (patched)
2. Integration tests - Real SQLite engines and BEGIN IMMEDIATE hooks
3. Edge case tests - Unavailable databases

Available markers:
------------------
unit, integration, edge_case

How to Execute:
---------------
All tests:          pytest tests/tests_utils/test_database_utils.py -v
By category:        pytest tests/tests_utils/test_database_utils.py -m unit
"""

from unittest.mock import patch

import pytest
from sqlalchemy import event

from utils.database_utils import (
    check_database_available,
    create_sqlite_engine,
    describe_database,
    get_connection_string,
)

# ====================
# Mock Helper Classes
# ====================

class FakeConfig:
    """Mock config object for testing."""
    def __init__(self):
        self.db_path = 'configured.db'
        self.db_echo = True
        self.immediate_transactions = False


@pytest.fixture
def mock_config():
    """Provide mock configuration."""
    fake = FakeConfig()
    with patch('utils.database_utils.config', fake):
        yield fake


# ===============
# 1. UNIT TESTS
# ===============

@pytest.mark.unit
def test_get_connection_string_defaults(mock_config):
    assert get_connection_string() == 'sqlite:///configured.db'


@pytest.mark.unit
def test_get_connection_string_memory(mock_config):
    assert get_connection_string(':memory:') == 'sqlite://'


@pytest.mark.unit
def test_get_connection_string_custom_path(mock_config):
    assert get_connection_string('/var/data/app.db') == 'sqlite:////var/data/app.db'


@pytest.mark.unit
def test_create_sqlite_engine_uses_config_defaults(mock_config):
    with patch('utils.database_utils.create_engine') as mock_create_engine:
        engine = create_sqlite_engine()

    mock_create_engine.assert_called_once_with('sqlite:///configured.db', echo=True)
    assert engine is mock_create_engine.return_value


@pytest.mark.unit
def test_create_sqlite_engine_overrides(mock_config):
    with patch('utils.database_utils.create_engine') as mock_create_engine:
        create_sqlite_engine('other.db', echo=False, immediate=False)

    mock_create_engine.assert_called_once_with('sqlite:///other.db', echo=False)


@pytest.mark.unit
def test_describe_database(mock_config):
    assert describe_database(':memory:') == 'in-memory database'
    assert describe_database('app.db') == "'app.db'"
    assert describe_database() == "'configured.db'"


# ======================
# 2. INTEGRATION TESTS
# ======================

def _capture_statements(engine):
    statements = []

    @event.listens_for(engine, "before_cursor_execute")
    def _capture(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    return statements


@pytest.mark.integration
def test_immediate_engine_emits_begin_immediate():
    engine = create_sqlite_engine(':memory:', echo=False, immediate=True)
    statements = _capture_statements(engine)

    with engine.connect() as conn:
        with conn.begin():
            conn.exec_driver_sql("SELECT 1")

    engine.dispose()
    assert "BEGIN IMMEDIATE" in statements
    assert statements.index("BEGIN IMMEDIATE") < statements.index("SELECT 1")


@pytest.mark.integration
def test_immediate_engine_disables_driver_transactions():
    engine = create_sqlite_engine(':memory:', echo=False, immediate=True)

    with engine.connect() as conn:
        assert conn.connection.dbapi_connection.isolation_level is None

    engine.dispose()


@pytest.mark.integration
def test_plain_engine_does_not_emit_begin_immediate():
    engine = create_sqlite_engine(':memory:', echo=False, immediate=False)
    statements = _capture_statements(engine)

    with engine.connect() as conn:
        with conn.begin():
            conn.exec_driver_sql("SELECT 1")

    engine.dispose()
    assert "BEGIN IMMEDIATE" not in statements


@pytest.mark.integration
def test_check_database_available_file(tmp_path):
    assert check_database_available(str(tmp_path / 'app.db')) is True


@pytest.mark.integration
def test_check_database_available_memory():
    assert check_database_available(':memory:') is True


# ====================
# 3. EDGE CASE TESTS
# ====================

@pytest.mark.edge_case
def test_check_database_available_missing_directory(tmp_path):
    """A path whose directory does not exist cannot be opened."""
    assert check_database_available(str(tmp_path / 'missing' / 'app.db')) is False
