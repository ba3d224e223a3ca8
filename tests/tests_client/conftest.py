"""
Shared fixtures for client/ tests.

Key fixtures:
- fake_engine: FakeEngine wired to a FakeConnection
- fake_client: Client built on fake_engine (no database involved)
- failing_engine: FakeEngine whose statements raise SQLAlchemyError
- memory_client: Client on a real in-memory SQLite database with a 'users' table

The fake classes live in fakes.py so test modules can import them directly.
"""

import pytest
from fakes import FakeConnection, FakeEngine
from sqlalchemy.exc import SQLAlchemyError


@pytest.fixture
def fake_engine():
    """Fake engine with a fresh FakeConnection."""
    return FakeEngine()


@pytest.fixture
def fake_client(fake_engine):
    """Client built on the fake engine."""
    from client.client import Client

    return Client(":memory:", engine=fake_engine)


@pytest.fixture
def failing_engine():
    """Fake engine whose statements all fail."""
    return FakeEngine(FakeConnection(execute_side_effect=SQLAlchemyError("boom")))


@pytest.fixture
def memory_client(users_ddl):
    """Client on a real in-memory SQLite database with a 'users' table."""
    from client.client import Client

    client = Client(":memory:", echo=False, immediate=True)
    client.execute(users_ddl)
    yield client
    client.close()
