"""
Test fixtures shared by the unit tests.

This module provides store fixtures for both backends, a pinned clock, and
resets process-wide state (config, logger, correlation id) between tests.
"""

from datetime import datetime, timezone

import pytest

from binding_store.config import DatabaseConfig, reset_config
from binding_store.exceptions import clear_correlation_id
from binding_store.stores import InMemoryStore, SQLStore
from binding_store.stores.fixtures import seed_auth_methods, seed_bindings, seed_services
from binding_store.utils.clock import FixedClock
from binding_store.utils.logger import reset_logging


@pytest.fixture(autouse=True)
def reset_global_state():
    """Keep config, logger and correlation id from leaking between tests."""
    reset_config()
    reset_logging()
    clear_correlation_id()
    yield
    reset_config()
    reset_logging()
    clear_correlation_id()


@pytest.fixture
def fixed_instant() -> datetime:
    return datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(fixed_instant: datetime) -> FixedClock:
    return FixedClock(fixed_instant)


@pytest.fixture
def sqlite_config() -> DatabaseConfig:
    """SQLite configuration; the database name passed to setup picks the file."""
    return DatabaseConfig(db_type="sqlite", echo=False)


@pytest.fixture(scope="function")
def memory_store(fixed_clock):
    """In-memory store opened the way the binding service opens it in tests."""
    store = InMemoryStore(clock=fixed_clock)
    store.setup("localhost", "test_db")
    yield store
    store.close()


@pytest.fixture(scope="function")
def sql_store(sqlite_config, fixed_clock):
    """SQL store on a private in-memory SQLite database, loaded with the seed records."""
    store = SQLStore(db_config=sqlite_config, clock=fixed_clock)
    store.setup("localhost", ":memory:")
    store.load(
        services=seed_services(),
        bindings=seed_bindings(),
        auth_methods=seed_auth_methods(),
    )
    yield store
    store.close()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Each contract test runs once per backend."""
    return request.getfixturevalue(f"{request.param}_store")
