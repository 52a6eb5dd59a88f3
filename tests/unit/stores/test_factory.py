"""Tests for create_store and open_store."""

import os
from unittest.mock import patch

from binding_store.config import AppConfig, DatabaseConfig, StoreConfig, set_config
from binding_store.stores import InMemoryStore, SQLStore, create_store, open_store
from binding_store.utils.clock import FixedClock


class TestCreateStore:
    """Test backend selection."""

    def test_default_is_memory(self):
        """Test the in-memory store is the default backend."""
        with patch.dict(os.environ, {}, clear=True):
            store = create_store()

        assert isinstance(store, InMemoryStore)
        assert store.connected is False

    def test_sql_backend(self, sqlite_config):
        """Test the SQL backend receives the configured database settings."""
        config = AppConfig(store=StoreConfig(backend="sql"), db=sqlite_config)

        store = create_store(config)

        assert isinstance(store, SQLStore)
        assert store.db_config is sqlite_config

    def test_backend_from_environment(self):
        """Test STORE_BACKEND selects the backend through the global config."""
        with patch.dict(os.environ, {"STORE_BACKEND": "sql", "DB_TYPE": "sqlite"}):
            store = create_store()

        assert isinstance(store, SQLStore)

    def test_clock_is_passed_through(self, fixed_clock: FixedClock):
        """Test the injected clock reaches the store."""
        store = create_store(AppConfig(store=StoreConfig(backend="memory")), clock=fixed_clock)

        assert store.clock is fixed_clock


class TestOpenStore:
    """Test open_store."""

    def test_opens_memory_store_on_configured_session(self):
        """Test open_store calls setup with the configured server and database."""
        set_config(AppConfig(store=StoreConfig(backend="memory", server="srv", database="db1")))

        store = open_store()

        assert store.connected is True
        assert store.server == "srv"
        assert store.database == "db1"
        assert len(store.query_bindings("", "")) == 3
        store.close()

    def test_opens_sql_store(self):
        """Test an opened SQL store is connected and empty."""
        config = AppConfig(
            store=StoreConfig(backend="sql", database=":memory:"),
            db=DatabaseConfig(db_type="sqlite"),
        )

        with open_store(config) as store:
            assert isinstance(store, SQLStore)
            assert store.query_services("") == []

        assert store.connected is False
