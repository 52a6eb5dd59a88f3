"""Store implementations and the factory that picks one from config."""

from typing import Optional

from ..config import AppConfig, get_config
from ..constants import StoreBackend
from ..utils.clock import SystemClock
from .base_store import BindingStore
from .memory_store import InMemoryStore
from .sql_store import SQLStore


def create_store(
    config: Optional[AppConfig] = None, clock: Optional[SystemClock] = None
) -> BindingStore:
    """
    Build the store selected by ``config.store.backend``.

    The returned store is not connected; call ``setup`` or use ``open_store``.
    """
    config = config or get_config()
    if config.store.backend == StoreBackend.SQL:
        return SQLStore(db_config=config.db, clock=clock)
    return InMemoryStore(clock=clock)


def open_store(
    config: Optional[AppConfig] = None, clock: Optional[SystemClock] = None
) -> BindingStore:
    """Build the configured store and open it on the configured server and database."""
    config = config or get_config()
    store = create_store(config, clock=clock)
    store.setup(config.store.server, config.store.database)
    return store


__all__ = [
    "BindingStore",
    "InMemoryStore",
    "SQLStore",
    "create_store",
    "open_store",
]
