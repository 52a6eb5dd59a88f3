"""
Data-access layer for the authentication binding service.

Stores services, identity-to-service bindings and per-host authentication
methods behind a single query/mutation contract with an in-memory and a SQL
implementation.
"""

from .config import AppConfig, get_config, reset_config, set_config
from .exceptions import (
    BaseError,
    BindingNotFoundError,
    ErrorCode,
    RepositoryError,
    StorageFailureError,
    StoreNotConnectedError,
    ValidationError,
)
from .schemas import ApiKeyAuth, AuthMethod, BaseAuthMethod, Binding, HeadersAuth, Service
from .stores import BindingStore, InMemoryStore, SQLStore, create_store, open_store

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "AppConfig",
    "get_config",
    "reset_config",
    "set_config",
    # Errors
    "BaseError",
    "BindingNotFoundError",
    "ErrorCode",
    "RepositoryError",
    "StorageFailureError",
    "StoreNotConnectedError",
    "ValidationError",
    # Records
    "ApiKeyAuth",
    "AuthMethod",
    "BaseAuthMethod",
    "Binding",
    "HeadersAuth",
    "Service",
    # Stores
    "BindingStore",
    "InMemoryStore",
    "SQLStore",
    "create_store",
    "open_store",
]
