"""
Constants and enums for the binding store.

This module centralizes the magic strings used throughout the package
to keep configuration keys and record tags consistent.
"""

from enum import Enum


class StoreBackend(str, Enum):
    """Available store implementations."""

    MEMORY = "memory"
    SQL = "sql"


class AuthMethodType(str, Enum):
    """Authentication method kinds understood by the store."""

    API_KEY = "api-key"
    HEADERS = "headers"


class LogLevel(str, Enum):
    """Standard logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnvironmentVariable(str, Enum):
    """Standard environment variable names."""

    STORE_BACKEND = "STORE_BACKEND"
    STORE_SERVER = "STORE_SERVER"
    STORE_DATABASE = "STORE_DATABASE"
    DB_TYPE = "DB_TYPE"
    DB_PORT = "DB_PORT"
    DB_USER = "DB_USER"
    DB_PASSWORD = "DB_PASSWORD"
    DB_ECHO = "DB_ECHO"
    LOG_LEVEL = "LOG_LEVEL"


class LogContextKey(str, Enum):
    """Standard keys for logging context."""

    OPERATION = "operation"
    RESULT_COUNT = "result_count"
    SERVER = "server"
    DATABASE = "database"
    BACKEND = "backend"


# Timestamp layout for Binding.created_on / Binding.last_auth
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
