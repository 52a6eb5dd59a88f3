"""
Centralized configuration management for the binding store.

This module provides a unified configuration system with support for:
- Environment variables
- Backend selection (in-memory or SQL)
- Validation using Pydantic
"""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import EnvironmentVariable, LogLevel, StoreBackend
from .exceptions import ErrorCode, ValidationError


class StoreConfig(BaseModel):
    """Which store to build and which session to open on it."""

    model_config = ConfigDict(validate_default=True)

    backend: StoreBackend = Field(
        default_factory=lambda: os.getenv(
            EnvironmentVariable.STORE_BACKEND.value, StoreBackend.MEMORY.value
        ),
        description="Store implementation",
    )
    server: str = Field(
        default_factory=lambda: os.getenv(EnvironmentVariable.STORE_SERVER.value, "localhost"),
        description="Server address passed to setup()",
    )
    database: str = Field(
        default_factory=lambda: os.getenv(EnvironmentVariable.STORE_DATABASE.value, "test_db"),
        description="Database name passed to setup()",
    )


class DatabaseConfig(BaseModel):
    """Connection settings for the SQL backend."""

    db_type: str = Field(
        default_factory=lambda: os.getenv(EnvironmentVariable.DB_TYPE.value, "sqlite"),
        description="sqlite or postgres",
    )
    port: str = Field(
        default_factory=lambda: os.getenv(EnvironmentVariable.DB_PORT.value, "5432"),
        description="Database port (postgres only)",
    )
    username: str = Field(
        default_factory=lambda: os.getenv(EnvironmentVariable.DB_USER.value, ""),
        description="Database user (postgres only)",
    )
    password: str = Field(
        default_factory=lambda: os.getenv(EnvironmentVariable.DB_PASSWORD.value, ""),
        description="Database password (postgres only)",
    )
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    echo: bool = Field(
        default_factory=lambda: os.getenv(EnvironmentVariable.DB_ECHO.value, "false").lower()
        == "true",
        description="Echo SQL statements",
    )

    def get_connection_string(self, server: str, database: str) -> str:
        """Build the SQLAlchemy URL for ``database`` on ``server``."""
        if self.db_type.lower() == "postgres":
            if not all([server, database, self.username]):
                raise ValidationError(
                    "Missing required Postgres configuration parameters",
                    error_code=ErrorCode.MISSING_REQUIRED,
                    field="database_config",
                    value={"server": server, "database": database, "username": self.username},
                )
            return (
                f"postgresql://{self.username}:{self.password}@"
                f"{server}:{self.port}/{database}"
            )
        elif self.db_type.lower() == "sqlite":
            return f"sqlite:///{database}"
        raise ValidationError(
            f"Unsupported database type: {self.db_type}",
            error_code=ErrorCode.INVALID_FORMAT,
            field="db_type",
            value=self.db_type,
        )

    def __repr__(self) -> str:
        """String representation with masked password for security."""
        return (
            f"DatabaseConfig("
            f"db_type='{self.db_type}', "
            f"port='{self.port}', "
            f"username='{self.username}', "
            f"password='***')"
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default_factory=lambda: os.getenv(EnvironmentVariable.LOG_LEVEL.value, LogLevel.INFO.value),
        description="Logging level",
    )

    @field_validator("level")
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {level.value for level in LogLevel}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


class AppConfig(BaseModel):
    """Main application configuration."""

    store: StoreConfig = Field(default_factory=StoreConfig, description="Store selection")
    db: DatabaseConfig = Field(default_factory=DatabaseConfig, description="SQL backend settings")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create configuration from environment variables."""
        return cls()


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def set_config(config: AppConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config
    _config = None
