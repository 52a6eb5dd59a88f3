"""Utility modules for the binding store."""

from .clock import FixedClock, SystemClock, format_timestamp, utc_now
from .logger import ContextAwareLogger, configure_logging, get_logger, reset_logging

__all__ = [
    # Clock utilities
    "FixedClock",
    "SystemClock",
    "format_timestamp",
    "utc_now",
    # Logging utilities
    "ContextAwareLogger",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
