"""Time sources for record timestamps."""

from datetime import datetime, timezone

from ..constants import TIMESTAMP_FORMAT


def utc_now() -> datetime:
    """Return current UTC time with timezone info attached."""
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as the ISO-8601 string stored on bindings."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return utc_now()

    def timestamp(self) -> str:
        return format_timestamp(self.now())


class FixedClock(SystemClock):
    """Clock pinned to a single instant, for deterministic timestamps."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def set(self, instant: datetime) -> None:
        self.instant = instant
