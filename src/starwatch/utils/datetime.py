"""Datetime helpers. All timestamps are timezone-aware UTC."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


def ensure_aware(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes, leave aware ones untouched."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


__all__ = ["utc_now", "ensure_aware"]
