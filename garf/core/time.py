"""Timestamp helpers shared by the storage models."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current time as an aware UTC datetime, used for row timestamps."""
    return datetime.now(timezone.utc)


def isoformat_utc(value: datetime | None) -> str | None:
    """Render a stored timestamp for API payloads.

    SQLite drops tzinfo on the way back out, so naive values are treated as
    UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


__all__ = ["isoformat_utc", "utcnow"]
