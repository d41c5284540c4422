"""Core configuration and infrastructure helpers."""

from .database import (
    create_db_engine,
    ensure_sqlite_directory,
    get_session,
    storage_errors,
)
from .errors import (
    Conflict,
    InvalidSpeed,
    LayoutConflict,
    LayoutNotFound,
    NotFound,
    ScoreboardError,
    StorageUnavailable,
)
from .time import isoformat_utc, utcnow

__all__ = [
    "Conflict",
    "InvalidSpeed",
    "LayoutConflict",
    "LayoutNotFound",
    "NotFound",
    "ScoreboardError",
    "StorageUnavailable",
    "create_db_engine",
    "ensure_sqlite_directory",
    "get_session",
    "isoformat_utc",
    "storage_errors",
    "utcnow",
]
