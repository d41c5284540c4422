"""Database engine construction and session helpers."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from .errors import StorageUnavailable

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str) -> Engine:
    """Build an engine for ``database_url``.

    SQLite engines get foreign key enforcement switched on for every
    connection. An in-memory SQLite URL shares a single connection so that
    all sessions see the same database.
    """

    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(database_url)

    connect_args = {"check_same_thread": False}
    if url.database in (None, "", ":memory:"):
        engine = create_engine(
            database_url, connect_args=connect_args, poolclass=StaticPool
        )
    else:
        engine = create_engine(database_url, connect_args=connect_args)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def ensure_sqlite_directory(engine: Engine) -> None:
    """Create the parent directory of a file-backed SQLite database."""

    if engine.url.get_backend_name() != "sqlite":
        return
    database = engine.url.database
    if database and database != ":memory:":
        Path(database).resolve().parent.mkdir(parents=True, exist_ok=True)


def get_session(request: Request) -> Iterator[Session]:
    """FastAPI dependency that yields a session bound to the app's engine."""

    with Session(request.app.state.engine) as session:
        yield session


@contextmanager
def storage_errors(session: Session, action: str) -> Iterator[None]:
    """Roll back and re-raise infrastructure failures as StorageUnavailable.

    Constraint violations are not infrastructure failures; IntegrityError
    propagates unchanged so callers can map it to a domain error.
    """

    try:
        yield
    except IntegrityError:
        raise
    except DBAPIError as exc:
        session.rollback()
        logger.error("Storage failure while trying to %s: %s", action, exc)
        raise StorageUnavailable(f"Could not {action}: storage unavailable") from exc


__all__ = [
    "create_db_engine",
    "ensure_sqlite_directory",
    "get_session",
    "storage_errors",
]
