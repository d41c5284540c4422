"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_routes
from .core import create_db_engine, ensure_sqlite_directory
from .core.config import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_RESET,
    LOG_LEVEL,
    MAX_SPEED,
    PAGE_SIZE,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    ensure_sqlite_directory(engine)
    if app.state.db_reset:
        logger.warning("DB_RESET set, dropping all tables")
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    logger.info("Scoreboard ready on %s", engine.url.render_as_string(hide_password=True))
    yield
    engine.dispose()


def create_app(
    database_url: Optional[str] = None,
    *,
    page_size: int = PAGE_SIZE,
    max_speed: Optional[int] = MAX_SPEED,
    db_reset: bool = DB_RESET,
) -> FastAPI:
    logging.basicConfig(level=LOG_LEVEL)

    app = FastAPI(title="Garf Scoreboard API", version="0.1.0", lifespan=lifespan)
    app.state.engine = create_db_engine(database_url or DATABASE_URL)
    app.state.page_size = page_size
    app.state.max_speed = max_speed
    app.state.db_reset = db_reset

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("garf.app:app", host="127.0.0.1", port=3000, reload=True)
