"""HTTP command surface for the scoreboard."""

from __future__ import annotations

import logging
from typing import Iterable

from fastapi import APIRouter, FastAPI

from .routers import ALL_ROUTERS

logger = logging.getLogger(__name__)


def register_routes(app: FastAPI, routers: Iterable[APIRouter] = ALL_ROUTERS) -> None:
    """Mount the command routers on ``app``."""

    for router in routers:
        app.include_router(router)
        logger.debug("Mounted %s router", ",".join(map(str, router.tags)) or "untagged")


__all__ = ["register_routes"]
