"""Application settings and environment helpers."""

from __future__ import annotations

import os
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Storage --------------------------------------------------------------------
GARFDB_PATH = os.getenv("GARFDB_PATH", "/var/lib/garf/scores.db")
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{GARFDB_PATH}"
DB_RESET = _env_bool("DB_RESET", False)


# Leaderboard behaviour ------------------------------------------------------
PAGE_SIZE = _env_int("PAGE_SIZE", 10)
if PAGE_SIZE < 1:
    raise RuntimeError("PAGE_SIZE must be at least 1")

# Scores arrive as 16-bit unsigned values from the command layer.
MAX_SPEED = _env_int("MAX_SPEED", 65535)


# Runtime behaviour ----------------------------------------------------------
# Empty unless configured; the command layer is usually called server-side.
ALLOWED_CORS_ORIGINS = _unique(_split_csv(os.getenv("ALLOWED_CORS_ORIGINS")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_RESET",
    "GARFDB_PATH",
    "LOG_LEVEL",
    "MAX_SPEED",
    "PAGE_SIZE",
]
