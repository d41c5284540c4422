"""Request body field checks shared by the routers."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import HTTPException


def require_text(body: Dict[str, Any], key: str) -> str:
    """Return ``body[key]`` stripped; missing means empty, non-strings are a 400."""

    value = body.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise HTTPException(400, f"'{key}' must be a string")
    return value.strip()


def require_bool(body: Dict[str, Any], key: str) -> bool:
    value = body.get(key, False)
    if not isinstance(value, bool):
        raise HTTPException(400, f"'{key}' must be a boolean")
    return value


__all__ = ["require_bool", "require_text"]
