"""Layout registration and lookup endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from ...core import LayoutConflict, StorageUnavailable, get_session
from ...services.filters import parse_mention
from ...services.layouts import (
    layout_to_dict,
    list_layouts,
    register_layout,
    suggest_focus,
    suggest_layouts,
)
from ..validation import require_bool, require_text

router = APIRouter(tags=["layouts"])


@router.post("/layouts", status_code=201)
def upload_layout(body: Dict[str, Any], session: Session = Depends(get_session)):
    """Register a new layout."""

    name = require_text(body, "name")
    creator = require_text(body, "creator")
    focus = require_text(body, "focus")
    if not name:
        raise HTTPException(400, "Layout name is required")
    if not creator:
        raise HTTPException(400, "Creator is required")
    if not focus:
        raise HTTPException(400, "Focus is required")

    try:
        layout = register_layout(
            session,
            name=name,
            creator=parse_mention(creator),
            magic=require_bool(body, "magic"),
            thumb_alpha=require_bool(body, "thumb_alpha"),
            focus=focus,
        )
    except LayoutConflict as exc:
        raise HTTPException(409, str(exc)) from exc
    except StorageUnavailable as exc:
        raise HTTPException(503, str(exc)) from exc
    return layout_to_dict(layout)


@router.get("/layouts")
def get_layouts(session: Session = Depends(get_session)):
    """List all registered layouts."""

    try:
        layouts = list_layouts(session)
    except StorageUnavailable as exc:
        raise HTTPException(503, str(exc)) from exc
    return [layout_to_dict(layout) for layout in layouts]


@router.get("/layouts/autocomplete")
def autocomplete_layout(q: str = "", session: Session = Depends(get_session)):
    try:
        return suggest_layouts(session, q)
    except StorageUnavailable as exc:
        raise HTTPException(503, str(exc)) from exc


@router.get("/focus/autocomplete")
def autocomplete_focus(q: str = ""):
    return suggest_focus(q)


__all__ = ["router"]
