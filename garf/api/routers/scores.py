"""Score submission endpoint."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlmodel import Session

from ...core import InvalidSpeed, LayoutNotFound, StorageUnavailable, get_session
from ...services.filters import parse_mention
from ...services.scores import score_to_dict, submit_score, validate_speed
from ..validation import require_text

router = APIRouter(tags=["scores"])


@router.post("/scores", status_code=201)
def upload_score(
    body: Dict[str, Any], request: Request, session: Session = Depends(get_session)
):
    """Submit a score, replacing the caller's previous score on that layout."""

    user = parse_mention(require_text(body, "user"))
    layout = require_text(body, "layout")
    speed = body.get("speed")
    if not user:
        raise HTTPException(400, "User is required")
    if not layout:
        raise HTTPException(400, "Layout is required")
    if not isinstance(speed, int) or isinstance(speed, bool):
        raise HTTPException(400, "Speed must be an integer")

    try:
        validate_speed(speed, request.app.state.max_speed)
        score = submit_score(session, user, layout, speed)
    except InvalidSpeed as exc:
        raise HTTPException(400, str(exc)) from exc
    except LayoutNotFound as exc:
        raise HTTPException(404, str(exc)) from exc
    except StorageUnavailable as exc:
        raise HTTPException(503, str(exc)) from exc

    return score_to_dict(score, layout.lower())


__all__ = ["router"]
