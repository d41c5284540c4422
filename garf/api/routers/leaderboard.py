"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlmodel import Session

from ...core import StorageUnavailable, get_session
from ...services.filters import normalize_filters
from ...services.leaderboard import paginate, query_leaderboard, row_to_dict

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard")
def get_leaderboard(
    request: Request,
    user: Optional[str] = None,
    layout: Optional[str] = None,
    magic: Optional[bool] = None,
    thumb_alpha: Optional[bool] = None,
    focus: Optional[str] = None,
    creator: Optional[str] = None,
    page: Optional[int] = None,
    session: Session = Depends(get_session),
):
    """Ranked scores matching all given filters, split into pages."""

    criteria = normalize_filters(
        user=user,
        layout=layout,
        magic=magic,
        thumb_alpha=thumb_alpha,
        focus=focus,
        creator=creator,
    )
    try:
        rows = query_leaderboard(session, criteria)
    except StorageUnavailable as exc:
        raise HTTPException(503, str(exc)) from exc

    page_size = request.app.state.page_size
    pages = paginate(rows, page_size)
    page_count = len(pages)
    entries = [row_to_dict(rank, row) for rank, row in enumerate(rows, start=1)]
    if page is not None:
        if page < 1 or page > page_count:
            raise HTTPException(404, f"Page {page} out of range (1-{page_count})")
        pages = [pages[page - 1]]
        entries = entries[(page - 1) * page_size : page * page_size]

    return {
        "filters": criteria.to_dict(),
        "total": len(rows),
        "page_count": page_count,
        "pages": pages,
        "entries": entries,
    }


__all__ = ["router"]
