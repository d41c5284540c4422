"""Leaderboard query, ranking and pagination."""

from __future__ import annotations

from typing import Any, Dict, List, NamedTuple, Sequence

from sqlmodel import Session, select

from ..core.database import storage_errors
from ..models import Layout, Score
from .filters import FilterCriteria

DEFAULT_PAGE_SIZE = 10


class LeaderboardRow(NamedTuple):
    user: str
    speed: int
    layout: str
    magic: bool
    thumb_alpha: bool
    focus: str
    creator: str


def query_leaderboard(session: Session, criteria: FilterCriteria) -> List[LeaderboardRow]:
    """Return scores matching every active filter, fastest first.

    Equal speeds keep storage order (score id), so identical queries over
    unchanged data return identical sequences.
    """

    statement = select(
        Score.user_id,
        Score.speed,
        Layout.name,
        Layout.magic,
        Layout.thumb_alpha,
        Layout.focus,
        Layout.creator,
    ).join(Layout, Layout.id == Score.layout_id)

    if criteria.user is not None:
        statement = statement.where(Score.user_id == criteria.user)
    if criteria.layout is not None:
        statement = statement.where(Layout.name == criteria.layout.lower())
    if criteria.magic is not None:
        statement = statement.where(Layout.magic == criteria.magic)
    if criteria.thumb_alpha is not None:
        statement = statement.where(Layout.thumb_alpha == criteria.thumb_alpha)
    if criteria.focus is not None:
        statement = statement.where(Layout.focus == criteria.focus)
    if criteria.creator is not None:
        statement = statement.where(Layout.creator == criteria.creator)

    statement = statement.order_by(Score.speed.desc(), Score.id.asc())

    with storage_errors(session, "query leaderboard"):
        results = session.exec(statement).all()
    return [LeaderboardRow(*result) for result in results]


def format_entry(rank: int, row: LeaderboardRow) -> str:
    return f"#{rank} **{row.speed} WPM**: <@{row.user}> on {row.layout}\n"


def paginate(rows: Sequence[LeaderboardRow], page_size: int = DEFAULT_PAGE_SIZE) -> List[str]:
    """Split ranked rows into pages of formatted lines.

    Ranks run continuously across pages starting at 1. No rows still yields
    one empty page so there is always something to display.
    """

    if page_size < 1:
        raise ValueError("page_size must be at least 1")

    pages: List[str] = []
    for start in range(0, len(rows), page_size):
        chunk = rows[start : start + page_size]
        pages.append(
            "".join(
                format_entry(start + offset + 1, row) for offset, row in enumerate(chunk)
            )
        )
    return pages or [""]


def row_to_dict(rank: int, row: LeaderboardRow) -> Dict[str, Any]:
    return {"rank": rank, **row._asdict()}


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "LeaderboardRow",
    "format_entry",
    "paginate",
    "query_leaderboard",
    "row_to_dict",
]
