"""Database model for submitted typing scores."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Score(SQLModel, table=True):
    """A user's current score on one layout."""

    __table_args__ = (
        UniqueConstraint("layout_id", "user_id", name="uq_score_layout_user"),
    )

    id: Optional[int] = ORMField(default=None, primary_key=True)
    layout_id: int = ORMField(foreign_key="layout.id", index=True)
    user_id: str = ORMField(index=True)
    speed: int = ORMField(ge=0)
    submitted_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Score"]
