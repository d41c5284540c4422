"""Database model for registered keyboard layouts."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Layout(SQLModel, table=True):
    """Named layout definition; the name is stored lowercased."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str = ORMField(index=True, unique=True)
    creator: str = ORMField(index=True)
    magic: bool = False
    thumb_alpha: bool = False
    focus: str
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Layout"]
