"""Layout registry operations."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..core.database import storage_errors
from ..core.errors import LayoutConflict
from ..core.time import isoformat_utc
from ..models import Layout

logger = logging.getLogger(__name__)

# Advisory only; registration accepts any focus string.
FOCUS_CATEGORIES = (
    "sfb",
    "sfs",
    "alt",
    "inroll",
    "outroll",
    "onehands",
    "redirects",
)


def find_layout(session: Session, name: str) -> Optional[Layout]:
    """Look up a layout by name, ignoring case."""

    with storage_errors(session, "look up layout"):
        return session.exec(select(Layout).where(Layout.name == name.lower())).first()


def register_layout(
    session: Session,
    name: str,
    creator: str,
    magic: bool,
    thumb_alpha: bool,
    focus: str,
) -> Layout:
    """Insert a new layout. Raises LayoutConflict if the name is taken."""

    canonical = name.lower()
    if find_layout(session, canonical) is not None:
        logger.warning("Rejected duplicate layout registration for %r", canonical)
        raise LayoutConflict(canonical)

    layout = Layout(
        name=canonical,
        creator=creator,
        magic=magic,
        thumb_alpha=thumb_alpha,
        focus=focus,
    )
    with storage_errors(session, "register layout"):
        session.add(layout)
        try:
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            logger.warning("Layout %r was registered concurrently", canonical)
            raise LayoutConflict(canonical) from exc
        session.refresh(layout)

    logger.info("Registered layout %r by creator %s", layout.name, layout.creator)
    return layout


def list_layouts(session: Session) -> List[Layout]:
    with storage_errors(session, "list layouts"):
        return list(session.exec(select(Layout).order_by(Layout.name)).all())


def suggest_layouts(session: Session, partial: str) -> List[str]:
    """Layout names containing ``partial``, case-insensitively."""

    needle = partial.lower()
    with storage_errors(session, "list layouts"):
        names = session.exec(select(Layout.name).order_by(Layout.name)).all()
    return [name for name in names if needle in name.lower()]


def suggest_focus(partial: str) -> List[str]:
    needle = partial.lower()
    return [focus for focus in FOCUS_CATEGORIES if needle in focus]


def layout_to_dict(layout: Layout) -> Dict[str, Any]:
    """Serialise a layout model to API-friendly dict."""

    return {
        "id": layout.id,
        "name": layout.name,
        "creator": layout.creator,
        "magic": layout.magic,
        "thumb_alpha": layout.thumb_alpha,
        "focus": layout.focus,
        "created_at": isoformat_utc(layout.created_at),
    }


__all__ = [
    "FOCUS_CATEGORIES",
    "find_layout",
    "layout_to_dict",
    "list_layouts",
    "register_layout",
    "suggest_focus",
    "suggest_layouts",
]
