"""Score submission with one live score per user and layout."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..core.database import storage_errors
from ..core.errors import InvalidSpeed, LayoutNotFound, StorageUnavailable
from ..core.time import isoformat_utc
from ..models import Layout, Score
from .layouts import find_layout

logger = logging.getLogger(__name__)


def validate_speed(speed: int, maximum: Optional[int] = None) -> int:
    """Boundary check for a submitted speed.

    Storage only requires a non-negative value; ``maximum`` is the command
    layer's plausibility limit and is skipped when ``None``.
    """

    if speed < 0:
        raise InvalidSpeed(f"Speed must be non-negative, got {speed}")
    if maximum is not None and speed > maximum:
        raise InvalidSpeed(f"Speed must be at most {maximum}, got {speed}")
    return speed


def submit_score(session: Session, user_id: str, layout_name: str, speed: int) -> Score:
    """Record ``speed`` as the user's score on a layout, replacing any prior one.

    The delete and insert share one transaction, so the pair always ends with
    exactly one row. Nothing is written when the layout is unknown.
    """

    validate_speed(speed)

    layout = find_layout(session, layout_name)
    if layout is None:
        logger.warning("Rejected score from %s for unknown layout %r", user_id, layout_name)
        raise LayoutNotFound(layout_name.lower())

    with storage_errors(session, "submit score"):
        try:
            previous = session.exec(
                select(Score).where(
                    Score.layout_id == layout.id,
                    Score.user_id == user_id,
                )
            ).all()
            for row in previous:
                session.delete(row)
            # Deletes must reach the database before the insert or the unique
            # constraint on (layout_id, user_id) fires.
            session.flush()

            score = Score(layout_id=layout.id, user_id=user_id, speed=int(speed))
            session.add(score)
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            logger.error(
                "Concurrent submission collided for %s on %r", user_id, layout_name.lower()
            )
            raise StorageUnavailable("Score submission collided, try again") from exc
        session.refresh(score)

    logger.info(
        "Recorded %d WPM for %s on %r (replaced %d)",
        score.speed,
        user_id,
        layout.name,
        len(previous),
    )
    return score


def get_score(session: Session, user_id: str, layout_name: str) -> Optional[Score]:
    """Current score for a user on a layout, if any."""

    with storage_errors(session, "look up score"):
        return session.exec(
            select(Score)
            .join(Layout, Layout.id == Score.layout_id)
            .where(Layout.name == layout_name.lower(), Score.user_id == user_id)
        ).first()


def score_to_dict(score: Score, layout_name: str) -> Dict[str, Any]:
    return {
        "id": score.id,
        "user": score.user_id,
        "layout": layout_name,
        "speed": score.speed,
        "submitted_at": isoformat_utc(score.submitted_at),
    }


__all__ = ["get_score", "score_to_dict", "submit_score", "validate_speed"]
