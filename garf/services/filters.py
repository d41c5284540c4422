"""Normalisation of raw leaderboard filter input."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

_MENTION_PREFIX = "<@"
_MENTION_SUFFIX = ">"


def parse_mention(raw: str) -> str:
    """Return the identifier inside ``<@identifier>``, or ``raw`` unchanged.

    Input that does not match the mention grammar, including an empty
    identifier, falls through untouched.
    """

    if (
        raw.startswith(_MENTION_PREFIX)
        and raw.endswith(_MENTION_SUFFIX)
        and len(raw) > len(_MENTION_PREFIX) + len(_MENTION_SUFFIX)
    ):
        return raw[len(_MENTION_PREFIX) : -len(_MENTION_SUFFIX)]
    return raw


@dataclass(frozen=True)
class FilterCriteria:
    """Canonical leaderboard filters. ``None`` leaves an axis unconstrained."""

    user: Optional[str] = None
    layout: Optional[str] = None
    magic: Optional[bool] = None
    thumb_alpha: Optional[bool] = None
    focus: Optional[str] = None
    creator: Optional[str] = None

    def is_open(self) -> bool:
        return all(value is None for value in asdict(self).values())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def normalize_filters(
    user: Optional[str] = None,
    layout: Optional[str] = None,
    magic: Optional[bool] = None,
    thumb_alpha: Optional[bool] = None,
    focus: Optional[str] = None,
    creator: Optional[str] = None,
) -> FilterCriteria:
    """Build a FilterCriteria from command input."""

    return FilterCriteria(
        user=parse_mention(user) if user is not None else None,
        layout=layout.lower() if layout is not None else None,
        magic=magic,
        thumb_alpha=thumb_alpha,
        focus=focus,
        creator=parse_mention(creator) if creator is not None else None,
    )


__all__ = ["FilterCriteria", "normalize_filters", "parse_mention"]
