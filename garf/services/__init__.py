"""Service layer helpers."""

from .filters import FilterCriteria, normalize_filters, parse_mention
from .layouts import (
    FOCUS_CATEGORIES,
    find_layout,
    layout_to_dict,
    list_layouts,
    register_layout,
    suggest_focus,
    suggest_layouts,
)
from .leaderboard import (
    LeaderboardRow,
    format_entry,
    paginate,
    query_leaderboard,
    row_to_dict,
)
from .scores import get_score, score_to_dict, submit_score, validate_speed

__all__ = [
    "FOCUS_CATEGORIES",
    "FilterCriteria",
    "LeaderboardRow",
    "find_layout",
    "format_entry",
    "get_score",
    "layout_to_dict",
    "list_layouts",
    "normalize_filters",
    "paginate",
    "parse_mention",
    "query_leaderboard",
    "register_layout",
    "row_to_dict",
    "score_to_dict",
    "submit_score",
    "suggest_focus",
    "suggest_layouts",
    "validate_speed",
]
