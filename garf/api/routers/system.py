"""System-level API endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter

router = APIRouter(tags=["system"])

HELP_TITLE = "Welcome to Garf Bot!"
HELP_MESSAGE = (
    "Garf keeps track of the highest scores in AKL, and the layouts used. "
    "To see the leaderboard, use `/leaderboard`. To put in your own scores, "
    "use `/upload_score` with your layout and speed. Feel free to upload your "
    "top scores on whatever layouts you like, even Qw\\*rty and Dv\\*rak. If "
    "the command returns an error, the layout probably isn't uploaded yet. To "
    "upload a layout, use `/upload_layout` with the layout name, the creator "
    "(@cmini if the creator isn't here), whether the layout uses magic and/or "
    "thumb alpha, and the main focus of the layout, like roll or alt for "
    "example. To get the leaderboard filtered by these properties, you can use "
    "`/leaderboard` with extra arguments. You can also view scores beyond the "
    "top 10 with the `page` argument."
)


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/help")
def help_text() -> Dict[str, str]:
    """Describe the bot's commands."""

    return {"title": HELP_TITLE, "what_this_is_for": HELP_MESSAGE}


__all__ = ["router"]
