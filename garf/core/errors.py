"""Error kinds raised by the scoreboard services."""

from __future__ import annotations


class ScoreboardError(Exception):
    """Base class for failures the command layer is expected to report."""


class NotFound(ScoreboardError):
    """A referenced entity does not exist."""


class Conflict(ScoreboardError):
    """A write collides with an existing entity."""


class StorageUnavailable(ScoreboardError):
    """The database could not be reached or a statement failed."""


class InvalidSpeed(ScoreboardError):
    """A submitted speed is outside the accepted range."""


class LayoutNotFound(NotFound):
    def __init__(self, name: str) -> None:
        super().__init__(f"Layout '{name}' is not registered")
        self.name = name


class LayoutConflict(Conflict):
    def __init__(self, name: str) -> None:
        super().__init__(f"Layout '{name}' already exists")
        self.name = name


__all__ = [
    "Conflict",
    "InvalidSpeed",
    "LayoutConflict",
    "LayoutNotFound",
    "NotFound",
    "ScoreboardError",
    "StorageUnavailable",
]
