"""Database model exports."""

from .layout import Layout
from .score import Score

__all__ = [
    "Layout",
    "Score",
]
