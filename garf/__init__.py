"""Garf: community typing-speed scoreboard for keyboard layouts."""

__version__ = "0.1.0"
