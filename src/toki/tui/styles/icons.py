"""Glyphs used by the timer display."""

# Progress Bar Characters
from toki.core.progress import PROGRESS_EMPTY, PROGRESS_FILLED

__all__ = ["PROGRESS_EMPTY", "PROGRESS_FILLED"]
