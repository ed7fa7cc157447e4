"""Progress component package."""

from .progress_bar import render_progress_bar

__all__ = [
    "render_progress_bar",
]
