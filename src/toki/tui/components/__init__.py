"""toki TUI components."""

from .progress import render_progress_bar

__all__ = [
    "render_progress_bar",
]
