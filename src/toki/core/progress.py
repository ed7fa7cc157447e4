"""Progress bar layout.

Splits a fraction into filled and empty cells plus the percentage label.
The unstyled rendering here is the runner's default; the TUI supplies a
coloured renderer built on the same layout.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from rich.text import Text

from toki.config.defaults import PERCENT_WIDTH

PROGRESS_FILLED = "▓"
PROGRESS_EMPTY = "░"

# (fraction, width) -> renderable bar
BarRenderer = Callable[[float, int], Text]


class BarLayout(NamedTuple):
    filled: int
    empty: int
    label: str


def layout_bar(fraction: float, width: int, show_percentage: bool = True) -> BarLayout:
    """Lay out a bar of ``width`` cells, percentage label included.

    ``fraction`` is clamped to [0, 1].
    """
    fraction = max(0.0, min(1.0, fraction))
    bar_width = max(0, width - PERCENT_WIDTH) if show_percentage else max(0, width)
    filled = int(bar_width * fraction)
    label = f" {round(fraction * 100):>3d}%" if show_percentage else ""
    return BarLayout(filled, bar_width - filled, label)


def render_plain_bar(fraction: float, width: int) -> Text:
    layout = layout_bar(fraction, width)
    return Text(PROGRESS_FILLED * layout.filled + PROGRESS_EMPTY * layout.empty + layout.label)


__all__ = [
    "PROGRESS_FILLED",
    "PROGRESS_EMPTY",
    "BarRenderer",
    "BarLayout",
    "layout_bar",
    "render_plain_bar",
]
