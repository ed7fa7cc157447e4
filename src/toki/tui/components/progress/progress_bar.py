"""Gradient progress bar renderable.

Draws a fraction as a bar of filled/empty cells, the filled part coloured
with a gradient that spans the whole bar width, followed by the percentage.
"""

from typing import Optional

from rich.text import Text

from toki.core.progress import layout_bar
from ...styles.icons import PROGRESS_EMPTY, PROGRESS_FILLED
from ...styles.theme import TokiTheme, create_gradient, get_theme


def render_progress_bar(
    fraction: float,
    width: int,
    show_percentage: bool = True,
    theme: Optional[TokiTheme] = None,
) -> Text:
    """Render a progress bar.

    Args:
        fraction: Progress between 0.0 and 1.0 (clamped)
        width: Total width in cells, percentage included
        show_percentage: Whether to append the whole percent
        theme: Theme to colour with (defaults to the current theme)

    Returns:
        Styled rich Text
    """
    theme = theme or get_theme()
    layout = layout_bar(fraction, width, show_percentage)
    gradient = create_gradient(
        [theme.gradient_start, theme.gradient_end], layout.filled + layout.empty
    )

    text = Text()
    for color in gradient[: layout.filled]:
        text.append(PROGRESS_FILLED, style=color)
    text.append(PROGRESS_EMPTY * layout.empty, style=theme.fg_subtle)

    if layout.label:
        text.append(layout.label, style=f"bold {theme.fg_base}")

    return text
