"""toki TUI Styles Package.

Contains theme definitions and glyphs.
"""

from .theme import TokiTheme, blend_colors, create_gradient, get_theme
from .icons import PROGRESS_EMPTY, PROGRESS_FILLED

__all__ = [
    "TokiTheme",
    "blend_colors",
    "create_gradient",
    "get_theme",
    "PROGRESS_EMPTY",
    "PROGRESS_FILLED",
]
