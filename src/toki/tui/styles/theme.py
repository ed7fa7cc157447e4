"""toki TUI theme: colour palette and blending helpers."""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class TokiTheme:
    """Colour palette for the timer display."""

    name: str = "toki-dark"

    # Progress gradient (purple -> pink)
    gradient_start: str = "#5A56E0"
    gradient_end: str = "#EE6FF8"

    # Foreground Colors
    fg_base: str = "#FFFFFF"          # Percentage text
    fg_subtle: str = "#606060"        # Empty bar cells


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple."""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB to hex color."""
    return f"#{r:02x}{g:02x}{b:02x}"


def blend_colors(color1: str, color2: str, ratio: float = 0.5) -> str:
    """Blend two colors together.

    Args:
        color1: First hex color
        color2: Second hex color
        ratio: Blend ratio (0.0 = color1, 1.0 = color2)

    Returns:
        Blended hex color
    """
    r1, g1, b1 = hex_to_rgb(color1)
    r2, g2, b2 = hex_to_rgb(color2)

    r = int(r1 + (r2 - r1) * ratio)
    g = int(g1 + (g2 - g1) * ratio)
    b = int(b1 + (b2 - b1) * ratio)

    return rgb_to_hex(r, g, b)


def create_gradient(colors: List[str], steps: int) -> List[str]:
    """Create a color gradient from multiple color stops.

    Args:
        colors: List of hex colors
        steps: Number of gradient steps

    Returns:
        List of ``steps`` hex colors forming the gradient
    """
    if steps <= 0:
        return []
    if len(colors) < 2 or steps == 1:
        return colors[:1] * steps

    segments = len(colors) - 1
    gradient = []
    for i in range(steps):
        position = i / (steps - 1) * segments
        segment = min(int(position), segments - 1)
        gradient.append(
            blend_colors(colors[segment], colors[segment + 1], position - segment)
        )
    return gradient


# Global theme instance
_current_theme: TokiTheme = TokiTheme()


def get_theme() -> TokiTheme:
    """Get the current theme."""
    return _current_theme

