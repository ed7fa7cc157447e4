"""Keybinding definitions for the toki TUI."""

from dataclasses import dataclass
from typing import List

from textual.binding import Binding


@dataclass
class KeyBinding:
    """A keyboard binding definition."""

    key: str
    action: str
    description: str
    priority: bool = False


# Stop the timer; counts as a normal finish
QUIT_KEYS: List[KeyBinding] = [
    KeyBinding("q", "quit", "Quit"),
    KeyBinding("escape", "quit", "Quit"),
]

# Cancel the timer; reported as a failure
INTERRUPT_KEYS: List[KeyBinding] = [
    KeyBinding("ctrl+c", "interrupt", "Interrupt", priority=True),
]


def textual_bindings() -> List[Binding]:
    """Convert the key tables into Textual bindings."""
    return [
        Binding(key.key, key.action, key.description, show=False, priority=key.priority)
        for key in QUIT_KEYS + INTERRUPT_KEYS
    ]

