"""Events consumed by the stage runner and commands it hands back.

Events describe what happened (a tick elapsed, a stage timed out, a key was
pressed, the terminal was resized). Commands tell the driving loop what to
do next. Neither depends on a particular UI toolkit.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Union


# ============================================================
# Events
# ============================================================

@dataclass(frozen=True)
class Tick:
    """One render-ticker quantum has passed."""


@dataclass(frozen=True)
class Timeout:
    """The current stage's countdown reached zero."""


@dataclass(frozen=True)
class UserQuit:
    """The user asked to stop (q / escape)."""


@dataclass(frozen=True)
class UserInterrupt:
    """The user cancelled (ctrl+c)."""


@dataclass(frozen=True)
class Resize:
    """The terminal size changed."""

    width: int
    height: int


Event = Union[Tick, Timeout, UserQuit, UserInterrupt, Resize]


# ============================================================
# Commands
# ============================================================

@dataclass(frozen=True)
class StartCountdown:
    """Arm the stage countdown and the render ticker for a new stage."""

    duration: timedelta
    interval: timedelta


@dataclass(frozen=True)
class SetProgress:
    """Repaint the progress bar at ``fraction`` (0.0 - 1.0)."""

    fraction: float


@dataclass(frozen=True)
class StopLoop:
    """Stop all timers and leave the event loop."""


Command = Union[StartCountdown, SetProgress, StopLoop]


__all__ = [
    "Tick",
    "Timeout",
    "UserQuit",
    "UserInterrupt",
    "Resize",
    "Event",
    "StartCountdown",
    "SetProgress",
    "StopLoop",
    "Command",
]
