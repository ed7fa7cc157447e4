"""Core domain logic: duration parsing and the stage runner state machine."""

from .durations import format_duration, parse_duration
from .events import (
    Command,
    Event,
    Resize,
    SetProgress,
    StartCountdown,
    StopLoop,
    Tick,
    Timeout,
    UserInterrupt,
    UserQuit,
)
from .progress import BarRenderer, layout_bar, render_plain_bar
from .runner import StageRunner, tick_interval, truncated_percent
from .sequencer import TimerSpec, add_suffix_if_number, parse_timer_spec, split_timer_spec
from .session import Session, SessionState

__all__ = [
    # Durations
    "format_duration",
    "parse_duration",
    # Sequencer
    "TimerSpec",
    "add_suffix_if_number",
    "parse_timer_spec",
    "split_timer_spec",
    # Events and commands
    "Command",
    "Event",
    "Resize",
    "SetProgress",
    "StartCountdown",
    "StopLoop",
    "Tick",
    "Timeout",
    "UserInterrupt",
    "UserQuit",
    # Progress bar layout
    "BarRenderer",
    "layout_bar",
    "render_plain_bar",
    # Session
    "Session",
    "SessionState",
    # Runner
    "StageRunner",
    "tick_interval",
    "truncated_percent",
]
