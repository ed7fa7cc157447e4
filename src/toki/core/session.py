"""Session data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from toki.config.defaults import MAX_WIDTH

_ZERO = timedelta(0)


class SessionState(str, Enum):
    """Terminal state of a timer session."""

    RUNNING = "RUNNING"
    COMPLETED_NATURALLY = "COMPLETED_NATURALLY"
    INTERRUPTED = "INTERRUPTED"


@dataclass(eq=False)
class Session:
    """Live state of one timer run.

    ``terminal`` is driven by the runner's state machine; everything else is
    assigned by the runner's event handlers.
    """

    stages: tuple[timedelta, ...]
    stage_started_at: datetime
    stage_index: int = 0
    elapsed: timedelta = _ZERO
    percent: int = 0
    terminal: str = SessionState.RUNNING.value
    stopped: bool = False
    width: int = MAX_WIDTH
    height: int = 0

    @property
    def current_stage(self) -> timedelta:
        return self.stages[self.stage_index]

    @property
    def is_last_stage(self) -> bool:
        return self.stage_index == len(self.stages) - 1

    @property
    def remaining(self) -> timedelta:
        return max(_ZERO, self.current_stage - self.elapsed)

    @property
    def stage_ends_at(self) -> datetime:
        return self.stage_started_at + self.current_stage

    @property
    def state(self) -> SessionState:
        return SessionState(self.terminal)

    @property
    def is_terminal(self) -> bool:
        return self.terminal != SessionState.RUNNING.value
