"""Stage runner: the state machine behind a timer session.

The runner owns a :class:`Session` and is driven by typed events from an
external loop. It tracks elapsed time by accumulating ticks, derives the
truncated progress percentage, advances stages when the countdown times
out, and decides when the session is over. Each handler returns the
commands the loop must carry out (arm timers, repaint, stop).

States:
- RUNNING (initial)
- COMPLETED_NATURALLY: the last stage timed out
- INTERRUPTED: the user cancelled

A plain quit stops the loop but leaves the session RUNNING; it is treated
like natural completion for exit status.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timedelta
from typing import Any

from rich.text import Text
from transitions import Machine

from toki.config.defaults import (
    LONG_TICK,
    MAX_WIDTH,
    PADDING,
    SHORT_TICK,
    TICK_THRESHOLD,
)
from toki.core.clock import format_clock
from toki.core.durations import format_duration
from toki.core.events import (
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
from toki.core.progress import BarRenderer, render_plain_bar
from toki.core.session import Session, SessionState
from toki.errors import EmptySpec, Interrupted
from toki.utils.logging import generate_session_id, get_logger

_ZERO = timedelta(0)
_MILLISECOND = timedelta(milliseconds=1)

# Horizontal space reserved around the progress bar
_BAR_MARGIN = PADDING * 2 + 4

SEP_CLOCK = " - "
SEP_NAME = ": "


# ==================== TRANSITIONS ====================


TRANSITIONS: list[dict[str, Any]] = [
    {
        "trigger": "complete",
        "source": SessionState.RUNNING.value,
        "dest": SessionState.COMPLETED_NATURALLY.value,
    },
    {
        "trigger": "interrupt",
        "source": SessionState.RUNNING.value,
        "dest": SessionState.INTERRUPTED.value,
    },
]


def tick_interval(duration: timedelta) -> timedelta:
    """Render-ticker cadence for a stage of ``duration``."""
    if duration < TICK_THRESHOLD:
        return SHORT_TICK
    return LONG_TICK


def truncated_percent(elapsed: timedelta, stage: timedelta) -> int:
    """Whole-percent progress, truncated toward zero.

    Stages shorter than one millisecond count as complete.
    """
    stage_ms = stage // _MILLISECOND
    if stage_ms <= 0:
        return 100
    elapsed_ms = elapsed // _MILLISECOND
    return max(0, min(100, elapsed_ms * 100 // stage_ms))


class StageRunner:
    """Drive one timer session through its stages.

    Parameters
    ----------
    stages : Sequence[timedelta]
        Stage durations in execution order; must not be empty.
    name : str
        Optional label shown beside the clock.
    fullscreen : bool
        Whether the view fills the screen (no width clamp, centred).
    time_format : str
        ``24h`` for 24-hour clock times, anything else for kitchen time.
    clock : Callable[[], datetime] | None
        Wall-clock source for stage start times.
    render_bar : BarRenderer | None
        Renders the progress bar from (fraction, width); defaults to an
        unstyled bar.
    """

    def __init__(
        self,
        stages: Sequence[timedelta],
        *,
        name: str = "",
        fullscreen: bool = False,
        time_format: str = "",
        clock: Callable[[], datetime] | None = None,
        render_bar: BarRenderer | None = None,
    ):
        if not stages:
            raise EmptySpec()

        self.name = name
        self.fullscreen = fullscreen
        self.time_format = time_format
        self._now = clock or datetime.now
        self._render_bar = render_bar or render_plain_bar

        self.session = Session(stages=tuple(stages), stage_started_at=self._now())
        self.interval = tick_interval(self.session.current_stage)

        self.session_id = generate_session_id()
        self.logger = get_logger("runner").bind(session_id=self.session_id)

        self._machine = Machine(
            model=self.session,
            states=[state.value for state in SessionState],
            transitions=TRANSITIONS,
            initial=SessionState.RUNNING.value,
            model_attribute="terminal",
            auto_transitions=False,
            ignore_invalid_triggers=True,
            after_state_change=self._record_transition,
            send_event=False,
        )

    def _record_transition(self) -> None:
        self.logger.info(
            "runner.transition",
            state=self.session.terminal,
            stage_index=self.session.stage_index,
        )

    # ==================== PUBLIC API ====================

    @property
    def is_active(self) -> bool:
        """True while the session still accepts timing events."""
        return not self.session.stopped and not self.session.is_terminal

    @property
    def percent(self) -> int:
        return self.session.percent

    @property
    def progress(self) -> float:
        """Displayed progress fraction, derived from the truncated percent."""
        return self.session.percent / 100

    def start(self) -> list[Command]:
        """Commands that arm the first stage."""
        self.logger.info(
            "runner.started",
            stages=len(self.session.stages),
            duration=self.session.current_stage,
            interval=self.interval,
        )
        return [StartCountdown(self.session.current_stage, self.interval)]

    def handle(self, event: Event) -> list[Command]:
        """Apply one event and return the commands it produces."""
        if isinstance(event, Tick):
            return self._on_tick()
        if isinstance(event, Timeout):
            return self._on_timeout()
        if isinstance(event, UserQuit):
            return self._on_quit()
        if isinstance(event, UserInterrupt):
            return self._on_interrupt()
        if isinstance(event, Resize):
            return self._on_resize(event)
        raise TypeError(f"Unsupported event: {event!r}")

    def _on_tick(self) -> list[Command]:
        if not self.is_active:
            return []

        session = self.session
        stage = max(session.current_stage, _ZERO)
        session.elapsed = min(session.elapsed + self.interval, stage)
        session.percent = truncated_percent(session.elapsed, session.current_stage)
        return [SetProgress(self.progress)]

    def _on_timeout(self) -> list[Command]:
        if not self.is_active:
            return []

        session = self.session
        if session.is_last_stage:
            session.complete()
            session.stopped = True
            return [StopLoop()]

        session.stage_index += 1
        session.elapsed = _ZERO
        session.percent = 0
        session.stage_started_at = self._now()
        self.interval = tick_interval(session.current_stage)

        self.logger.info(
            "runner.stage_advanced",
            stage_index=session.stage_index,
            duration=session.current_stage,
            interval=self.interval,
        )
        return [SetProgress(0.0), StartCountdown(session.current_stage, self.interval)]

    def _on_quit(self) -> list[Command]:
        if self.session.stopped:
            return []
        self.session.stopped = True
        self.logger.info("runner.quit", stage_index=self.session.stage_index)
        return [StopLoop()]

    def _on_interrupt(self) -> list[Command]:
        if not self.is_active:
            return []
        self.session.interrupt()
        self.session.stopped = True
        return [StopLoop()]

    def _on_resize(self, event: Resize) -> list[Command]:
        width = max(0, event.width - _BAR_MARGIN)
        if not self.fullscreen and width > MAX_WIDTH:
            width = MAX_WIDTH
        self.session.width = width
        self.session.height = event.height
        self.logger.debug("runner.resized", width=width, height=event.height)
        return []

    # ==================== VIEW ====================

    def view(self) -> Text:
        """Render the session; empty once the loop has been told to stop."""
        session = self.session
        if session.stopped or session.is_terminal:
            return Text()

        text = Text()
        text.append(format_clock(session.stage_started_at, self.time_format), style="bold")
        if self.name:
            text.append(SEP_NAME)
            text.append(self.name, style="italic")
        text.append(SEP_CLOCK)
        text.append(format_clock(session.stage_ends_at, self.time_format), style="bold")
        text.append(SEP_CLOCK)
        text.append(format_duration(session.remaining), style="bold")
        text.append("\n")
        text.append_text(self._render_bar(self.progress, session.width))

        if self.fullscreen:
            return self._center(text)
        return text

    def _center(self, text: Text) -> Text:
        result = Text("\n" * max(0, (self.session.height - 2) // 2))
        lines = text.split("\n")
        for index, line in enumerate(lines):
            result.append(" " * PADDING)
            result.append_text(line)
            if index < len(lines) - 1:
                result.append("\n")
        return result

    # ==================== OUTCOME ====================

    @property
    def interrupted(self) -> bool:
        return self.session.terminal == SessionState.INTERRUPTED.value

    def exit_status(self) -> int:
        """0 for completion or plain quit, non-zero for an interrupt."""
        return Interrupted.exit_code if self.interrupted else 0

    def finished_message(self) -> str:
        if self.name:
            return f"{self.name} finished!"
        return "finished!"

    def snapshot(self) -> dict[str, Any]:
        """Get a snapshot of the current session state."""
        session = self.session
        return {
            "session_id": self.session_id,
            "terminal": session.terminal,
            "stopped": session.stopped,
            "stage_index": session.stage_index,
            "stages": len(session.stages),
            "elapsed": session.elapsed,
            "percent": session.percent,
        }


__all__ = [
    "TRANSITIONS",
    "StageRunner",
    "tick_interval",
    "truncated_percent",
]
