"""Main TimerApp Application.

The Textual application that drives a :class:`StageRunner`. Two timers
feed the runner independently: a render ticker at the stage's tick cadence
and a one-shot countdown that fires once when the stage's full duration
has passed.
"""

from datetime import timedelta
from typing import Iterable, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.timer import Timer

from ..core.events import (
    Command,
    Resize,
    StartCountdown,
    StopLoop,
    Tick,
    Timeout,
    UserInterrupt,
    UserQuit,
)
from ..core.runner import StageRunner
from ..core.session import Session
from .keys import textual_bindings
from .widgets import TimerView


class TimerApp(App[Session]):
    """toki countdown timer.

    The app exits with the runner's session as its return value once the
    runner asks the loop to stop.
    """

    CSS = """
    Screen {
        background: ansi_default;
    }

    Screen:inline {
        height: auto;
        min-height: 2;
        border: none;
    }
    """

    BINDINGS = textual_bindings()

    def __init__(self, runner: StageRunner):
        """Initialize the timer application.

        Args:
            runner: Stage runner seeded with the parsed stages
        """
        super().__init__()
        self.runner = runner
        self._ticker: Optional[Timer] = None
        self._countdown: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        yield TimerView(self.runner, id="timer")

    def on_mount(self) -> None:
        """Size the progress bar and arm the first stage."""
        self._dispatch(
            self.runner.handle(Resize(self.size.width, self.size.height))
        )
        self._dispatch(self.runner.start())

    def on_resize(self, event: events.Resize) -> None:
        self._dispatch(self.runner.handle(Resize(event.size.width, event.size.height)))

    # ==================== TIMERS ====================

    def _on_tick(self) -> None:
        self._dispatch(self.runner.handle(Tick()))

    def _on_timeout(self) -> None:
        self._dispatch(self.runner.handle(Timeout()))

    def _arm(self, duration: timedelta, interval: timedelta) -> None:
        self._cancel_timers()
        self._ticker = self.set_interval(
            interval.total_seconds(), self._on_tick, name="ticker"
        )
        if duration <= timedelta(0):
            # Textual timers need a positive delay
            self.call_later(self._on_timeout)
            return
        self._countdown = self.set_timer(
            duration.total_seconds(), self._on_timeout, name="countdown"
        )

    def _cancel_timers(self) -> None:
        for timer in (self._ticker, self._countdown):
            if timer is not None:
                timer.stop()
        self._ticker = None
        self._countdown = None

    # ==================== COMMANDS ====================

    def _dispatch(self, commands: Iterable[Command]) -> None:
        for command in commands:
            if isinstance(command, StartCountdown):
                self._arm(command.duration, command.interval)
            elif isinstance(command, StopLoop):
                self._cancel_timers()
                self.exit(self.runner.session)
        self.query_one(TimerView).refresh()

    # ==================== ACTIONS ====================

    def action_quit(self) -> None:
        """Stop the timer (counts as finished)."""
        self._dispatch(self.runner.handle(UserQuit()))

    def action_interrupt(self) -> None:
        """Cancel the timer."""
        self._dispatch(self.runner.handle(UserInterrupt()))


def launch(runner: StageRunner, fullscreen: bool = False) -> Optional[Session]:
    """Run the timer until it completes, is quit or is interrupted.

    Args:
        runner: Stage runner to drive
        fullscreen: Use the full-screen application mode instead of inline

    Returns:
        The final session (``None`` if the app exited on its own)
    """
    app = TimerApp(runner)
    return app.run(inline=not fullscreen, mouse=False)
