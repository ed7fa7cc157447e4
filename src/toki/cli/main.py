"""
toki command line.

``toki TIMER`` runs the timer; ``toki man`` (hidden) prints a man page.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

import click
import typer
from pydantic import ValidationError
from typer.core import TyperCommand, TyperGroup

from toki import __version__
from toki.cli.commands.man import man_command
from toki.config.settings import DisplaySettings, load_settings
from toki.core.runner import StageRunner
from toki.core.sequencer import parse_timer_spec
from toki.errors import Interrupted, TokiError
from toki.tui.components.progress import render_progress_bar
from toki.utils.logging import configure_from_settings, get_logger, set_session_context

logger = get_logger("cli")

DEFAULT_COMMAND = "start"
# Options the group itself understands
_GROUP_OPTIONS = ("--version",)


class TimerGroup(TyperGroup):
    """Group that routes anything that is not a subcommand to ``start``.

    This keeps ``toki 25m`` working alongside ``toki man``.
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        if not args or (args[0] not in self.commands and args[0] not in _GROUP_OPTIONS):
            args = [DEFAULT_COMMAND, *args]
        return super().parse_args(ctx, args)


class TimerCommand(TyperCommand):
    """Default command whose usage line reads as the program itself."""

    def format_usage(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        prog = ctx.parent.command_path if ctx.parent is not None else ctx.command_path
        formatter.write_usage(prog, " ".join(self.collect_usage_pieces(ctx)))


app = typer.Typer(
    name="toki",
    cls=TimerGroup,
    help="A timer with many features.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"toki version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """A timer with many features."""


def run_timer(raw: str, display: DisplaySettings) -> StageRunner:
    """Parse ``raw``, run the timer UI and return the finished runner.

    Raises:
        TimerSpecError: If ``raw`` is not a valid timer specification
        Interrupted: If the user cancelled the session
    """
    from toki.tui import app as tui_app

    stages = parse_timer_spec(raw)
    runner = StageRunner(
        stages,
        name=display.name,
        fullscreen=display.fullscreen,
        time_format=display.time_format,
        render_bar=render_progress_bar,
    )
    set_session_context(session_id=runner.session_id)
    tui_app.launch(runner, fullscreen=display.fullscreen)

    logger.info("cli.session_finished", **runner.snapshot())
    if runner.interrupted:
        raise Interrupted()
    return runner


@app.command(DEFAULT_COMMAND, cls=TimerCommand)
def start(
    timer: str = typer.Argument(
        ...,
        metavar="TIMER",
        help="Timer specification, e.g. '25m', '25m, 5m, 25m' or '10 5 2'.",
    ),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Timer name."),
    fullscreen: bool = typer.Option(False, "--fullscreen", "-f", help="Fullscreen."),
    time_format: Optional[str] = typer.Option(
        None,
        "--format",
        help="Start time format, possible values: 24h, kitchen.",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (debug, info, warning, error, critical)."
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write logs to this file instead of stderr."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Run a countdown timer with one or more stages."""
    overrides: dict[str, Any] = {
        "general": {"log_level": log_level, "log_file": log_file},
        "display": {
            "name": name,
            "fullscreen": True if fullscreen else None,
            "time_format": time_format,
        },
    }
    try:
        settings = load_settings(overrides)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        typer.echo(f"Error: invalid configuration: {field}: {first['msg']}", err=True)
        raise typer.Exit(1)

    configure_from_settings(settings)

    try:
        runner = run_timer(timer, settings.display)
    except TokiError as exc:
        logger.info("cli.failed", error=str(exc), error_type=type(exc).__name__)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(exc.exit_code)

    typer.echo(runner.finished_message())


app.command("man", hidden=True)(man_command)
