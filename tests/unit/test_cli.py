"""Tests for the toki command line."""

from __future__ import annotations

from collections.abc import Callable

import pytest
import typer
from typer.testing import CliRunner

from toki import __version__
from toki.cli.commands.man import build_man_page
from toki.cli.main import app
from toki.core.events import Timeout, UserInterrupt, UserQuit
from toki.core.runner import StageRunner
from toki.tui.keys import INTERRUPT_KEYS, QUIT_KEYS

cli = CliRunner()


def _fake_launch(*events) -> Callable[..., None]:
    """Stand-in for the Textual app that feeds ``events`` to the runner."""

    def _launch(runner: StageRunner, fullscreen: bool = False) -> None:
        runner.start()
        for event in events:
            runner.handle(event)

    return _launch


@pytest.fixture()
def launched(monkeypatch: pytest.MonkeyPatch) -> list[StageRunner]:
    """Record runners handed to the UI, completing every stage."""
    seen: list[StageRunner] = []

    def _launch(runner: StageRunner, fullscreen: bool = False) -> None:
        seen.append(runner)
        runner.start()
        while runner.is_active:
            runner.handle(Timeout())

    monkeypatch.setattr("toki.tui.app.launch", _launch)
    return seen


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for suffix in ("NAME", "FULLSCREEN", "FORMAT", "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE"):
        monkeypatch.delenv(f"TOKI_{suffix}", raising=False)


class TestVersion:
    def test_version(self) -> None:
        result = cli.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"toki version {__version__}" in result.output

    def test_version_after_timer(self) -> None:
        result = cli.invoke(app, ["25m", "--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestInvalidSpec:
    def test_empty(self) -> None:
        result = cli.invoke(app, [""])
        assert result.exit_code == 1
        assert "Error: timer specification is empty" in result.output

    def test_invalid_token(self) -> None:
        result = cli.invoke(app, ["abc"])
        assert result.exit_code == 1
        assert "Error: invalid duration format" in result.output

    def test_missing_argument(self) -> None:
        result = cli.invoke(app, [])
        assert result.exit_code != 0

    def test_bad_log_level(self) -> None:
        result = cli.invoke(app, ["5s", "--log-level", "loud"])
        assert result.exit_code == 1
        assert "invalid configuration" in result.output


class TestRun:
    def test_completes(self, launched: list[StageRunner]) -> None:
        result = cli.invoke(app, ["2s, 3s", "--name", "focus"])

        assert result.exit_code == 0
        assert result.output.strip().endswith("focus finished!")
        runner = launched[0]
        assert [stage.total_seconds() for stage in runner.session.stages] == [2.0, 3.0]
        assert runner.session.stage_index == 1

    def test_unnamed(self, launched: list[StageRunner]) -> None:
        result = cli.invoke(app, ["10 5 2"])

        assert result.exit_code == 0
        assert result.output.strip().endswith("finished!")
        assert len(launched[0].session.stages) == 3

    def test_options_reach_runner(self, launched: list[StageRunner]) -> None:
        cli.invoke(app, ["1s", "-f", "--format", "24h"])

        runner = launched[0]
        assert runner.fullscreen
        assert runner.time_format == "24h"

    def test_environment_name(
        self, launched: list[StageRunner], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TOKI_NAME", "tea")

        result = cli.invoke(app, ["1s"])

        assert "tea finished!" in result.output

    def test_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("toki.tui.app.launch", _fake_launch(UserInterrupt()))

        result = cli.invoke(app, ["5m", "-n", "focus"])

        assert result.exit_code == 130
        assert "Error: interrupted" in result.output
        assert "finished" not in result.output

    def test_quit_counts_as_finished(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("toki.tui.app.launch", _fake_launch(UserQuit()))

        result = cli.invoke(app, ["5m"])

        assert result.exit_code == 0
        assert "finished!" in result.output


class TestManPage:
    def test_man(self) -> None:
        result = cli.invoke(app, ["man"])

        assert result.exit_code == 0
        assert result.output.startswith(".TH ")
        assert ".SH OPTIONS" in result.output
        assert "\\-\\-fullscreen" in result.output
        assert "ctrl+c" in result.output


    @pytest.mark.parametrize(
        "flag",
        ["\\-\\-name", "\\-n", "\\-\\-format", "\\-\\-log\\-level", "\\-\\-log\\-file", "\\-\\-version"],
    )
    def test_every_option_documented(self, flag: str) -> None:
        result = cli.invoke(app, ["man"])

        options = result.output.split(".SH OPTIONS")[1].split(".SH KEYS")[0]
        assert f"\\fB{flag}\\fR" in options

    def test_build_from_typer_command(self) -> None:
        root = typer.main.get_command(app)

        page = build_man_page(root.commands["start"], summary="A timer")

        assert page.count(".TP") == len(QUIT_KEYS + INTERRUPT_KEYS) + 6


class TestHelp:
    def test_usage_names_program_only(self) -> None:
        result = cli.invoke(app, ["--help"], prog_name="toki")

        assert result.exit_code == 0
        assert "Usage: toki [OPTIONS]" in result.output
        assert "toki start" not in result.output
        assert "--fullscreen" in result.output

