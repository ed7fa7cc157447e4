"""
Integration tests for the Textual timer app.

Drive the real event loop headless with short stages.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from toki.core.runner import StageRunner
from toki.core.session import SessionState
from toki.tui.app import TimerApp
from toki.tui.widgets import TimerView

SIZE = (100, 24)


def _runner(*milliseconds: int, **kwargs) -> StageRunner:
    return StageRunner([timedelta(milliseconds=ms) for ms in milliseconds], **kwargs)


class TestTimerApp:
    """Run sessions through TimerApp."""

    @pytest.mark.asyncio
    async def test_runs_to_completion(self) -> None:
        runner = _runner(150, 150)
        app = TimerApp(runner)

        session = await app.run_async(headless=True, size=SIZE)

        assert session is runner.session
        assert session.state is SessionState.COMPLETED_NATURALLY
        assert session.stage_index == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("stages", [(0,), (0, 150), (150, 0, 0)])
    async def test_zero_length_stages_time_out(self, stages) -> None:
        runner = _runner(*stages)
        app = TimerApp(runner)

        session = await app.run_async(headless=True, size=SIZE)

        assert session.state is SessionState.COMPLETED_NATURALLY
        assert session.stage_index == len(stages) - 1

    @pytest.mark.asyncio
    async def test_quit_key(self) -> None:
        runner = _runner(60_000)
        app = TimerApp(runner)

        async with app.run_test(size=SIZE) as pilot:
            await pilot.press("q")

        assert runner.session.stopped
        assert runner.session.state is SessionState.RUNNING
        assert runner.exit_status() == 0

    @pytest.mark.asyncio
    async def test_interrupt_key(self) -> None:
        runner = _runner(60_000)
        app = TimerApp(runner)

        async with app.run_test(size=SIZE) as pilot:
            await pilot.press("ctrl+c")

        assert runner.session.state is SessionState.INTERRUPTED
        assert runner.exit_status() == 130

    @pytest.mark.asyncio
    async def test_width_clamped_inline(self) -> None:
        runner = _runner(60_000)
        app = TimerApp(runner)

        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            assert runner.session.width == 80
            assert " - " in app.query_one(TimerView).render().plain
            await pilot.press("q")

    @pytest.mark.asyncio
    async def test_ticks_advance_progress(self) -> None:
        runner = _runner(2_000)
        app = TimerApp(runner)

        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause(0.5)
            assert runner.session.elapsed > timedelta(0)
            assert runner.percent > 0
            await pilot.press("q")
