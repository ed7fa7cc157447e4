"""Shared fixtures for toki tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

import pytest

from toki.core.runner import StageRunner

START = datetime(2024, 1, 1, 15, 4)


@pytest.fixture()
def fixed_clock() -> Callable[[], datetime]:
    """Wall clock frozen at 15:04."""
    return lambda: START


@pytest.fixture()
def make_runner(fixed_clock: Callable[[], datetime]) -> Callable[..., StageRunner]:
    """Build a runner from stage durations given in seconds."""

    def _make(*seconds: float, **kwargs) -> StageRunner:
        kwargs.setdefault("clock", fixed_clock)
        return StageRunner([timedelta(seconds=s) for s in seconds], **kwargs)

    return _make
