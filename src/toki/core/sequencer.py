"""Duration sequencer.

Turns the free-form timer argument (``"25m, 5m, 25m"``, ``"10 5 2"``) into
an ordered tuple of stage durations.
"""

from __future__ import annotations

import re
from datetime import timedelta

from toki.core.durations import parse_duration
from toki.errors import EmptySpec, InvalidDurationFormat
from toki.utils.logging import get_logger

TIMER_ARG_SEP = re.compile(r"\s*[\s,-]\s*")
DEFAULT_SUFFIX = "s"

TimerSpec = tuple[timedelta, ...]

logger = get_logger("sequencer")


def split_timer_spec(raw: str) -> list[str]:
    """Split a timer argument on whitespace, commas and hyphens.

    Consecutive separators collapse; token order is preserved.
    """
    return [token for token in TIMER_ARG_SEP.split(raw) if token]


def add_suffix_if_number(token: str, suffix: str = DEFAULT_SUFFIX) -> str:
    """Append ``suffix`` to a token that is a bare number."""
    try:
        float(token)
    except ValueError:
        return token
    return token + suffix


def parse_timer_spec(raw: str) -> TimerSpec:
    """Parse a timer argument into stage durations.

    Args:
        raw: Timer specification as typed by the user

    Returns:
        Stage durations in execution order

    Raises:
        EmptySpec: If the argument contains no tokens
        InvalidDurationFormat: On the first token that is not a duration
    """
    tokens = split_timer_spec(raw)
    if not tokens:
        raise EmptySpec()

    stages: list[timedelta] = []
    for token in tokens:
        normalized = add_suffix_if_number(token)
        try:
            stages.append(parse_duration(normalized))
        except InvalidDurationFormat:
            logger.debug("sequencer.invalid_token", token=token)
            raise

    logger.debug("sequencer.parsed", stages=stages)
    return tuple(stages)


__all__ = [
    "TIMER_ARG_SEP",
    "TimerSpec",
    "split_timer_spec",
    "add_suffix_if_number",
    "parse_timer_spec",
]
