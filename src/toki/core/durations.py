"""Duration grammar.

A duration token is an optionally signed sequence of decimal numbers, each
with a unit suffix, such as ``300ms``, ``1.5h`` or ``2h45m30.5s``. Valid
units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``.
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal

from toki.errors import InvalidDurationFormat

# Nanoseconds per unit
UNITS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC Greek letter mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_NUMBER = r"(?:\d+\.?\d*|\.\d+)"
_UNIT = r"(?:ns|us|µs|μs|ms|s|m|h)"
_COMPONENT_RE = re.compile(rf"({_NUMBER})({_UNIT})")
_DURATION_RE = re.compile(rf"([+-]?)((?:{_NUMBER}{_UNIT})+)")
_ZERO_RE = re.compile(r"[+-]?0")

_MICROSECOND = timedelta(microseconds=1)


def parse_duration(token: str) -> timedelta:
    """Parse a single duration token into a ``timedelta``.

    Precision below one microsecond is truncated toward zero.

    Raises:
        InvalidDurationFormat: If the token is not a valid duration
    """
    if _ZERO_RE.fullmatch(token):
        return timedelta(0)

    match = _DURATION_RE.fullmatch(token)
    if match is None:
        raise InvalidDurationFormat(token)

    sign, body = match.groups()
    total_ns = sum(
        Decimal(number) * UNITS[unit] for number, unit in _COMPONENT_RE.findall(body)
    )
    if sign == "-":
        total_ns = -total_ns

    try:
        return timedelta(microseconds=int(total_ns / 1000))
    except OverflowError as exc:
        raise InvalidDurationFormat(token) from exc


def _trim(value: int, scale: int) -> str:
    """Render ``value / scale`` as a decimal without trailing zeros."""
    whole, frac = divmod(value, scale)
    if not frac:
        return str(whole)
    digits = len(str(scale)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(duration: timedelta) -> str:
    """Format a duration as a compact readout like ``4m59.9s`` or ``900ms``."""
    us = duration // _MICROSECOND
    if us == 0:
        return "0s"

    sign = "-" if us < 0 else ""
    us = abs(us)

    if us < 1_000:
        return f"{sign}{us}µs"
    if us < 1_000_000:
        return f"{sign}{_trim(us, 1_000)}ms"

    seconds, frac = divmod(us, 1_000_000)
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    text = _trim(secs * 1_000_000 + frac, 1_000_000) + "s"

    if hours:
        return f"{sign}{hours}h{minutes}m{text}"
    if minutes:
        return f"{sign}{minutes}m{text}"
    return f"{sign}{text}"


__all__ = ["UNITS", "parse_duration", "format_duration"]
