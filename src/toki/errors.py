"""Error taxonomy for toki.

Parsing errors are raised before a session exists; ``Interrupted`` is the
only failure a running session can report.
"""

from __future__ import annotations


class TokiError(Exception):
    """Base class for all toki errors."""

    exit_code: int = 1


class TimerSpecError(TokiError):
    """Raised when a timer specification cannot be turned into stages."""


class EmptySpec(TimerSpecError):
    """The timer argument contained no duration tokens."""

    def __init__(self, message: str = "timer specification is empty"):
        super().__init__(message)


class InvalidDurationFormat(TimerSpecError):
    """A token is not a valid ``number+unit`` duration.

    The offending token is kept on the exception for logging; the message
    shown to the user stays generic.
    """

    def __init__(self, token: str, message: str = "invalid duration format"):
        super().__init__(message)
        self.token = token


class Interrupted(TokiError):
    """The user cancelled a running session."""

    exit_code = 130

    def __init__(self, message: str = "interrupted"):
        super().__init__(message)


__all__ = [
    "TokiError",
    "TimerSpecError",
    "EmptySpec",
    "InvalidDurationFormat",
    "Interrupted",
]
