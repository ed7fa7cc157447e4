"""Logging setup and configuration using structlog."""

from __future__ import annotations

import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Any

import structlog

from toki.config.settings import Settings

_LEVEL_MAP = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def _json_default(obj: Any) -> Any:
    """JSON fallback for the value types toki logs.

    Handles:
    - datetime objects -> ISO format strings
    - timedelta objects -> float seconds
    - Path objects -> string paths
    - Enum values -> their value
    """
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, timedelta):
        return obj.total_seconds()
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)
    return str(obj)


# Context variable for session tracking
_session_context: ContextVar[dict[str, Any] | None] = ContextVar(
    "session_context", default=None
)


def _get_context() -> dict[str, Any]:
    ctx = _session_context.get()
    if ctx is None:
        ctx = {}
        _session_context.set(ctx)
    return ctx


def set_session_context(session_id: str | None = None, **extra: Any) -> None:
    """Set session context for log enrichment.

    Parameters
    ----------
    session_id : Optional[str]
        Identifier of the running timer session.
    **extra : Any
        Additional context key-value pairs.
    """
    ctx = _get_context().copy()
    if session_id:
        ctx["session_id"] = session_id
    ctx.update(extra)
    _session_context.set(ctx)


def clear_session_context() -> None:
    """Clear the current session context."""
    _session_context.set({})


def generate_session_id() -> str:
    """Generate a short unique session ID."""
    return str(uuid.uuid4())[:8]


def _add_session_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor to inject session context."""
    for key, value in _get_context().items():
        event_dict.setdefault(key, value)
    return event_dict


def _resolve_level(level: str) -> int:
    return _LEVEL_MAP.get(level.lower(), logging.WARNING)


def configure_logging(
    *,
    level: str = "warning",
    output_format: str = "text",
    color: bool = True,
    log_file: Path | None = None,
) -> None:
    """Configure structlog + stdlib logging.

    Logs never go to stdout, which is reserved for the finished message.

    Parameters
    ----------
    level: str
            Minimum level (debug, info, warning, error, critical).
    output_format: str
            "text" for console-friendly rendering, "json" for machine parsing.
    color: bool
            Enable colored console output when using text mode on stderr.
    log_file: Optional[Path]
            If provided, write logs to this file instead of stderr.
    """

    log_level = _resolve_level(level)

    if output_format.lower() == "json":
        renderer = structlog.processors.JSONRenderer(
            sort_keys=True,
            default=_json_default,
        )
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=color and log_file is None)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            _add_session_context,  # type: ignore[list-item]
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    root = logging.getLogger()
    root.handlers = []
    root.setLevel(log_level)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)

    # Silence verbose third-party loggers
    logging.getLogger("transitions").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def configure_from_settings(settings: Settings) -> None:
    """Configure logging using Settings values."""

    configure_logging(
        level=settings.general.log_level,
        output_format=settings.general.log_format,
        log_file=settings.general.log_file,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a configured structlog logger."""

    return structlog.get_logger(name) if name else structlog.get_logger()
