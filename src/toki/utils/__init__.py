"""
Shared utilities module.
"""

from toki.utils.logging import (
    clear_session_context,
    configure_from_settings,
    configure_logging,
    generate_session_id,
    get_logger,
    set_session_context,
)

__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "set_session_context",
    "clear_session_context",
    "generate_session_id",
]
