"""
Configuration module for toki.

Provides:
- Layered configuration loading (CLI > env > defaults)
- Pydantic-based settings validation
- Layout and cadence constants
"""

from toki.config.defaults import (
    DEFAULT_CONFIG,
    ENV_PREFIX,
    LONG_TICK,
    MAX_WIDTH,
    PADDING,
    PERCENT_WIDTH,
    SHORT_TICK,
    TICK_THRESHOLD,
    TIME_FORMAT_24H,
    TIME_FORMAT_KITCHEN,
)
from toki.config.settings import (
    DisplaySettings,
    GeneralSettings,
    Settings,
    env_overrides,
    load_settings,
)

__all__ = [
    # Defaults
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "LONG_TICK",
    "MAX_WIDTH",
    "PADDING",
    "PERCENT_WIDTH",
    "SHORT_TICK",
    "TICK_THRESHOLD",
    "TIME_FORMAT_24H",
    "TIME_FORMAT_KITCHEN",
    # Settings
    "DisplaySettings",
    "GeneralSettings",
    "Settings",
    "env_overrides",
    "load_settings",
]
