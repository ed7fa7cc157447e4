"""Default configuration values for toki."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

ENV_PREFIX = "TOKI_"

# Layout
PADDING = 2
MAX_WIDTH = 80
PERCENT_WIDTH = 5

# Render ticker cadence
SHORT_TICK = timedelta(milliseconds=100)
LONG_TICK = timedelta(seconds=1)
TICK_THRESHOLD = timedelta(minutes=1)

# Start/end clock formats
TIME_FORMAT_24H = "24h"
TIME_FORMAT_KITCHEN = "kitchen"

DEFAULT_CONFIG: dict[str, Any] = {
    "general": {
        "log_level": "warning",
        "log_format": "text",
        "log_file": None,
    },
    "display": {
        "name": "",
        "fullscreen": False,
        "time_format": TIME_FORMAT_KITCHEN,
    },
}
