"""Wall-clock formatting for stage start and end times."""

from __future__ import annotations

from datetime import datetime

from toki.config.defaults import TIME_FORMAT_24H


def format_clock(moment: datetime, time_format: str = "") -> str:
    """Format a clock time as ``15:04`` (24h) or ``3:04PM`` (kitchen).

    Any format other than ``24h`` (case-insensitive) selects kitchen time.
    """
    if time_format.lower() == TIME_FORMAT_24H:
        return moment.strftime("%H:%M")

    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d}{meridiem}"
