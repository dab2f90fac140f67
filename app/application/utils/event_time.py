from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

EVENT_DURATION = timedelta(hours=1)


def compose_event_start(date_str: str, time_str: str, tz: ZoneInfo) -> datetime:
    """
    Combine a YYYY-MM-DD date and an HH:MM time into a wall-clock datetime in tz.
    Seconds after HH:MM are ignored. Raises ValueError on malformed input.
    """
    year, month, day = (int(part) for part in date_str.strip().split("-"))
    parts = time_str.strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time: {time_str!r}")
    hour, minute = int(parts[0]), int(parts[1])
    return datetime(year, month, day, hour, minute, tzinfo=tz)


def event_window(date_str: str, time_str: str, tz: ZoneInfo) -> tuple[datetime, datetime]:
    start = compose_event_start(date_str, time_str, tz)
    return start, start + EVENT_DURATION
