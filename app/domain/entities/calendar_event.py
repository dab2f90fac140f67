from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CalendarEventRequest:
    summary: str
    description: str
    start: datetime
    end: datetime
    request_id: str  # conference create-request key, one per booking
    timezone: str | None = None


@dataclass(frozen=True)
class CalendarEvent:
    event_id: str
    meet_link: str | None = None
