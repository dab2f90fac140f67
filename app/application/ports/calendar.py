from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.calendar_event import CalendarEvent, CalendarEventRequest


class CalendarPort(ABC):
    @abstractmethod
    def create_event(self, request: CalendarEventRequest) -> CalendarEvent:
        """Create calendar event with a conference request. Returns the created event."""
        raise NotImplementedError
