from __future__ import annotations

import logging

from app.application.ports.calendar import CalendarPort
from app.domain.entities.calendar_event import CalendarEvent, CalendarEventRequest


class MockCalendar(CalendarPort):
    def __init__(self) -> None:
        self._events: dict[str, CalendarEventRequest] = {}
        self._by_request_id: dict[str, str] = {}
        self._logger = logging.getLogger(__name__)

    def create_event(self, request: CalendarEventRequest) -> CalendarEvent:
        event_id = f"mock_event_{len(self._events) + 1}"
        self._events[event_id] = request
        # Same request id, same conference, like the real provider
        conference_id = self._by_request_id.setdefault(request.request_id, event_id)
        meet_link = f"https://meet.google.com/mock-{conference_id}"
        self._logger.info(
            "Mock calendar event created",
            extra={
                "event_id": event_id,
                "start": request.start.isoformat(),
                "end": request.end.isoformat(),
                "title": request.summary,
            },
        )
        return CalendarEvent(event_id=event_id, meet_link=meet_link)

    @property
    def events(self) -> dict[str, CalendarEventRequest]:
        return dict(self._events)
