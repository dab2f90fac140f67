from __future__ import annotations

import logging
from dataclasses import replace
from zoneinfo import ZoneInfo

from app.application.exceptions import ProviderError, ValidationError
from app.application.ports.booking_store import BookingStorePort
from app.application.ports.calendar import CalendarPort
from app.application.utils.event_time import event_window
from app.application.utils.state_helpers import load_booking, require_booking_id
from app.domain.entities.booking import NO_MEET_LINK, Booking
from app.domain.entities.calendar_event import CalendarEvent, CalendarEventRequest


class ScheduleEventUseCase:
    def __init__(self, store: BookingStorePort, calendar: CalendarPort, timezone: ZoneInfo) -> None:
        self._store = store
        self._calendar = calendar
        self._timezone = timezone
        self._logger = logging.getLogger(__name__)

    def execute(self, booking_id: str | None) -> CalendarEvent:
        """Create the one-hour calendar event for a booking. Returns event id and meet link."""
        booking_id = require_booking_id(booking_id)
        with self._store.locked(booking_id):
            booking = load_booking(self._store, booking_id)
            request = self._build_request(booking)

            try:
                created = self._calendar.create_event(request)
            except Exception as e:
                self._logger.exception(
                    "Create calendar event error",
                    extra={"booking_id": booking_id, "operation": "create_calendar_event", "error": str(e)},
                )
                raise ProviderError(str(e) or "Calendar provider failed") from e

            event = CalendarEvent(event_id=created.event_id, meet_link=created.meet_link or NO_MEET_LINK)
            self._store.save(replace(booking, calendar_event_id=event.event_id, meet_link=event.meet_link))

        self._logger.info(
            "Calendar event created",
            extra={"booking_id": booking_id, "event_id": event.event_id},
        )
        return event

    def _build_request(self, booking: Booking) -> CalendarEventRequest:
        try:
            start, end = event_window(booking.date, booking.time, self._timezone)
        except ValueError as e:
            raise ValidationError("Invalid booking date or time") from e

        description = "\n".join(
            [
                f"Service: {booking.service_name}",
                f"Client: {booking.name}",
                f"Email: {booking.email}",
                f"Phone: {booking.phone}",
            ]
        )
        return CalendarEventRequest(
            summary=f"Booking: {booking.service_name} - {booking.name}",
            description=description,
            start=start,
            end=end,
            request_id=booking.booking_id,
            timezone=self._timezone.key,
        )
