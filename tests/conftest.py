from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.application.ports.calendar import CalendarPort
from app.application.ports.mail_sender import MailSenderPort
from app.core.config import settings
from app.domain.entities.calendar_event import CalendarEvent, CalendarEventRequest
from app.infrastructure.store.memory_store import MemoryBookingStore
from app.main import app
from app.wiring.dependencies import get_calendar, get_mail_sender

VALID_BOOKING = {
    "service": "consult",
    "serviceName": "Strategy Session",
    "price": "50000 KRW",
    "priceUSD": 37,
    "name": "A",
    "email": "a@x.com",
    "phone": "1",
    "date": "2025-06-01",
    "time": "14:00",
}


class StubCalendar(CalendarPort):
    def __init__(self, event_id: str = "evt1", meet_link: str | None = None, error: Exception | None = None) -> None:
        self.event_id = event_id
        self.meet_link = meet_link
        self.error = error
        self.requests: list[CalendarEventRequest] = []

    def create_event(self, request: CalendarEventRequest) -> CalendarEvent:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return CalendarEvent(event_id=self.event_id, meet_link=self.meet_link)


class RecordingMailer(MailSenderPort):
    """Records every send; returns False from the call number given in fail_on (1-based)."""

    def __init__(self, fail_on: int | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[dict[str, str]] = []

    def send(self, to: str, subject: str, html: str) -> bool:
        self.calls.append({"to": to, "subject": subject, "html": html})
        return self.fail_on != len(self.calls)


@pytest.fixture
def store() -> MemoryBookingStore:
    return MemoryBookingStore()


@pytest.fixture
def calendar() -> StubCalendar:
    return StubCalendar()


@pytest.fixture
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture
def client(calendar, mailer, monkeypatch):
    monkeypatch.setattr(settings, "OWNER_EMAIL", "owner@example.com")
    app.dependency_overrides[get_calendar] = lambda: calendar
    app.dependency_overrides[get_mail_sender] = lambda: mailer
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
