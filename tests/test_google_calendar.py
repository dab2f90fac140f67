from __future__ import annotations

import json
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import httpx
import pytest

from app.domain.entities.calendar_event import CalendarEventRequest
from app.infrastructure.calendar.google_calendar_client import GoogleCalendar

TZ = ZoneInfo("America/Los_Angeles")
START = datetime(2025, 6, 1, 14, 0, tzinfo=TZ)
REQUEST = CalendarEventRequest(
    summary="Booking: Strategy Session - A",
    description="Service: Strategy Session",
    start=START,
    end=START + timedelta(hours=1),
    request_id="booking-123",
    timezone="America/Los_Angeles",
)


def _calendar(handler) -> GoogleCalendar:
    return GoogleCalendar(
        client_id="cid",
        client_secret="secret",
        refresh_token="refresh",
        calendar_id="primary",
        token_url="https://oauth.test/token",
        base_url="https://calendar.test/v3",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def test_create_event_refreshes_token_and_requests_conference():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.host == "oauth.test":
            return httpx.Response(200, json={"access_token": "tok", "expires_in": 3600})
        return httpx.Response(
            200,
            json={
                "id": "evt1",
                "conferenceData": {"entryPoints": [{"entryPointType": "video", "uri": "https://meet.google.com/x"}]},
            },
        )

    event = _calendar(handler).create_event(REQUEST)

    assert event.event_id == "evt1"
    assert event.meet_link == "https://meet.google.com/x"

    token_request, insert_request = seen
    assert b"grant_type=refresh_token" in token_request.content
    assert insert_request.url.path == "/v3/calendars/primary/events"
    assert insert_request.url.params["conferenceDataVersion"] == "1"
    assert insert_request.headers["Authorization"] == "Bearer tok"
    payload = json.loads(insert_request.content)
    assert payload["conferenceData"]["createRequest"]["requestId"] == "booking-123"
    assert payload["start"] == {"dateTime": "2025-06-01T14:00:00-07:00", "timeZone": "America/Los_Angeles"}
    assert payload["end"]["dateTime"] == "2025-06-01T15:00:00-07:00"


def test_access_token_is_reused_until_expiry():
    token_calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal token_calls
        if request.url.host == "oauth.test":
            token_calls += 1
            return httpx.Response(200, json={"access_token": "tok", "expires_in": 3600})
        return httpx.Response(200, json={"id": "evt"})

    calendar = _calendar(handler)
    calendar.create_event(REQUEST)
    calendar.create_event(REQUEST)

    assert token_calls == 1


def test_missing_meet_link_returns_none():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "oauth.test":
            return httpx.Response(200, json={"access_token": "tok"})
        return httpx.Response(200, json={"id": "evt2"})

    assert _calendar(handler).create_event(REQUEST).meet_link is None


def test_insert_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "oauth.test":
            return httpx.Response(200, json={"access_token": "tok"})
        return httpx.Response(403, json={"error": {"message": "forbidden"}})

    with pytest.raises(httpx.HTTPStatusError):
        _calendar(handler).create_event(REQUEST)


def test_refresh_token_required():
    with pytest.raises(ValueError):
        GoogleCalendar(refresh_token="", client=httpx.Client())
