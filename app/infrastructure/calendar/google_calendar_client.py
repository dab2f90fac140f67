from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from app.application.ports.calendar import CalendarPort
from app.core.config import settings
from app.domain.entities.calendar_event import CalendarEvent, CalendarEventRequest


class GoogleCalendar(CalendarPort):
    """Google Calendar v3 over REST, authorized with a long-lived OAuth refresh token."""

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        refresh_token: str | None = None,
        calendar_id: str | None = None,
        token_url: str | None = None,
        base_url: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._client_id = client_id or settings.GOOGLE_CLIENT_ID
        self._client_secret = client_secret or settings.GOOGLE_CLIENT_SECRET
        self._refresh_token = refresh_token or settings.GOOGLE_REFRESH_TOKEN
        self._calendar_id = calendar_id or settings.GOOGLE_CALENDAR_ID
        self._token_url = token_url or settings.GOOGLE_TOKEN_URL
        self._base_url = (base_url or settings.GOOGLE_CALENDAR_BASE_URL).rstrip("/")
        self._client = client or httpx.Client(timeout=10.0)
        self._access_token: str | None = None
        self._expires_at = 0.0
        self._logger = logging.getLogger(__name__)

        if not self._refresh_token:
            raise ValueError("GOOGLE_REFRESH_TOKEN is required for Google Calendar")

    def create_event(self, request: CalendarEventRequest) -> CalendarEvent:
        url = f"{self._base_url}/calendars/{self._calendar_id}/events"
        headers = {"Authorization": f"Bearer {self._get_access_token()}"}
        params = {"conferenceDataVersion": 1}

        response = self._client.post(url, params=params, json=self._event_payload(request), headers=headers)
        if response.status_code >= 400:
            self._logger.error(
                "Google Calendar insert failed",
                extra={"status": response.status_code, "error": response.text, "request_id": request.request_id},
            )
            response.raise_for_status()

        data = response.json()
        event_id = data.get("id")
        if not event_id:
            raise ValueError("No event ID returned from Google Calendar API")

        self._logger.info("Google Calendar event inserted", extra={"event_id": event_id})
        return CalendarEvent(event_id=str(event_id), meet_link=_extract_meet_link(data))

    def _event_payload(self, request: CalendarEventRequest) -> dict[str, Any]:
        start: dict[str, str] = {"dateTime": request.start.isoformat()}
        end: dict[str, str] = {"dateTime": request.end.isoformat()}
        if request.timezone:
            start["timeZone"] = request.timezone
            end["timeZone"] = request.timezone
        return {
            "summary": request.summary,
            "description": request.description,
            "start": start,
            "end": end,
            "conferenceData": {
                "createRequest": {
                    "requestId": request.request_id,
                    "conferenceSolutionKey": {"type": "hangoutsMeet"},
                }
            },
        }

    def _get_access_token(self) -> str:
        # Refresh a minute early so a token never expires mid-request
        if self._access_token and time.time() < self._expires_at - 60:
            return self._access_token

        response = self._client.post(
            self._token_url,
            data={
                "client_id": self._client_id or "",
                "client_secret": self._client_secret or "",
                "refresh_token": self._refresh_token or "",
                "grant_type": "refresh_token",
            },
        )
        if response.status_code != 200:
            self._logger.error("Google token refresh failed", extra={"status": response.status_code, "error": response.text})
            response.raise_for_status()

        tokens = response.json()
        access_token = tokens.get("access_token")
        if not access_token:
            raise ValueError("No access token in refresh response")

        self._access_token = access_token
        self._expires_at = time.time() + float(tokens.get("expires_in", 3600))
        return access_token


def _extract_meet_link(data: dict[str, Any]) -> str | None:
    entry_points = (data.get("conferenceData") or {}).get("entryPoints") or []
    if entry_points and entry_points[0].get("uri"):
        return entry_points[0]["uri"]
    return data.get("hangoutLink")
