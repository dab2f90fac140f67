from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

NO_MEET_LINK = "No meet link"


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class Booking:
    booking_id: str
    name: str
    email: str
    phone: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    created_at: datetime
    service: str | None = None
    service_name: str | None = None
    price: str | int | float | None = None
    price_usd: str | int | float | None = None
    status: BookingStatus = BookingStatus.PENDING
    # Set by later workflow steps
    payment_verified: bool | None = None
    transaction_id: str | None = None
    calendar_event_id: str | None = None
    meet_link: str | None = None

    @property
    def has_meet_link(self) -> bool:
        return bool(self.meet_link) and self.meet_link != NO_MEET_LINK
