from __future__ import annotations

from app.application.exceptions import NotFoundError, ValidationError
from app.application.ports.booking_store import BookingStorePort
from app.domain.entities.booking import Booking


def require_booking_id(booking_id: str | None) -> str:
    """Return the stripped booking id or raise ValidationError if it is empty."""
    value = (booking_id or "").strip()
    if not value:
        raise ValidationError("Missing bookingId")
    return value


def load_booking(store: BookingStorePort, booking_id: str) -> Booking:
    booking = store.get(booking_id)
    if booking is None:
        raise NotFoundError("Booking not found")
    return booking
