from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from app.application.exceptions import ValidationError
from app.application.ports.booking_store import BookingStorePort
from app.domain.entities.booking import Booking, BookingStatus

REQUIRED_FIELDS = ("name", "email", "phone", "date", "time")

logger = logging.getLogger(__name__)


def _clean(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


@dataclass
class CreateBookingUseCase:
    store: BookingStorePort

    def execute(self, payload: dict[str, Any]) -> str:
        """Validate the request fields and store a new pending booking. Returns the booking id."""
        required = {field: _clean(payload.get(field)) for field in REQUIRED_FIELDS}
        if not all(required.values()):
            raise ValidationError("Missing required fields")

        booking = Booking(
            booking_id=str(uuid.uuid4()),
            service=payload.get("service"),
            service_name=payload.get("service_name"),
            price=payload.get("price"),
            price_usd=payload.get("price_usd"),
            created_at=datetime.now(timezone.utc),
            status=BookingStatus.PENDING,
            **required,
        )
        self.store.add(booking)

        logger.info("Booking created", extra={"booking_id": booking.booking_id})
        return booking.booking_id
