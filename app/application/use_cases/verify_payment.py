from __future__ import annotations

import logging
import time
from dataclasses import replace

from app.application.ports.booking_store import BookingStorePort
from app.application.utils.state_helpers import load_booking, require_booking_id
from app.domain.entities.booking import BookingStatus


class VerifyPaymentUseCase:
    """
    Mark a booking as paid. The caller asserts the payment; no gateway is consulted.
    """

    def __init__(self, store: BookingStorePort, placeholder_prefix: str = "DEMO_") -> None:
        self._store = store
        self._placeholder_prefix = placeholder_prefix
        self._logger = logging.getLogger(__name__)

    def execute(self, booking_id: str | None, transaction_id: str | None = None) -> str:
        booking_id = require_booking_id(booking_id)
        with self._store.locked(booking_id):
            booking = load_booking(self._store, booking_id)
            updated = replace(
                booking,
                status=BookingStatus.CONFIRMED,
                payment_verified=True,
                transaction_id=transaction_id or self._placeholder_transaction_id(),
            )
            self._store.save(updated)

        self._logger.info(
            "Payment verified",
            extra={"booking_id": booking_id, "transaction_id": updated.transaction_id},
        )
        return booking_id

    def _placeholder_transaction_id(self) -> str:
        return f"{self._placeholder_prefix}{int(time.time() * 1000)}"
