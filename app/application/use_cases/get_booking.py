from dataclasses import dataclass

from app.application.ports.booking_store import BookingStorePort
from app.application.utils.state_helpers import load_booking
from app.domain.entities.booking import Booking


@dataclass
class GetBookingUseCase:
    store: BookingStorePort

    def execute(self, booking_id: str) -> Booking:
        return load_booking(self.store, booking_id)
