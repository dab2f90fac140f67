from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from app.domain.entities.booking import Booking


class BookingStorePort(ABC):
    @abstractmethod
    def add(self, booking: Booking) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: str) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """Replace an existing booking record."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def locked(self, booking_id: str) -> AbstractContextManager[None]:
        """
        Hold the per-booking lock for the duration of a workflow step.
        Steps on different bookings never block each other.
        Locks exist only for stored bookings; an unknown id is not locked.
        """
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError
