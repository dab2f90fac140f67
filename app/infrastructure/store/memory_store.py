from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from app.application.ports.booking_store import BookingStorePort
from app.domain.entities.booking import Booking


class MemoryBookingStore(BookingStorePort):
    def __init__(self) -> None:
        self._bookings: dict[str, Booking] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._table_lock = threading.Lock()  # guards both dicts

    def add(self, booking: Booking) -> None:
        with self._table_lock:
            if booking.booking_id in self._bookings:
                raise KeyError(f"Booking already exists: {booking.booking_id}")
            self._locks[booking.booking_id] = threading.Lock()
            self._bookings[booking.booking_id] = booking

    def get(self, booking_id: str) -> Booking | None:
        with self._table_lock:
            return self._bookings.get(booking_id)

    def save(self, booking: Booking) -> None:
        with self._table_lock:
            if booking.booking_id not in self._bookings:
                raise KeyError(f"Unknown booking: {booking.booking_id}")
            self._bookings[booking.booking_id] = booking

    def count(self) -> int:
        with self._table_lock:
            return len(self._bookings)

    def lock_count(self) -> int:
        with self._table_lock:
            return len(self._locks)

    @contextmanager
    def locked(self, booking_id: str) -> Iterator[None]:
        with self._table_lock:
            lock = self._locks.get(booking_id)
        if lock is None:
            # Unknown id: nothing to guard, the caller's lookup reports it
            yield
            return
        with lock:
            yield

    def clear(self) -> None:
        with self._table_lock:
            self._bookings.clear()
            self._locks.clear()
