"""
Repository Pattern -- in-memory booking ledger.

Keeps the reservations the API hands back to clients.  The seat pools
themselves live in the catalog; this ledger only records who holds which
seats, under which reference.
"""

from __future__ import annotations

import itertools
import threading
from datetime import datetime, timezone
from typing import Optional

from seatbook.domain.entities import Booking
from seatbook.domain.enums import BookingStatus, FareClass


class BookingRepository:
    def __init__(self, reference_prefix: str = "BK", year: Optional[int] = None):
        self._lock = threading.Lock()
        self._bookings: dict[str, Booking] = {}
        self._by_idempotency_key: dict[str, str] = {}
        self._prefix = reference_prefix
        self._year = year or datetime.now(timezone.utc).year
        self._sequence = itertools.count(1)

    def _next_reference(self) -> str:
        # e.g. BK2026001
        return f"{self._prefix}{self._year}{next(self._sequence):03d}"

    def create_booking(
        self,
        *,
        route_id: str,
        departure_point: str,
        fare_class: FareClass,
        seat_ids: list[str],
        passenger_name: str,
        unit_price: int,
        currency: str,
        status: BookingStatus = BookingStatus.CONFIRMED,
        idempotency_key: str | None = None,
    ) -> Booking:
        with self._lock:
            booking = Booking(
                reference=self._next_reference(),
                route_id=route_id,
                departure_point=departure_point,
                fare_class=fare_class,
                seat_ids=list(seat_ids),
                passenger_name=passenger_name,
                unit_price=unit_price,
                currency=currency,
                status=status,
                idempotency_key=idempotency_key,
                created_at=datetime.now(timezone.utc),
            )
            self._bookings[booking.reference] = booking
            if idempotency_key:
                self._by_idempotency_key[idempotency_key] = booking.reference
            return booking

    def get_by_reference(self, reference: str) -> Optional[Booking]:
        return self._bookings.get(reference)

    def get_by_idempotency_key(self, key: str) -> Optional[Booking]:
        reference = self._by_idempotency_key.get(key)
        return self._bookings.get(reference) if reference else None

    def list_bookings(
        self,
        status: Optional[BookingStatus] = None,
        limit: Optional[int] = None,
    ) -> list[Booking]:
        """Bookings in creation order, optionally filtered and truncated."""
        with self._lock:
            bookings = list(self._bookings.values())
        if status is not None:
            bookings = [b for b in bookings if b.status == status]
        if limit is not None:
            bookings = bookings[:limit]
        return bookings

    def find_active_for_seat(
        self,
        route_id: str,
        departure_point: str,
        fare_class: FareClass,
        seat_id: str,
    ) -> Optional[Booking]:
        """The PENDING or CONFIRMED booking holding *seat_id* in that pool."""
        for booking in self.list_bookings():
            if (
                booking.is_active
                and booking.route_id == route_id
                and booking.departure_point == departure_point
                and booking.fare_class == fare_class
                and seat_id in booking.seat_ids
            ):
                return booking
        return None
