"""
Domain entities with business logic.

Patterns used
-------------
- **Aggregate** ``Route``: owns its ``DeparturePoint`` objects; a departure
  point has no identity outside its route.
- **Result value** ``SeatResult``: book/cancel report expected failures as
  data instead of raising.
- **State Pattern** on ``Booking``: enforces valid lifecycle transitions
  (PENDING -> CONFIRMED -> COMPLETED | CANCELLED); a booking
  holds one or more seats of a single (departure point, fare class) pool.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .enums import BOOKING_TRANSITIONS, BookingStatus, FareClass, SeatError


class InvalidSeatId(ValueError):
    """Raised by seat queries given an id outside the 70-seat layout."""

    def __init__(self, seat_id: object):
        super().__init__(f"Invalid seat id: {seat_id!r}")
        self.seat_id = seat_id


class InventoryCorrupted(AssertionError):
    """A taken-seat set violates the layout invariants (bad catalog load)."""


class CatalogError(ValueError):
    """Raised while loading a malformed route catalog."""


class InvalidStateTransition(Exception):
    """Raised when a booking status change violates the state machine."""


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class SeatResult:
    error: Optional[SeatError] = None
    seat_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> SeatResult:
        return cls()

    @classmethod
    def failure(cls, error: SeatError, seat_id: Optional[str] = None) -> SeatResult:
        return cls(error=error, seat_id=seat_id)


# ── Entities ──────────────────────────────────────────────────────────


def _empty_pools() -> dict[FareClass, set[str]]:
    return {fare_class: set() for fare_class in FareClass}


@dataclass
class DeparturePoint:
    name: str
    seats_taken: dict[FareClass, set[str]] = field(default_factory=_empty_pools)

    def taken(self, fare_class: FareClass) -> set[str]:
        return self.seats_taken.setdefault(fare_class, set())


@dataclass
class Route:
    id: str
    origin: str
    destinations: list[str]
    fares: dict[FareClass, int]
    duration: str
    departure_points: list[DeparturePoint] = field(default_factory=list)
    arrival: str = ""
    bus_type: str = "Standard"
    departure_time: str = ""
    arrival_time: str = ""

    def get_departure_point(self, name: str) -> Optional[DeparturePoint]:
        for point in self.departure_points:
            if point.name == name:
                return point
        return None

    def fare_for(self, fare_class: FareClass) -> int:
        return self.fares[fare_class]


@dataclass
class Booking:
    reference: str
    route_id: str
    departure_point: str
    fare_class: FareClass
    seat_ids: list[str]
    passenger_name: str
    unit_price: int
    currency: str
    status: BookingStatus = BookingStatus.CONFIRMED
    idempotency_key: Optional[str] = None
    created_at: Optional[datetime] = None

    def transition_to(self, new_status: BookingStatus) -> None:
        """Move to *new_status* if the transition is legal, else raise."""
        allowed = BOOKING_TRANSITIONS.get(self.status, set())
        if new_status not in allowed:
            raise InvalidStateTransition(
                f"Cannot transition from {self.status.value} to {new_status.value}"
            )
        self.status = new_status

    @property
    def price(self) -> int:
        return self.unit_price * len(self.seat_ids)

    @property
    def is_active(self) -> bool:
        return self.status in (BookingStatus.PENDING, BookingStatus.CONFIRMED)

    def release_seat(self, seat_id: str) -> None:
        """Drop one seat; releasing the last seat cancels the booking."""
        if len(self.seat_ids) == 1:
            self.transition_to(BookingStatus.CANCELLED)
        else:
            self.seat_ids.remove(seat_id)
