"""
Seat Inventory Engine
=====================

Answers availability queries and performs the two seat transitions
against the routes of a ``CatalogStore``.

Model
-----
* Each (DeparturePoint, FareClass) pair owns an independent pool over the
  same 70-seat layout.  Classic and VIP are *not* merged: a departure point
  can report 60 Classic and 68 VIP seats free at the same time.
* A seat in a pool is either FREE or TAKEN.  ``book_seat`` / ``book_seats``
  are the only FREE -> TAKEN transitions (``book_seats`` is all-or-nothing),
  ``cancel_seat_booking`` the only TAKEN -> FREE.
* Availability is ``CAPACITY - len(taken)``, recomputed on every call.

Expected failures (unknown departure point, invalid seat id, seat already
taken, seat not booked) come back as ``SeatResult`` values.  Only a corrupted
pool raises, via ``InventoryCorrupted``.

Complexity: O(1) per seat transition / query, O(P) per route-level query
where P = departure points on the route.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from seatbook.infrastructure.locks import SeatLockRegistry

from .entities import (
    DeparturePoint,
    InvalidSeatId,
    InventoryCorrupted,
    Route,
    SeatResult,
)
from .enums import FareClass, SeatError, SeatState
from .layout import CAPACITY, is_valid_seat_id, list_seat_identifiers

logger = logging.getLogger(__name__)


class SeatInventoryEngine:
    """High-level API used by the booking and catalog endpoints."""

    def __init__(self, locks: Optional[SeatLockRegistry] = None):
        self.locks = locks or SeatLockRegistry()

    # ── Queries ───────────────────────────────────────────────────────

    @staticmethod
    def list_seat_identifiers() -> list[str]:
        return list_seat_identifiers()

    @staticmethod
    def is_seat_taken(
        departure_point: DeparturePoint, seat_id: str, fare_class: FareClass
    ) -> bool:
        if not is_valid_seat_id(seat_id):
            raise InvalidSeatId(seat_id)
        return seat_id in departure_point.taken(fare_class)

    @staticmethod
    def available_seat_count(
        departure_point: DeparturePoint, fare_class: FareClass
    ) -> int:
        taken = departure_point.taken(fare_class)
        available = CAPACITY - len(taken)
        if available < 0 or not all(is_valid_seat_id(s) for s in taken):
            logger.error(
                "Corrupted seat pool at %r (%s): %d taken entries",
                departure_point.name,
                fare_class.value,
                len(taken),
            )
            raise InventoryCorrupted(
                f"Seat pool {departure_point.name!r}/{fare_class.value} "
                f"holds {len(taken)} entries outside a {CAPACITY}-seat layout"
            )
        return available

    def availability_across_departure_points(
        self, route: Route, fare_class: FareClass
    ) -> list[tuple[DeparturePoint, int]]:
        """Available count for every departure point, in declared order."""
        return [
            (point, self.available_seat_count(point, fare_class))
            for point in route.departure_points
        ]

    def best_departure_point(
        self, route: Route, fare_class: FareClass
    ) -> Optional[tuple[DeparturePoint, int]]:
        """Highest availability; on ties the first declared point wins."""
        best: Optional[tuple[DeparturePoint, int]] = None
        for point, count in self.availability_across_departure_points(
            route, fare_class
        ):
            # strict ">" keeps the earlier point on equal counts
            if best is None or count > best[1]:
                best = (point, count)
        return best

    def total_available_seats(self, route: Route, fare_class: FareClass) -> int:
        return sum(
            count
            for _, count in self.availability_across_departure_points(
                route, fare_class
            )
        )

    def seat_map(
        self, departure_point: DeparturePoint, fare_class: FareClass
    ) -> list[tuple[str, SeatState]]:
        taken = departure_point.taken(fare_class)
        return [
            (seat_id, SeatState.TAKEN if seat_id in taken else SeatState.FREE)
            for seat_id in list_seat_identifiers()
        ]

    # ── Transitions ───────────────────────────────────────────────────

    def book_seat(
        self,
        route: Route,
        departure_point_name: str,
        seat_id: str,
        fare_class: FareClass,
    ) -> SeatResult:
        return self.book_seats(route, departure_point_name, [seat_id], fare_class)

    def book_seats(
        self,
        route: Route,
        departure_point_name: str,
        seat_ids: Sequence[str],
        fare_class: FareClass,
    ) -> SeatResult:
        """Take every seat in *seat_ids* or none of them.

        All ids are validated before the pair lock is taken; under the lock
        the first seat already taken (or repeated in the request) aborts the
        whole call with ``SEAT_ALREADY_TAKEN`` and the pool is left as it was.
        """
        point = route.get_departure_point(departure_point_name)
        if point is None:
            return self._reject(route, departure_point_name, None, fare_class,
                                SeatError.UNKNOWN_DEPARTURE_POINT)
        if not seat_ids:
            return self._reject(route, departure_point_name, None, fare_class,
                                SeatError.INVALID_SEAT_ID)
        for seat_id in seat_ids:
            if not is_valid_seat_id(seat_id):
                return self._reject(route, departure_point_name, seat_id,
                                    fare_class, SeatError.INVALID_SEAT_ID)

        with self.locks.lock_for(route.id, point.name, fare_class):
            taken = point.taken(fare_class)
            seen: set[str] = set()
            for seat_id in seat_ids:
                if seat_id in taken or seat_id in seen:
                    return self._reject(route, departure_point_name, seat_id,
                                        fare_class, SeatError.SEAT_ALREADY_TAKEN)
                seen.add(seat_id)
            taken.update(seen)

        logger.info(
            "Booked seats %s at %r on route %s (%s)",
            ", ".join(seat_ids), point.name, route.id, fare_class.value,
        )
        return SeatResult.success()

    def cancel_seat_booking(
        self,
        route: Route,
        departure_point_name: str,
        seat_id: str,
        fare_class: FareClass,
    ) -> SeatResult:
        point = route.get_departure_point(departure_point_name)
        if point is None:
            return self._reject(route, departure_point_name, seat_id, fare_class,
                                SeatError.UNKNOWN_DEPARTURE_POINT)
        if not is_valid_seat_id(seat_id):
            return self._reject(route, departure_point_name, seat_id, fare_class,
                                SeatError.INVALID_SEAT_ID)

        with self.locks.lock_for(route.id, point.name, fare_class):
            taken = point.taken(fare_class)
            if seat_id not in taken:
                return self._reject(route, departure_point_name, seat_id,
                                    fare_class, SeatError.SEAT_NOT_BOOKED)
            taken.discard(seat_id)

        logger.info(
            "Released seat %s at %r on route %s (%s)",
            seat_id, point.name, route.id, fare_class.value,
        )
        return SeatResult.success()

    @staticmethod
    def _reject(
        route: Route,
        departure_point_name: str,
        seat_id: Optional[str],
        fare_class: FareClass,
        error: SeatError,
    ) -> SeatResult:
        logger.debug(
            "Rejected %s for seat %r at %r on route %s (%s)",
            error.value, seat_id, departure_point_name, route.id, fare_class.value,
        )
        return SeatResult.failure(error, seat_id)
