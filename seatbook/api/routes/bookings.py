"""
Booking endpoints
=================

POST  /api/v1/bookings                        -- book one or more seats (returns 201)
GET   /api/v1/bookings                        -- list bookings, optional status filter and limit
GET   /api/v1/bookings/{reference}            -- booking detail
PATCH /api/v1/bookings/{reference}/confirm    -- PENDING -> CONFIRMED
PATCH /api/v1/bookings/{reference}/complete   -- CONFIRMED -> COMPLETED (trip taken)
PATCH /api/v1/bookings/{reference}/cancel     -- cancel a booking and free its seats
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from seatbook.api.dependencies import get_bookings, get_catalog, get_engine
from seatbook.api.errors import (
    INVALID_BOOKING_STATE,
    ApiError,
    booking_not_found,
    raise_for_result,
    route_not_found,
)
from seatbook.api.middleware import limiter
from seatbook.api.schemas import (
    BookingCreateRequest,
    BookingResponse,
    ErrorResponse,
)
from seatbook.config import settings
from seatbook.domain.entities import Booking, InvalidStateTransition
from seatbook.domain.enums import BookingStatus
from seatbook.domain.inventory import SeatInventoryEngine
from seatbook.infrastructure.bookings import BookingRepository
from seatbook.infrastructure.catalog import CatalogStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])

_STATE_ERRORS = {
    404: {"model": ErrorResponse, "description": "Booking not found."},
    409: {"model": ErrorResponse, "description": "Transition not allowed from the current status."},
}


def _booking_or_404(bookings: BookingRepository, reference: str) -> Booking:
    booking = bookings.get_by_reference(reference)
    if booking is None:
        raise booking_not_found()
    return booking


def _transition(booking: Booking, new_status: BookingStatus) -> None:
    try:
        booking.transition_to(new_status)
    except InvalidStateTransition as exc:
        raise ApiError(409, str(exc), INVALID_BOOKING_STATE) from exc
    logger.info("Booking %s is now %s", booking.reference, new_status.value)


@router.post(
    "",
    status_code=201,
    response_model=BookingResponse,
    summary="Book seats",
    description=(
        "Books every seat in ``seat_ids`` in one (departure point, fare class) "
        "pool.  If any seat is taken nothing is booked and the first "
        "conflicting seat is named in the error."
    ),
    responses={
        404: {"model": ErrorResponse, "description": "Unknown route or departure point."},
        409: {"model": ErrorResponse, "description": "A requested seat is already taken."},
        422: {"model": ErrorResponse, "description": "Seat id outside the bus layout."},
    },
)
@limiter.limit(settings.rate_limit)
async def create_booking(
    request: Request,
    body: BookingCreateRequest,
    catalog: CatalogStore = Depends(get_catalog),
    engine: SeatInventoryEngine = Depends(get_engine),
    bookings: BookingRepository = Depends(get_bookings),
):
    # ── Idempotency guard ─────────────────────────────────────────
    if body.idempotency_key:
        existing = bookings.get_by_idempotency_key(body.idempotency_key)
        if existing:
            return BookingResponse.from_booking(existing)

    route = catalog.get_route(body.route_id)
    if route is None:
        raise route_not_found()

    raise_for_result(
        engine.book_seats(route, body.departure_point, body.seat_ids, body.fare_class)
    )

    booking = bookings.create_booking(
        route_id=route.id,
        departure_point=body.departure_point,
        fare_class=body.fare_class,
        seat_ids=body.seat_ids,
        passenger_name=body.passenger_name,
        unit_price=route.fare_for(body.fare_class),
        currency=settings.currency,
        status=BookingStatus.CONFIRMED if body.confirm else BookingStatus.PENDING,
        idempotency_key=body.idempotency_key,
    )
    return BookingResponse.from_booking(booking)


@router.get(
    "",
    response_model=list[BookingResponse],
    summary="List bookings",
    description="Bookings in creation order; ``limit`` keeps only the first N.",
)
@limiter.limit(settings.rate_limit)
async def list_bookings(
    request: Request,
    status: Optional[BookingStatus] = None,
    limit: Optional[int] = Query(None, ge=1),
    bookings: BookingRepository = Depends(get_bookings),
):
    return [
        BookingResponse.from_booking(b)
        for b in bookings.list_bookings(status, limit)
    ]


@router.get(
    "/{reference}",
    response_model=BookingResponse,
    summary="Get booking detail",
    responses={404: _STATE_ERRORS[404]},
)
@limiter.limit(settings.rate_limit)
async def get_booking(
    request: Request,
    reference: str,
    bookings: BookingRepository = Depends(get_bookings),
):
    return BookingResponse.from_booking(_booking_or_404(bookings, reference))


@router.patch(
    "/{reference}/confirm",
    response_model=BookingResponse,
    summary="Confirm a pending booking",
    responses=_STATE_ERRORS,
)
@limiter.limit(settings.rate_limit)
async def confirm_booking(
    request: Request,
    reference: str,
    bookings: BookingRepository = Depends(get_bookings),
):
    booking = _booking_or_404(bookings, reference)
    _transition(booking, BookingStatus.CONFIRMED)
    return BookingResponse.from_booking(booking)


@router.patch(
    "/{reference}/complete",
    response_model=BookingResponse,
    summary="Mark a confirmed booking as travelled",
    description="The booking's seats stay taken in their pool.",
    responses=_STATE_ERRORS,
)
@limiter.limit(settings.rate_limit)
async def complete_booking(
    request: Request,
    reference: str,
    bookings: BookingRepository = Depends(get_bookings),
):
    booking = _booking_or_404(bookings, reference)
    _transition(booking, BookingStatus.COMPLETED)
    return BookingResponse.from_booking(booking)


@router.patch(
    "/{reference}/cancel",
    response_model=BookingResponse,
    summary="Cancel a booking",
    description=(
        "Transitions a PENDING or CONFIRMED booking to CANCELLED and "
        "returns its seats to the departure point's pool."
    ),
    responses=_STATE_ERRORS,
)
@limiter.limit(settings.rate_limit)
async def cancel_booking(
    request: Request,
    reference: str,
    catalog: CatalogStore = Depends(get_catalog),
    engine: SeatInventoryEngine = Depends(get_engine),
    bookings: BookingRepository = Depends(get_bookings),
):
    booking = _booking_or_404(bookings, reference)
    route = catalog.get_route(booking.route_id)
    if route is None:
        raise route_not_found()

    _transition(booking, BookingStatus.CANCELLED)

    for seat_id in booking.seat_ids:
        result = engine.cancel_seat_booking(
            route, booking.departure_point, seat_id, booking.fare_class
        )
        if not result.ok:
            logger.warning(
                "Booking %s cancelled but seat %s was not held (%s)",
                booking.reference, seat_id, result.error.value,
            )
    return BookingResponse.from_booking(booking)
