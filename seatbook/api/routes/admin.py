"""
Admin / observability endpoints
===============================

POST /api/v1/admin/seats/release -- free a seat directly in its pool
GET  /api/v1/admin/health        -- simple health check
"""

from fastapi import APIRouter, Depends, Request

from seatbook.api.dependencies import get_bookings, get_catalog, get_engine
from seatbook.api.errors import raise_for_result, route_not_found
from seatbook.api.middleware import limiter
from seatbook.api.schemas import HealthResponse, SeatReleaseResponse, SeatRequest
from seatbook.config import settings
from seatbook.domain.inventory import SeatInventoryEngine
from seatbook.infrastructure.bookings import BookingRepository
from seatbook.infrastructure.catalog import CatalogStore

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "/seats/release",
    response_model=SeatReleaseResponse,
    summary="Release a taken seat",
    description=(
        "Removes the seat from the (departure point, fare class) pool. "
        "The active booking holding that seat drops it; a booking left "
        "without seats is marked CANCELLED."
    ),
)
@limiter.limit(settings.rate_limit)
async def release_seat(
    request: Request,
    body: SeatRequest,
    catalog: CatalogStore = Depends(get_catalog),
    engine: SeatInventoryEngine = Depends(get_engine),
    bookings: BookingRepository = Depends(get_bookings),
):
    route = catalog.get_route(body.route_id)
    if route is None:
        raise route_not_found()

    raise_for_result(
        engine.cancel_seat_booking(
            route, body.departure_point, body.seat_id, body.fare_class
        )
    )

    booking = bookings.find_active_for_seat(
        route.id, body.departure_point, body.fare_class, body.seat_id
    )
    if booking:
        booking.release_seat(body.seat_id)

    point = route.get_departure_point(body.departure_point)
    return SeatReleaseResponse(
        route_id=route.id,
        departure_point=point.name,
        fare_class=body.fare_class,
        seat_id=body.seat_id,
        available_count=engine.available_seat_count(point, body.fare_class),
        booking_reference=booking.reference if booking else None,
        booking_status=booking.status if booking else None,
    )


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health(catalog: CatalogStore = Depends(get_catalog)):
    return HealthResponse(routes=len(catalog))
