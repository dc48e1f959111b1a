"""
Catalog endpoints
=================

GET /api/v1/routes                          -- list / search routes
GET /api/v1/routes/{route_id}               -- route detail
GET /api/v1/routes/{route_id}/seats         -- seat map for one departure point
GET /api/v1/routes/{route_id}/availability  -- per departure point summary
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from seatbook.api.dependencies import get_catalog, get_engine
from seatbook.api.errors import raise_for_result, route_not_found
from seatbook.api.middleware import limiter
from seatbook.api.schemas import (
    AvailabilitySummaryResponse,
    DeparturePointAvailability,
    RouteResponse,
    SeatMapResponse,
    SeatResponse,
)
from seatbook.config import settings
from seatbook.domain.entities import Route, SeatResult
from seatbook.domain.enums import FareClass, SeatError, SeatState
from seatbook.domain.inventory import SeatInventoryEngine
from seatbook.domain.layout import parse_seat_id, seat_side
from seatbook.infrastructure.catalog import CatalogStore

router = APIRouter(prefix="/routes", tags=["routes"])


def _route_or_404(catalog: CatalogStore, route_id: str) -> Route:
    route = catalog.get_route(route_id)
    if route is None:
        raise route_not_found()
    return route


@router.get(
    "",
    response_model=list[RouteResponse],
    summary="List or search routes",
)
@limiter.limit(settings.rate_limit)
async def list_routes(
    request: Request,
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    catalog: CatalogStore = Depends(get_catalog),
):
    return catalog.search_routes(origin=origin, destination=destination)


@router.get(
    "/{route_id}",
    response_model=RouteResponse,
    summary="Get route detail",
)
@limiter.limit(settings.rate_limit)
async def get_route(
    request: Request,
    route_id: str,
    catalog: CatalogStore = Depends(get_catalog),
):
    return _route_or_404(catalog, route_id)


@router.get(
    "/{route_id}/seats",
    response_model=SeatMapResponse,
    summary="Seat map for one departure point and fare class",
)
@limiter.limit(settings.rate_limit)
async def get_seat_map(
    request: Request,
    route_id: str,
    departure_point: str = Query(..., min_length=1),
    fare_class: FareClass = FareClass.CLASSIC,
    catalog: CatalogStore = Depends(get_catalog),
    engine: SeatInventoryEngine = Depends(get_engine),
):
    route = _route_or_404(catalog, route_id)
    point = route.get_departure_point(departure_point)
    if point is None:
        raise_for_result(SeatResult.failure(SeatError.UNKNOWN_DEPARTURE_POINT))

    seats = []
    for seat_id, state in engine.seat_map(point, fare_class):
        row, letter = parse_seat_id(seat_id)
        seats.append(
            SeatResponse(
                seat_id=seat_id,
                row=row,
                letter=letter,
                side=seat_side(letter),
                state=state,
                taken=state == SeatState.TAKEN,
            )
        )
    return SeatMapResponse(
        route_id=route.id,
        departure_point=point.name,
        fare_class=fare_class,
        available_count=engine.available_seat_count(point, fare_class),
        seats=seats,
    )


@router.get(
    "/{route_id}/availability",
    response_model=AvailabilitySummaryResponse,
    summary="Available seats per departure point",
    description=(
        "Counts are derived from the taken-seat pools on every request. "
        "On equal counts the first declared departure point is reported "
        "as best."
    ),
)
@limiter.limit(settings.rate_limit)
async def get_availability(
    request: Request,
    route_id: str,
    fare_class: FareClass = FareClass.CLASSIC,
    catalog: CatalogStore = Depends(get_catalog),
    engine: SeatInventoryEngine = Depends(get_engine),
):
    route = _route_or_404(catalog, route_id)
    rows = engine.availability_across_departure_points(route, fare_class)
    best = engine.best_departure_point(route, fare_class)
    return AvailabilitySummaryResponse(
        route_id=route.id,
        fare_class=fare_class,
        departure_points=[
            DeparturePointAvailability(
                departure_point=point.name, available_count=count
            )
            for point, count in rows
        ],
        best_departure_point=best[0].name if best else None,
        total_available=engine.total_available_seats(route, fare_class),
    )
