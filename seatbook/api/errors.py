"""
Maps domain failures onto HTTP responses.

Every error body is ``{"detail": str, "code": str}`` so the mobile client can
tell "pick another seat" (SEAT_ALREADY_TAKEN) apart from client/data bugs
(UNKNOWN_DEPARTURE_POINT, INVALID_SEAT_ID, VALIDATION_ERROR).
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from seatbook.domain.entities import InventoryCorrupted, SeatResult
from seatbook.domain.enums import SeatError

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "ROUTE_NOT_FOUND"
BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
INVALID_BOOKING_STATE = "INVALID_BOOKING_STATE"
VALIDATION_ERROR = "VALIDATION_ERROR"
INVENTORY_CORRUPTED = "INVENTORY_CORRUPTED"

SEAT_ERROR_STATUS: dict[SeatError, int] = {
    SeatError.UNKNOWN_DEPARTURE_POINT: 404,
    SeatError.INVALID_SEAT_ID: 422,
    SeatError.SEAT_ALREADY_TAKEN: 409,
    SeatError.SEAT_NOT_BOOKED: 409,
}

SEAT_ERROR_DETAIL: dict[SeatError, str] = {
    SeatError.UNKNOWN_DEPARTURE_POINT: "Departure point not found on this route",
    SeatError.INVALID_SEAT_ID: "Seat id is not part of the bus layout",
    SeatError.SEAT_ALREADY_TAKEN: "Seat already taken, please pick another seat",
    SeatError.SEAT_NOT_BOOKED: "Seat is not booked",
}


class ApiError(HTTPException):
    def __init__(self, status_code: int, detail: str, code: str):
        super().__init__(status_code=status_code, detail=detail)
        self.code = code


def route_not_found() -> ApiError:
    return ApiError(404, "Route not found", ROUTE_NOT_FOUND)


def booking_not_found() -> ApiError:
    return ApiError(404, "Booking not found", BOOKING_NOT_FOUND)


def raise_for_result(result: SeatResult) -> None:
    if result.ok:
        return
    detail = SEAT_ERROR_DETAIL[result.error]
    if result.seat_id:
        detail = f"{detail} ({result.seat_id})"
    raise ApiError(SEAT_ERROR_STATUS[result.error], detail, result.error.value)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    detail = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=422,
        content={"detail": detail or "Invalid request", "code": VALIDATION_ERROR},
    )


async def inventory_corrupted_handler(
    request: Request, exc: InventoryCorrupted
) -> JSONResponse:
    logger.error("Inventory invariant violated on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Seat inventory is corrupted", "code": INVENTORY_CORRUPTED},
    )
