"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from seatbook.domain.entities import Booking
from seatbook.domain.enums import BookingStatus, FareClass, SeatState
from seatbook.domain.layout import CAPACITY


# ── Requests ──────────────────────────────────────────────────────────


class PoolRequest(BaseModel):
    route_id: str
    departure_point: str = Field(..., min_length=1)
    fare_class: FareClass


class SeatRequest(PoolRequest):
    seat_id: str = Field(..., examples=["11A"])


class BookingCreateRequest(PoolRequest):
    seat_ids: list[str] = Field(
        ...,
        min_length=1,
        max_length=CAPACITY,
        examples=[["11A", "11B"]],
        description="Seats to book together; either all are taken or none.",
    )
    passenger_name: str = Field(..., min_length=1, max_length=120)
    confirm: bool = Field(
        True,
        description="False leaves the booking PENDING; its seats are held all the same.",
    )
    idempotency_key: Optional[str] = Field(
        None,
        max_length=64,
        description="Client-generated UUID to prevent double-booking on retries.",
    )


# ── Responses ─────────────────────────────────────────────────────────


class DeparturePointResponse(BaseModel):
    name: str


class RouteResponse(BaseModel):
    id: str
    origin: str
    destinations: list[str]
    arrival: str
    fares: dict[FareClass, int]
    duration: str
    bus_type: str
    departure_time: str
    arrival_time: str
    departure_points: list[DeparturePointResponse]

    model_config = {"from_attributes": True}


class SeatResponse(BaseModel):
    seat_id: str
    row: int
    letter: str
    side: str
    state: SeatState
    taken: bool


class SeatMapResponse(BaseModel):
    route_id: str
    departure_point: str
    fare_class: FareClass
    available_count: int
    seats: list[SeatResponse]


class DeparturePointAvailability(BaseModel):
    departure_point: str
    available_count: int


class AvailabilitySummaryResponse(BaseModel):
    route_id: str
    fare_class: FareClass
    departure_points: list[DeparturePointAvailability]
    best_departure_point: Optional[str] = None
    total_available: int


class BookingResponse(BaseModel):
    reference: str
    route_id: str
    departure_point: str
    fare_class: FareClass
    seat_ids: list[str]
    passenger_name: str
    unit_price: int
    price: int
    currency: str
    status: BookingStatus
    created_at: Optional[datetime] = None

    @classmethod
    def from_booking(cls, booking: Booking) -> BookingResponse:
        return cls(
            reference=booking.reference,
            route_id=booking.route_id,
            departure_point=booking.departure_point,
            fare_class=booking.fare_class,
            seat_ids=list(booking.seat_ids),
            passenger_name=booking.passenger_name,
            unit_price=booking.unit_price,
            price=booking.price,
            currency=booking.currency,
            status=booking.status,
            created_at=booking.created_at,
        )


class SeatReleaseResponse(BaseModel):
    route_id: str
    departure_point: str
    fare_class: FareClass
    seat_id: str
    available_count: int
    booking_reference: Optional[str] = None
    booking_status: Optional[BookingStatus] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    routes: int = 0


class ErrorResponse(BaseModel):
    detail: str
    code: Optional[str] = None
