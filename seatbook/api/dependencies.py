"""FastAPI dependency injection helpers."""

from fastapi import Request

from seatbook.domain.inventory import SeatInventoryEngine
from seatbook.infrastructure.bookings import BookingRepository
from seatbook.infrastructure.catalog import CatalogStore


def get_catalog(request: Request) -> CatalogStore:
    return request.app.state.catalog


def get_engine(request: Request) -> SeatInventoryEngine:
    return request.app.state.engine


def get_bookings(request: Request) -> BookingRepository:
    return request.app.state.bookings
