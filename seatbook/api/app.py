"""
FastAPI application factory.

* Loads the route catalog and wires the seat inventory engine and booking
  ledger onto ``app.state``.
* Registers routes for the catalog, bookings and admin.
* Maps domain failures to ``{"detail", "code"}`` error bodies.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from seatbook.api.errors import (
    ApiError,
    api_error_handler,
    inventory_corrupted_handler,
    validation_error_handler,
)
from seatbook.api.middleware import limiter
from seatbook.api.routes import admin, bookings, catalog
from seatbook.config import settings
from seatbook.domain.entities import InventoryCorrupted
from seatbook.domain.inventory import SeatInventoryEngine
from seatbook.infrastructure.bookings import BookingRepository
from seatbook.infrastructure.catalog import CatalogStore, load_catalog

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Seat inventory ready: %d routes", len(app.state.catalog))
    yield
    logger.info(
        "Shutting down with %d bookings in the ledger",
        len(app.state.bookings.list_bookings()),
    )


def create_app(store: Optional[CatalogStore] = None) -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Seat inventory for intercity bus routes.  Search routes, view "
            "seat maps per departure point and fare class, and book or "
            "cancel seats without double-booking."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.catalog = store if store is not None else load_catalog(
        settings.catalog_file
    )
    app.state.engine = SeatInventoryEngine()
    app.state.bookings = BookingRepository(settings.booking_reference_prefix)

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Domain errors
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(InventoryCorrupted, inventory_corrupted_handler)

    # Routers
    app.include_router(catalog.router, prefix="/api/v1")
    app.include_router(bookings.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
