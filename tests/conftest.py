"""
Shared test fixtures.

Every test gets a freshly loaded catalog (built-in seed) so seat pools
mutated by one test never leak into another.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from seatbook.domain.inventory import SeatInventoryEngine
from seatbook.infrastructure.bookings import BookingRepository
from seatbook.infrastructure.catalog import CatalogStore, load_catalog

# Route 9 (Bamenda -> Yaoundé / Douala) carries the "Bamenda Park" fixture:
# 10 Classic seats taken, including 1A.
BAMENDA_ROUTE_ID = "9"
BAMENDA_PARK = "Bamenda Park"
NKWEN_PARK = "Nkwen Motor Park"


@pytest.fixture
def catalog() -> CatalogStore:
    return load_catalog()


@pytest.fixture
def engine() -> SeatInventoryEngine:
    return SeatInventoryEngine()


@pytest.fixture
def bamenda_route(catalog):
    return catalog.get_route(BAMENDA_ROUTE_ID)


@pytest.fixture
def bamenda_park(bamenda_route):
    return bamenda_route.get_departure_point(BAMENDA_PARK)


@pytest.fixture
def ledger() -> BookingRepository:
    return BookingRepository("BK", year=2024)


@pytest_asyncio.fixture
async def client(catalog):
    """AsyncClient over a fresh app; rate-limit counters reset per test."""
    from seatbook.api.app import create_app
    from seatbook.api.middleware import limiter

    limiter.reset()
    app = create_app(catalog)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
