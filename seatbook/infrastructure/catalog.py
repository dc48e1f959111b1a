"""
Catalog store -- the single owner of Routes and their DeparturePoints.

Routes are loaded once (seed fixture or JSON file) and never created or
deleted afterwards; only the taken-seat sets inside each DeparturePoint
change, and only through ``SeatInventoryEngine``.
"""

from __future__ import annotations

import json
import logging
import unicodedata
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, Field, ValidationError

from seatbook.domain.entities import CatalogError, DeparturePoint, Route
from seatbook.domain.enums import BusType, FareClass
from seatbook.domain.layout import is_valid_seat_id

logger = logging.getLogger(__name__)


# ── Catalog records (JSON shape) ──────────────────────────────────────


class DeparturePointRecord(BaseModel):
    name: str = Field(..., min_length=1)
    seats_taken: dict[FareClass, list[str]] = {}


class RouteRecord(BaseModel):
    id: str = Field(..., min_length=1)
    origin: str
    destinations: list[str] = Field(..., min_length=1)
    fares: dict[FareClass, int]
    duration: str
    departure_points: list[DeparturePointRecord] = Field(..., min_length=1)
    arrival: str = ""
    bus_type: BusType = BusType.STANDARD
    departure_time: str = ""
    arrival_time: str = ""


def _to_route(record: RouteRecord) -> Route:
    missing = [fc.value for fc in FareClass if fc not in record.fares]
    if missing:
        raise CatalogError(f"Route {record.id}: missing fares for {missing}")

    points: list[DeparturePoint] = []
    seen: set[str] = set()
    for dp in record.departure_points:
        if dp.name in seen:
            raise CatalogError(
                f"Route {record.id}: duplicate departure point {dp.name!r}"
            )
        seen.add(dp.name)
        point = DeparturePoint(name=dp.name)
        for fare_class, seat_ids in dp.seats_taken.items():
            bad = [s for s in seat_ids if not is_valid_seat_id(s)]
            if bad:
                raise CatalogError(
                    f"Route {record.id} / {dp.name}: invalid seat ids {bad}"
                )
            if len(set(seat_ids)) != len(seat_ids):
                raise CatalogError(
                    f"Route {record.id} / {dp.name}: duplicate seat ids in the "
                    f"{fare_class.value} pool"
                )
            point.taken(fare_class).update(seat_ids)
        points.append(point)

    return Route(
        id=record.id,
        origin=record.origin,
        destinations=list(record.destinations),
        fares=dict(record.fares),
        duration=record.duration,
        departure_points=points,
        arrival=record.arrival,
        bus_type=record.bus_type.value,
        departure_time=record.departure_time,
        arrival_time=record.arrival_time,
    )


def _fold(text: str) -> str:
    """Case- and accent-insensitive form used for city matching."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


# ── Store ─────────────────────────────────────────────────────────────


class CatalogStore:
    def __init__(self, routes: Iterable[Route]):
        self._routes: dict[str, Route] = {}
        for route in routes:
            if route.id in self._routes:
                raise CatalogError(f"Duplicate route id {route.id!r}")
            self._routes[route.id] = route

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> CatalogStore:
        try:
            parsed = [RouteRecord.model_validate(r) for r in records]
        except ValidationError as exc:
            raise CatalogError(f"Malformed catalog: {exc}") from exc
        return cls(_to_route(r) for r in parsed)

    @classmethod
    def from_file(cls, path: str | Path) -> CatalogStore:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        if isinstance(data, dict):
            if "routes" not in data:
                raise CatalogError(f"{path}: catalog object has no \"routes\" key")
            data = data["routes"]
        return cls.from_records(data)

    def get_route(self, route_id: str) -> Optional[Route]:
        return self._routes.get(route_id)

    def list_routes(self) -> list[Route]:
        return list(self._routes.values())

    def search_routes(
        self, origin: Optional[str] = None, destination: Optional[str] = None
    ) -> list[Route]:
        """Routes whose origin / any destination match (ignores case and accents)."""
        results = []
        for route in self._routes.values():
            if origin and _fold(route.origin) != _fold(origin):
                continue
            if destination and _fold(destination) not in {
                _fold(d) for d in route.destinations
            }:
                continue
            results.append(route)
        return results

    def __len__(self) -> int:
        return len(self._routes)


def load_catalog(catalog_file: Optional[str] = None) -> CatalogStore:
    """Build the store from *catalog_file* if given, else the built-in seed."""
    if catalog_file:
        store = CatalogStore.from_file(catalog_file)
        source = catalog_file
    else:
        from .seed import ROUTES

        store = CatalogStore.from_records(ROUTES)
        source = "built-in seed"
    logger.info("Loaded %d routes from %s", len(store), source)
    return store
