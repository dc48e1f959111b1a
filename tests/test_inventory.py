"""Unit tests for the seat inventory engine."""

import pytest

from seatbook.domain.entities import (
    DeparturePoint,
    InvalidSeatId,
    InventoryCorrupted,
    Route,
)
from seatbook.domain.enums import FareClass, SeatError, SeatState
from seatbook.domain.layout import CAPACITY
from tests.conftest import BAMENDA_PARK, NKWEN_PARK


def _route(*points: DeparturePoint) -> Route:
    return Route(
        id="x",
        origin="Douala",
        destinations=["Kribi"],
        fares={FareClass.CLASSIC: 3000, FareClass.VIP: 5000},
        duration="3h 00m",
        departure_points=list(points),
    )


class TestBamendaParkScenario:
    def test_fixture_starts_with_sixty_classic_seats(self, engine, bamenda_park):
        assert engine.available_seat_count(bamenda_park, FareClass.CLASSIC) == 60

    def test_book_free_then_taken_seat(self, engine, bamenda_route, bamenda_park):
        result = engine.book_seat(bamenda_route, BAMENDA_PARK, "11A", FareClass.CLASSIC)
        assert result.ok
        assert engine.available_seat_count(bamenda_park, FareClass.CLASSIC) == 59

        result = engine.book_seat(bamenda_route, BAMENDA_PARK, "1A", FareClass.CLASSIC)
        assert result.error == SeatError.SEAT_ALREADY_TAKEN
        assert engine.available_seat_count(bamenda_park, FareClass.CLASSIC) == 59

    def test_unknown_departure_point_on_every_route(self, engine, catalog):
        for route in catalog.list_routes():
            result = engine.book_seat(route, "Nonexistent Park", "1A", FareClass.CLASSIC)
            assert result.error == SeatError.UNKNOWN_DEPARTURE_POINT


class TestQueries:
    def test_is_seat_taken(self, engine, bamenda_park):
        assert engine.is_seat_taken(bamenda_park, "1A", FareClass.CLASSIC)
        assert not engine.is_seat_taken(bamenda_park, "11A", FareClass.CLASSIC)

    def test_is_seat_taken_rejects_invalid_id(self, engine, bamenda_park):
        with pytest.raises(InvalidSeatId):
            engine.is_seat_taken(bamenda_park, "15A", FareClass.CLASSIC)

    def test_conservation_invariant(self, engine, catalog):
        for route in catalog.list_routes():
            for point in route.departure_points:
                for fare_class in FareClass:
                    available = engine.available_seat_count(point, fare_class)
                    assert available + len(point.taken(fare_class)) == CAPACITY

    def test_seat_map_covers_layout(self, engine, bamenda_park):
        seat_map = engine.seat_map(bamenda_park, FareClass.CLASSIC)
        assert len(seat_map) == CAPACITY
        taken = [s for s, state in seat_map if state == SeatState.TAKEN]
        assert len(taken) == 10
        assert seat_map[0] == ("1A", SeatState.TAKEN)

    def test_list_seat_identifiers(self, engine):
        assert len(engine.list_seat_identifiers()) == CAPACITY


class TestTransitions:
    def test_double_booking_fails_without_mutation(self, engine, bamenda_route, bamenda_park):
        before = len(bamenda_park.taken(FareClass.VIP))
        assert engine.book_seat(bamenda_route, BAMENDA_PARK, "6C", FareClass.VIP).ok
        again = engine.book_seat(bamenda_route, BAMENDA_PARK, "6C", FareClass.VIP)
        assert again.error == SeatError.SEAT_ALREADY_TAKEN
        assert len(bamenda_park.taken(FareClass.VIP)) == before + 1

    def test_cancel_round_trip(self, engine, bamenda_route, bamenda_park):
        before = set(bamenda_park.taken(FareClass.CLASSIC))
        assert engine.book_seat(bamenda_route, BAMENDA_PARK, "12B", FareClass.CLASSIC).ok
        assert engine.cancel_seat_booking(
            bamenda_route, BAMENDA_PARK, "12B", FareClass.CLASSIC
        ).ok
        assert bamenda_park.taken(FareClass.CLASSIC) == before

    def test_cancel_free_seat_is_not_booked(self, engine, bamenda_route, bamenda_park):
        before = set(bamenda_park.taken(FareClass.CLASSIC))
        result = engine.cancel_seat_booking(
            bamenda_route, BAMENDA_PARK, "14E", FareClass.CLASSIC
        )
        assert result.error == SeatError.SEAT_NOT_BOOKED
        assert bamenda_park.taken(FareClass.CLASSIC) == before

    def test_cancel_unknown_departure_point(self, engine, bamenda_route):
        result = engine.cancel_seat_booking(
            bamenda_route, "Nonexistent Park", "1A", FareClass.CLASSIC
        )
        assert result.error == SeatError.UNKNOWN_DEPARTURE_POINT

    def test_invalid_seat_id_is_a_result_not_an_exception(self, engine, bamenda_route):
        for op in (engine.book_seat, engine.cancel_seat_booking):
            result = op(bamenda_route, BAMENDA_PARK, "99Z", FareClass.CLASSIC)
            assert result.error == SeatError.INVALID_SEAT_ID

    def test_departure_point_checked_before_seat_id(self, engine, bamenda_route):
        result = engine.book_seat(bamenda_route, "Nowhere", "99Z", FareClass.CLASSIC)
        assert result.error == SeatError.UNKNOWN_DEPARTURE_POINT


class TestMultiSeatBooking:
    def test_books_every_seat(self, engine, bamenda_route, bamenda_park):
        result = engine.book_seats(
            bamenda_route, BAMENDA_PARK, ["11A", "11B", "11C"], FareClass.CLASSIC
        )
        assert result.ok
        assert {"11A", "11B", "11C"} <= bamenda_park.taken(FareClass.CLASSIC)
        assert engine.available_seat_count(bamenda_park, FareClass.CLASSIC) == 57

    def test_one_taken_seat_rolls_back_the_request(self, engine, bamenda_route, bamenda_park):
        before = set(bamenda_park.taken(FareClass.CLASSIC))
        result = engine.book_seats(
            bamenda_route, BAMENDA_PARK, ["11A", "1A", "11B"], FareClass.CLASSIC
        )
        assert result.error == SeatError.SEAT_ALREADY_TAKEN
        assert result.seat_id == "1A"
        assert bamenda_park.taken(FareClass.CLASSIC) == before

    def test_invalid_id_rejected_before_any_seat_is_taken(self, engine, bamenda_route, bamenda_park):
        before = set(bamenda_park.taken(FareClass.CLASSIC))
        result = engine.book_seats(
            bamenda_route, BAMENDA_PARK, ["11A", "15A"], FareClass.CLASSIC
        )
        assert result.error == SeatError.INVALID_SEAT_ID
        assert result.seat_id == "15A"
        assert bamenda_park.taken(FareClass.CLASSIC) == before

    def test_repeated_seat_in_request(self, engine, bamenda_route, bamenda_park):
        result = engine.book_seats(
            bamenda_route, BAMENDA_PARK, ["11A", "11A"], FareClass.CLASSIC
        )
        assert result.error == SeatError.SEAT_ALREADY_TAKEN
        assert result.seat_id == "11A"
        assert "11A" not in bamenda_park.taken(FareClass.CLASSIC)

    def test_empty_request(self, engine, bamenda_route):
        result = engine.book_seats(bamenda_route, BAMENDA_PARK, [], FareClass.CLASSIC)
        assert result.error == SeatError.INVALID_SEAT_ID

    def test_unknown_departure_point(self, engine, bamenda_route):
        result = engine.book_seats(
            bamenda_route, "Nonexistent Park", ["11A"], FareClass.CLASSIC
        )
        assert result.error == SeatError.UNKNOWN_DEPARTURE_POINT


class TestIndependence:
    def test_cross_class_independence(self, engine, bamenda_route, bamenda_park):
        assert not engine.is_seat_taken(bamenda_park, "5A", FareClass.VIP)
        assert engine.book_seat(bamenda_route, BAMENDA_PARK, "5A", FareClass.CLASSIC).ok
        assert not engine.is_seat_taken(bamenda_park, "5A", FareClass.VIP)

    def test_cross_departure_point_independence(self, engine, bamenda_route):
        nkwen = bamenda_route.get_departure_point(NKWEN_PARK)
        before = engine.available_seat_count(nkwen, FareClass.CLASSIC)
        assert engine.book_seat(bamenda_route, BAMENDA_PARK, "5A", FareClass.CLASSIC).ok
        assert engine.available_seat_count(nkwen, FareClass.CLASSIC) == before

    def test_pools_are_not_merged(self, engine, bamenda_park):
        classic = engine.available_seat_count(bamenda_park, FareClass.CLASSIC)
        vip = engine.available_seat_count(bamenda_park, FareClass.VIP)
        assert classic + vip > CAPACITY


class TestRouteLevelAvailability:
    def test_declared_order(self, engine, bamenda_route):
        rows = engine.availability_across_departure_points(bamenda_route, FareClass.CLASSIC)
        assert [(p.name, c) for p, c in rows] == [(BAMENDA_PARK, 60), (NKWEN_PARK, 68)]

    def test_best_and_total(self, engine, bamenda_route):
        best, count = engine.best_departure_point(bamenda_route, FareClass.CLASSIC)
        assert (best.name, count) == (NKWEN_PARK, 68)
        assert engine.total_available_seats(bamenda_route, FareClass.CLASSIC) == 128

    def test_tie_goes_to_first_declared_point(self, engine):
        route = _route(DeparturePoint("Bonabéri"), DeparturePoint("Bessengue"),
                       DeparturePoint("Logbaba"))
        best, count = engine.best_departure_point(route, FareClass.CLASSIC)
        assert (best.name, count) == ("Bonabéri", CAPACITY)

    def test_tie_after_bookings(self, engine):
        route = _route(DeparturePoint("P1"), DeparturePoint("P2"), DeparturePoint("P3"))
        engine.book_seat(route, "P1", "1A", FareClass.CLASSIC)
        best, _ = engine.best_departure_point(route, FareClass.CLASSIC)
        assert best.name == "P2"

    def test_totals_follow_bookings(self, engine, bamenda_route):
        engine.book_seat(bamenda_route, NKWEN_PARK, "1A", FareClass.CLASSIC)
        assert engine.total_available_seats(bamenda_route, FareClass.CLASSIC) == 127

    def test_route_without_points(self, engine):
        assert engine.best_departure_point(_route(), FareClass.VIP) is None
        assert engine.total_available_seats(_route(), FareClass.VIP) == 0


class TestCorruptedInventory:
    def test_overfull_pool_raises(self, engine):
        point = DeparturePoint("Broken")
        point.taken(FareClass.CLASSIC).update(f"X{i}" for i in range(CAPACITY + 1))
        with pytest.raises(InventoryCorrupted):
            engine.available_seat_count(point, FareClass.CLASSIC)

    def test_foreign_seat_id_raises(self, engine):
        point = DeparturePoint("Broken")
        point.taken(FareClass.VIP).add("99Z")
        with pytest.raises(InventoryCorrupted):
            engine.available_seat_count(point, FareClass.VIP)
