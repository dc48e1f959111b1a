"""Domain enumerations and state-transition rules."""

import enum


class FareClass(str, enum.Enum):
    CLASSIC = "Classic"
    VIP = "VIP"


class SeatState(str, enum.Enum):
    FREE = "FREE"
    TAKEN = "TAKEN"


class SeatError(str, enum.Enum):
    """Expected, caller-recoverable failures of a seat transition."""

    INVALID_SEAT_ID = "INVALID_SEAT_ID"
    UNKNOWN_DEPARTURE_POINT = "UNKNOWN_DEPARTURE_POINT"
    SEAT_ALREADY_TAKEN = "SEAT_ALREADY_TAKEN"
    SEAT_NOT_BOOKED = "SEAT_NOT_BOOKED"


class BookingStatus(str, enum.Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


# State machine: maps current status -> set of valid next statuses
BOOKING_TRANSITIONS: dict[BookingStatus, set[BookingStatus]] = {
    BookingStatus.PENDING: {BookingStatus.CONFIRMED, BookingStatus.CANCELLED},
    BookingStatus.CONFIRMED: {BookingStatus.COMPLETED, BookingStatus.CANCELLED},
    BookingStatus.COMPLETED: set(),
    BookingStatus.CANCELLED: set(),
}


class BusType(str, enum.Enum):
    EXPRESS = "Express"
    LUXURY = "Luxury"
    STANDARD = "Standard"
    VIP = "VIP"
