"""
Fixed physical seat layout
==========================

Every bus shares one layout: 14 rows of 5 seats, three on the left of the
aisle (A-C) and two on the right (D-E).  Seat ids are ``{row}{letter}``,
e.g. ``1A`` .. ``14E``.  Capacity is always 70.
"""

from __future__ import annotations

from typing import Optional

SEAT_ROWS = 14
LEFT_LETTERS = ("A", "B", "C")
RIGHT_LETTERS = ("D", "E")
SEAT_LETTERS = LEFT_LETTERS + RIGHT_LETTERS
CAPACITY = SEAT_ROWS * len(SEAT_LETTERS)


def list_seat_identifiers() -> list[str]:
    """All 70 seat ids in row-major order (1A, 1B, ... 1E, 2A, ... 14E)."""
    return [
        f"{row}{letter}"
        for row in range(1, SEAT_ROWS + 1)
        for letter in SEAT_LETTERS
    ]


_SEAT_IDS = frozenset(list_seat_identifiers())


def is_valid_seat_id(seat_id: object) -> bool:
    return isinstance(seat_id, str) and seat_id in _SEAT_IDS


def parse_seat_id(seat_id: str) -> Optional[tuple[int, str]]:
    """Split a valid seat id into ``(row, letter)``; ``None`` if invalid."""
    if not is_valid_seat_id(seat_id):
        return None
    return int(seat_id[:-1]), seat_id[-1]


def seat_side(letter: str) -> str:
    return "left" if letter in LEFT_LETTERS else "right"
