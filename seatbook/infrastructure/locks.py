"""
Per-pair seat locks.

Book and cancel must serialise on one (route, departure point, fare class)
pair so that two callers cannot both read "seat free" and both commit.
Different pairs never share a lock.

Locks are ``threading.Lock`` objects: FastAPI runs sync handlers on a
threadpool, and async handlers hold the lock only across non-awaiting code.
Locks are created lazily; creation itself is guarded by a registry lock.
"""

from __future__ import annotations

import threading

from seatbook.domain.enums import FareClass


def pair_key(route_id: str, departure_point: str, fare_class: FareClass) -> str:
    return f"lock:{route_id}:{departure_point}:{fare_class.value}"


class SeatLockRegistry:
    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(
        self, route_id: str, departure_point: str, fare_class: FareClass
    ) -> threading.Lock:
        key = pair_key(route_id, departure_point, fare_class)
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
