"""In-memory roster cache: one snapshot, one validity window, one lock."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

from hsaroster.models.employee import Employee
from hsaroster.persistence.locking import SharedExclusiveLock


class CacheState(StrEnum):
    EMPTY = "empty"
    VALID = "valid"
    EXPIRED = "expired"


@dataclass(frozen=True)
class RosterSnapshot:
    employees: tuple[Employee, ...]
    fetched_at: float


class RosterCache:
    """IRosterCache holding the last fetched roster for ``ttl_seconds``.

    Readers share the lock; ``set`` and ``invalidate`` take it exclusively and
    swap the whole snapshot, so a reader sees either the old roster or the new
    one. ``get`` hands out copies so callers can mutate their records freely.
    """

    def __init__(self, ttl_seconds: float = 24 * 60 * 60,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._lock = SharedExclusiveLock()
        self._snapshot: RosterSnapshot | None = None

    def get(self) -> list[Employee] | None:
        with self._lock.shared():
            snap = self._snapshot
            if snap is None or not snap.employees or self._expired(snap):
                return None
            return [emp.model_copy() for emp in snap.employees]

    def set(self, employees: list[Employee]) -> None:
        frozen = tuple(emp.model_copy() for emp in employees)
        with self._lock.exclusive():
            self._snapshot = RosterSnapshot(employees=frozen, fetched_at=self._clock())

    def invalidate(self) -> None:
        with self._lock.exclusive():
            self._snapshot = None

    def snapshot(self) -> RosterSnapshot | None:
        with self._lock.shared():
            return self._snapshot

    def state(self) -> CacheState:
        with self._lock.shared():
            snap = self._snapshot
            if snap is None or not snap.employees:
                return CacheState.EMPTY
            return CacheState.EXPIRED if self._expired(snap) else CacheState.VALID

    def _expired(self, snap: RosterSnapshot) -> bool:
        return self._clock() - snap.fetched_at >= self._ttl
