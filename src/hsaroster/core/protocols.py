"""Protocol interfaces for the HSA roster service.

Structural typing keeps the service layer independent of the concrete
HTTP client and cache, and lets tests pass in-memory doubles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hsaroster.models.employee import Employee
    from hsaroster.persistence.memory_backend import CacheState


# ---------------------------------------------------------------------------
# Upstream roster source
# ---------------------------------------------------------------------------

@runtime_checkable
class IRosterSource(Protocol):
    """Remote tabular data API holding the employee roster."""

    def fetch(self) -> bytes: ...

    def parse_response(self, body: bytes) -> list[Employee]: ...


# ---------------------------------------------------------------------------
# Roster cache
# ---------------------------------------------------------------------------

@runtime_checkable
class IRosterCache(Protocol):
    """Single-entry, time-bounded store of the last fetched roster."""

    def get(self) -> list[Employee] | None: ...

    def set(self, employees: list[Employee]) -> None: ...

    def invalidate(self) -> None: ...

    def state(self) -> CacheState: ...
