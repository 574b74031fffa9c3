"""Shared test doubles for the roster source and the cache clock."""

from __future__ import annotations

from hsaroster.core.exceptions import UpstreamError
from hsaroster.models.employee import Employee


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeRosterSource:
    """IRosterSource returning a canned roster or raising a canned error."""

    def __init__(self, employees: list[Employee] | None = None,
                 error: UpstreamError | None = None) -> None:
        self.employees = employees or []
        self.error = error
        self.fetch_calls = 0

    def fetch(self) -> bytes:
        self.fetch_calls += 1
        if self.error is not None:
            raise self.error
        return b"{}"

    def parse_response(self, body: bytes) -> list[Employee]:
        return [emp.model_copy() for emp in self.employees]


def make_employee(**overrides: object) -> Employee:
    defaults: dict[str, object] = {
        "name": "Alice Smith",
        "plan_type": "Self-only",
        "deductible": 1600,
        "date_of_birth": "1980-03-10",
    }
    defaults.update(overrides)
    return Employee(**defaults)  # type: ignore[arg-type]


__all__ = ["FakeClock", "FakeRosterSource", "make_employee"]
