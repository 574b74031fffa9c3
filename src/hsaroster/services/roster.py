"""RosterService: read-through cache in front of the roster data API."""

from __future__ import annotations

from datetime import date

import structlog

from hsaroster.core.exceptions import UpstreamError
from hsaroster.core.protocols import IRosterCache, IRosterSource
from hsaroster.models.employee import Employee
from hsaroster.rules.batch import process_employees

logger = structlog.get_logger(__name__)


class RosterService:
    """Fetch-on-miss orchestration for the employee roster.

    Cache and source are injected at construction time. A failed fetch or
    parse propagates to the caller and leaves the cache untouched.
    """

    def __init__(self, *, source: IRosterSource, cache: IRosterCache) -> None:
        self._source = source
        self._cache = cache

    @property
    def cache(self) -> IRosterCache:
        return self._cache

    def get_employees(self) -> list[Employee]:
        cached = self._cache.get()
        if cached is not None:
            logger.debug("roster_cache_hit", count=len(cached))
            return cached

        logger.info("roster_cache_miss")
        try:
            body = self._source.fetch()
            employees = self._source.parse_response(body)
        except UpstreamError as exc:
            logger.error("upstream_fetch_failed", error=str(exc))
            raise

        self._cache.set(employees)
        logger.info("roster_fetched", count=len(employees))
        # Hand back copies so the caller cannot mutate the cached roster.
        return [emp.model_copy() for emp in employees]

    def get_processed_employees(self, today: date | None = None) -> list[Employee]:
        return process_employees(self.get_employees(), today)
