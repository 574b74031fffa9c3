"""In-process roster cache and the service wiring around it."""

from __future__ import annotations

from hsaroster.core.config import AppSettings
from hsaroster.persistence.memory_backend import RosterCache
from hsaroster.services.roster import RosterService
from hsaroster.sources.roster_api import RosterAPIClient


def create_roster_service(settings: AppSettings) -> RosterService:
    """Create a wired-up RosterService from application settings."""
    cache = RosterCache(ttl_seconds=settings.cache.ttl_seconds)
    source = RosterAPIClient.from_config(settings.upstream)
    return RosterService(source=source, cache=cache)
