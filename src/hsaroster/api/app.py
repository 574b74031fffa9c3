"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from hsaroster.api.routes import admin, health, roster
from hsaroster.core.config import AppSettings, load_settings
from hsaroster.core.logging import configure_logging
from hsaroster.persistence import create_roster_service
from hsaroster.services.roster import RosterService


def create_app(
    settings: AppSettings | None = None,
    roster_service: RosterService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Settings and the roster service are resolved at startup unless injected.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        resolved = settings or load_settings()
        configure_logging(resolved.log_level, resolved.log_json)
        app.state.settings = resolved
        app.state.roster_service = roster_service or create_roster_service(resolved)
        yield

    app = FastAPI(
        title="HSA Roster",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(roster.router)
    app.include_router(health.router)
    app.include_router(admin.router, prefix="/admin")
    return app
