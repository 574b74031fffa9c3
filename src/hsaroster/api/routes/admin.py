"""Admin endpoints for roster cache management."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Request

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["admin"])


@router.post("/cache/invalidate")
def invalidate_cache(request: Request) -> dict[str, str]:
    """Drop the cached roster so the next page load refetches it."""
    request.app.state.roster_service.cache.invalidate()
    logger.info("roster_cache_invalidated")
    return {"status": "invalidated"}
