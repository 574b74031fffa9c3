"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


# Plain ``def``: the cache lock is thread-based.
@router.get("/ready")
def ready(request: Request) -> dict[str, str]:
    cache = request.app.state.roster_service.cache
    return {"status": "ready", "cache": str(cache.state())}
