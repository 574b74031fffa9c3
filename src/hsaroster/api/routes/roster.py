"""Roster page: fetch, compute HSA limits, render."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from hsaroster.core.exceptions import UpstreamError
from hsaroster.services.roster import RosterService

router = APIRouter(tags=["roster"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


# Plain ``def`` so each request runs on the threadpool.
@router.get("/", response_class=HTMLResponse)
def roster_page(request: Request):
    service: RosterService = request.app.state.roster_service
    try:
        employees = service.get_processed_employees()
    except UpstreamError as exc:
        # RosterService already logged the failure.
        return JSONResponse(status_code=500, content={"error": str(exc)})

    return templates.TemplateResponse(request, "index.html", {"employees": employees})
