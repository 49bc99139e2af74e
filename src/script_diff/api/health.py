"""Health check endpoints for container probes."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

router = APIRouter()


class HealthStatus(BaseModel):
    """Health check response."""
    status: str


@router.get("/live", response_model=HealthStatus)
async def liveness() -> HealthStatus:
    """Liveness probe - is the process running?

    Always returns 200 if the process is alive.
    """
    return HealthStatus(status="alive")


@router.get("/startup", response_model=HealthStatus)
async def startup(request: Request) -> JSONResponse:
    """Startup probe - has the lifespan startup completed?

    Returns 503 until the app is fully initialized.
    """
    initialized = getattr(request.app.state, "initialized", False)

    return JSONResponse(
        status_code=200 if initialized else 503,
        content={
            "status": "started" if initialized else "starting",
        },
    )
