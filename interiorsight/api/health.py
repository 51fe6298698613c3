"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from interiorsight import __version__
from interiorsight.engine.registry import get_registry
from interiorsight.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        stages_registered=get_registry().count,
    )
