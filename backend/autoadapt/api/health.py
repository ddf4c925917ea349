"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from autoadapt import __version__
from autoadapt.engine.registry import get_registry
from autoadapt.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        adapters_registered=get_registry().count,
    )
