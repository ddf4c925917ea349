"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from autoadapt.api import adapt, health, sizes

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(sizes.router)
api_router.include_router(adapt.router)
