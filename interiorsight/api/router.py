"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from interiorsight.api import health, rank, verify

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(verify.router)
api_router.include_router(rank.router)
