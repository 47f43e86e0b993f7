"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from epicycles.api import epicycle, health, transform

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(transform.router)
api_router.include_router(epicycle.router)
