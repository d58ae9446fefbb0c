"""Master API router. Mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from collage.api import composite, health, layout

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(layout.router)
api_router.include_router(composite.router)
