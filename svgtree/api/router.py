"""Master API router. Mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from svgtree.api import geometry, health, render

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(render.router)
api_router.include_router(geometry.router)
