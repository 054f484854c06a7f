"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from svgtree.models.responses import HealthResponse
from svgtree.svg.elements import Tag

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        tags_supported=len(Tag),
    )
