"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    tags_supported: int = 0


class RenderResponse(BaseModel):
    svg: str
    element_count: int = 0


class LineGeometryResponse(BaseModel):
    width: float
    height: float
    length: float
    slope: float | None = None  # None for vertical lines
    points: list[tuple[float, float]] = Field(default_factory=list)
