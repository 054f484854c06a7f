"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgtree.models.document import ElementSpec


class RenderRequest(BaseModel):
    root: ElementSpec = Field(..., description="Root element spec, usually tag 'svg'")
    xml_declaration: bool = Field(default=False, description="Prepend <?xml ...?> to the output")


class LineGeometryRequest(BaseModel):
    x1: float = Field(..., description="Start x")
    y1: float = Field(..., description="Start y")
    x2: float = Field(..., description="End x")
    y2: float = Field(..., description="End y")
    percents: list[float] = Field(
        default_factory=lambda: [0.5],
        description="Fractions along the line to sample (0 = start, 1 = end)",
    )
