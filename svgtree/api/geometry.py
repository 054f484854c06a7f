"""POST /api/geometry/line: line measurements and points along it."""

from __future__ import annotations

import math

from fastapi import APIRouter

from svgtree.models.requests import LineGeometryRequest
from svgtree.models.responses import LineGeometryResponse
from svgtree.svg.primitives import Line

router = APIRouter()


@router.post("/geometry/line", response_model=LineGeometryResponse)
async def line_geometry(req: LineGeometryRequest) -> LineGeometryResponse:
    line = Line.between((req.x1, req.y1), (req.x2, req.y2))
    slope = line.get_slope()

    return LineGeometryResponse(
        width=line.get_width(),
        height=line.get_height(),
        length=line.get_length(),
        slope=slope if math.isfinite(slope) else None,
        points=[line.along(p) for p in req.percents],
    )
