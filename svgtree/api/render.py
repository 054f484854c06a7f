"""POST /api/render: element spec tree to SVG markup."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from svgtree.models.requests import RenderRequest
from svgtree.models.responses import RenderResponse
from svgtree.svg.builder import build_element, count_elements
from svgtree.svg.serializer import serialize, to_document

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest) -> RenderResponse:
    root = build_element(req.root)
    count = count_elements(root)
    logger.info("Rendering <%s> with %d elements", root.tag.value, count)

    if req.xml_declaration:
        svg = to_document(root)
    else:
        svg = serialize(root)

    return RenderResponse(svg=svg, element_count=count)
