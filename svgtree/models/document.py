"""Document configuration and declarative element specs."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgtree.config import settings
from svgtree.svg.elements import Tag


def _default_root_attributes() -> dict[str, str]:
    return {"xmlns": settings.svgtree_namespace}


class DocumentOptions(BaseModel):
    """Construction options for the root <svg> container."""

    attributes: dict[str, str] = Field(default_factory=_default_root_attributes)


class ElementSpec(BaseModel):
    """Declarative description of one element and its subtree."""

    tag: Tag
    attributes: dict[str, str | int | float] = Field(default_factory=dict)
    content: str = ""
    children: list[ElementSpec] = Field(default_factory=list)
    # Path only: visited in order via line_to, then back to the first point if close
    points: list[tuple[float, float]] = Field(default_factory=list)
    close: bool = False


ElementSpec.model_rebuild()
