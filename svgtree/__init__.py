"""svgtree: build SVG element trees from typed shapes and render them as text."""

from svgtree.models.document import DocumentOptions, ElementSpec
from svgtree.svg.builder import build_element
from svgtree.svg.elements import Element, Tag
from svgtree.svg.primitives import (
    Circle,
    Group,
    Line,
    Path,
    PathCommand,
    PathSegment,
    Rect,
    Svg,
    Text,
)
from svgtree.svg.serializer import serialize, to_document

__all__ = [
    "Circle",
    "DocumentOptions",
    "Element",
    "ElementSpec",
    "Group",
    "Line",
    "Path",
    "PathCommand",
    "PathSegment",
    "Rect",
    "Svg",
    "Tag",
    "Text",
    "build_element",
    "serialize",
    "to_document",
]
