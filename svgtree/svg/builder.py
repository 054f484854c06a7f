"""Build an element tree from declarative ElementSpec models."""

from __future__ import annotations

import logging

from svgtree.models.document import ElementSpec
from svgtree.svg.elements import Element, Tag
from svgtree.svg.primitives import Circle, Group, Line, Path, Rect, Svg, Text

logger = logging.getLogger(__name__)

_PRIMITIVES: dict[Tag, type[Element]] = {
    Tag.SVG: Svg,
    Tag.GROUP: Group,
    Tag.RECT: Rect,
    Tag.CIRCLE: Circle,
    Tag.LINE: Line,
    Tag.TEXT: Text,
    Tag.PATH: Path,
}


def build_element(spec: ElementSpec) -> Element:
    """Construct the primitive for spec.tag, apply its attributes, then recurse into children.

    Attributes go through Element.set, so numbers are formatted the same way as with
    the typed constructors. Spec attributes override constructor defaults.
    """
    element = _PRIMITIVES[spec.tag]()

    for key, value in spec.attributes.items():
        element.set(key, value)
    if spec.content:
        element.content = spec.content

    if spec.points or spec.close:
        if isinstance(element, Path):
            for point in spec.points:
                element.line_to_point(point)
            if spec.close:
                element.to_origin()
        else:
            logger.warning("Ignoring path points on <%s> element", spec.tag.value)

    for child_spec in spec.children:
        element.add_child(build_element(child_spec))

    return element


def count_elements(root: Element) -> int:
    return sum(1 for _ in root.iter())
