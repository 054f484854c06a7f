"""Render an element tree to indented SVG markup."""

from __future__ import annotations

import logging

from svgtree.config import settings
from svgtree.svg.elements import Element, Tag

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def serialize(element: Element, indent_level: int = 0, indent: str | None = None) -> str:
    """Depth-first, pre-order rendering of element and its subtree.

    Childless elements self-close. Containers put each child on its own line one
    indent deeper, then close at their own indent. Text always renders
    <text ...>content</text>. Attribute values are written as stored, unescaped.
    """
    unit = settings.svgtree_indent if indent is None else indent
    pad = unit * indent_level
    name = element.tag.value
    attr_str = "".join(f' {k}="{v}"' for k, v in element.render_attributes())

    if element.tag is Tag.TEXT:
        return f"{pad}<{name}{attr_str}>{element.content}</{name}>"

    if not element.children:
        return f"{pad}<{name}{attr_str} />"

    lines = [f"{pad}<{name}{attr_str}>"]
    for child in element.children:
        lines.append(serialize(child, indent_level + 1, unit))
    lines.append(f"{pad}</{name}>")
    return "\n".join(lines)


def to_document(root: Element, xml_declaration: bool = True) -> str:
    """Complete document text: optional XML declaration, the tree, trailing newline."""
    body = serialize(root)
    logger.debug("Serialized <%s> document, %d elements", root.tag.value, sum(1 for _ in root.iter()))
    if xml_declaration:
        return f"{XML_DECLARATION}\n{body}\n"
    return f"{body}\n"
