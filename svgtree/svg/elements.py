"""Element tree node: an attribute store plus owned children.

Every shape primitive subclasses Element and pins a Tag. The tag set is closed;
serializer and builder match on it explicitly.
"""

from __future__ import annotations

import enum
import math
from typing import Any, ClassVar, Iterator, Mapping, TypeVar

from svgtree.utils.math_helpers import format_number, parse_number

E = TypeVar("E", bound="Element")


class Tag(str, enum.Enum):
    SVG = "svg"
    GROUP = "g"
    RECT = "rect"
    CIRCLE = "circle"
    LINE = "line"
    TEXT = "text"
    PATH = "path"


class Element:
    """One markup tag instance.

    Attribute values are stored as text; numbers are formatted when assigned, not
    when rendered. Children are owned by exactly one parent, so the tree stays
    acyclic and unshared.
    """

    tag: ClassVar[Tag]

    def __init__(self, attributes: Mapping[str, Any] | None = None, content: str = "") -> None:
        if not hasattr(type(self), "tag"):
            raise TypeError(f"{type(self).__name__} has no tag; instantiate a shape primitive")
        self.attributes: dict[str, str] = {}
        self.content = content
        self.children: list[Element] = []
        self._owned = False
        for key, value in (attributes or {}).items():
            self.set(key, value)

    def set(self: E, key: str, value: Any) -> E:
        """Store value under key (overwriting) and return self for chaining."""
        self.attributes[key] = format_number(value)
        return self

    set_attr = set

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.attributes.get(key, default)

    def render_attributes(self) -> list[tuple[str, str]]:
        """Attributes in render order."""
        return list(self.attributes.items())

    def add_child(self, node: E) -> E:
        """Append node, take ownership of it and hand it back for further configuration."""
        if node._owned:
            raise ValueError(f"<{node.tag.value}> already belongs to another element")
        if any(n is self for n in node.iter()):
            raise ValueError(f"Adding <{node.tag.value}> under <{self.tag.value}> would create a cycle")
        node._owned = True
        self.children.append(node)
        return node

    def add_children(self, *nodes: Element) -> list[Element]:
        """Append several nodes left to right."""
        return [self.add_child(node) for node in nodes]

    def iter(self) -> Iterator[Element]:
        """Depth-first, pre-order walk of this subtree (self included)."""
        yield self
        for child in self.children:
            yield from child.iter()

    def get_width(self) -> float:
        """Numeric width attribute, NaN if unset."""
        return self._get_number("width")

    def get_height(self) -> float:
        """Numeric height attribute, NaN if unset."""
        return self._get_number("height")

    def _get_number(self, key: str) -> float:
        value = self.get(key)
        if value is None:
            return math.nan
        return parse_number(value)

    def to_string(self, indent_level: int = 0) -> str:
        from svgtree.svg.serializer import serialize

        return serialize(self, indent_level)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.tag.value} attrs={len(self.attributes)} children={len(self.children)}>"
