"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgtree.svg.primitives import Circle, Group, Line, Path, Rect, Svg, Text


# Expected renderings (tab indented)

RECT_AND_TEXT_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg">\n'
    '\t<rect x="0" y="0" width="100" height="50" />\n'
    '\t<text x="10" y="10">hi</text>\n'
    "</svg>"
)

NESTED_GROUP_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg">\n'
    "\t<g>\n"
    '\t\t<circle cx="12" cy="12" r="10" />\n'
    '\t\t<line x1="0" x2="24" y1="0" y2="24" />\n'
    "\t</g>\n"
    '\t<path d="M 0 0 L 10 0 L 10 10 L 0 0" />\n'
    "</svg>"
)


def make_rect_and_text() -> Svg:
    root = Svg()
    root.add_child(Rect(0, 0, 100, 50))
    root.add_child(Text(10, 10, "hi"))
    return root


def make_nested_group() -> Svg:
    root = Svg()
    group = root.add_child(Group())
    group.add_children(Circle(12, 12, 10), Line(0, 24, 0, 24))
    root.add_child(Path()).start(0, 0).line_to(10, 0).line_to(10, 10).to_origin()
    return root


@pytest.fixture
def rect_and_text() -> Svg:
    return make_rect_and_text()


@pytest.fixture
def nested_group() -> Svg:
    return make_nested_group()


@pytest.fixture
def horizontal_line() -> Line:
    # (0, 0) -> (10, 0)
    return Line(0, 10, 0, 0)


@pytest.fixture
def vertical_line() -> Line:
    # (5, 0) -> (5, 10)
    return Line(5, 5, 0, 10)
