"""Tests for shape primitives and Line geometry."""

from __future__ import annotations

import math

import pytest

from svgtree.models.document import DocumentOptions
from svgtree.svg.elements import Tag
from svgtree.svg.primitives import Circle, Group, Line, Rect, Svg, Text


def test_svg_default_namespace():
    root = Svg()
    assert root.tag is Tag.SVG
    assert root.attributes == {"xmlns": "http://www.w3.org/2000/svg"}


def test_svg_custom_options():
    root = Svg(DocumentOptions(attributes={"xmlns": "urn:test", "viewBox": "0 0 24 24"}))
    assert root.attributes == {"xmlns": "urn:test", "viewBox": "0 0 24 24"}


def test_svg_options_not_shared():
    a = Svg()
    a.set("width", 10)
    assert "width" not in Svg().attributes


def test_group_has_no_attributes():
    group = Group()
    assert group.tag is Tag.GROUP
    assert group.attributes == {}


def test_rect_attributes():
    rect = Rect(0, 0, 100, 50)
    assert rect.tag is Tag.RECT
    assert rect.attributes == {"x": "0", "y": "0", "width": "100", "height": "50"}


def test_circle_attributes():
    circle = Circle(12, 12.5, 3)
    assert circle.tag is Tag.CIRCLE
    assert circle.attributes == {"cx": "12", "cy": "12.5", "r": "3"}


def test_circle_from_point():
    assert Circle.from_point((4, 6), 2).attributes == Circle(4, 6, 2).attributes


def test_text_attributes_and_content():
    text = Text(10, 10, "hi")
    assert text.tag is Tag.TEXT
    assert text.attributes == {"x": "10", "y": "10"}
    assert text.content == "hi"


def test_text_from_point():
    text = Text.from_point((1.5, 2), "label")
    assert text.attributes == {"x": "1.5", "y": "2"}
    assert text.content == "label"


class TestLine:
    def test_constructor_order_is_x1_x2_y1_y2(self):
        line = Line(1, 2, 3, 4)
        assert line.attributes == {"x1": "1", "x2": "2", "y1": "3", "y2": "4"}
        assert (line.x1, line.y1, line.x2, line.y2) == (1.0, 3.0, 2.0, 4.0)

    def test_between_uses_point_pairs(self):
        line = Line.between((1, 3), (2, 4))
        assert line.attributes == Line(1, 2, 3, 4).attributes

    def test_horizontal_geometry(self, horizontal_line):
        assert horizontal_line.get_width() == 10.0
        assert horizontal_line.get_height() == 0.0
        assert horizontal_line.get_length() == 10.0
        assert horizontal_line.get_slope() == 0.0

    @pytest.mark.parametrize(
        "percent, expected",
        [(0.0, (0.0, 0.0)), (0.5, (5.0, 0.0)), (1.0, (10.0, 0.0))],
    )
    def test_horizontal_along(self, horizontal_line, percent, expected):
        assert horizontal_line.along(percent) == pytest.approx(expected)

    def test_vertical_line(self, vertical_line):
        assert not math.isfinite(vertical_line.get_slope())
        assert vertical_line.along(0.5) == pytest.approx((5.0, 5.0))

    def test_geometry_follows_attribute_edits(self, horizontal_line):
        horizontal_line.set("x2", 20).set("y2", 0)
        assert horizontal_line.get_length() == 20.0
        assert horizontal_line.along(0.5) == pytest.approx((10.0, 0.0))

    def test_width_overrides_generic_attribute_lookup(self):
        line = Line.between((0, 0), (3, 4))
        assert "width" not in line.attributes
        assert line.get_width() == 3.0
        assert line.get_height() == 4.0
        assert line.get_length() == pytest.approx(5.0)

    def test_non_numeric_coordinate_raises(self):
        line = Line(0, 10, 0, 0).set("x1", "left")
        with pytest.raises(ValueError):
            line.get_length()
