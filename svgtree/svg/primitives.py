"""Shape primitives, one Element subclass per supported tag."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any

from svgtree.models.document import DocumentOptions
from svgtree.svg.elements import Element, Tag
from svgtree.utils.geometry import (
    point_along,
    segment_height,
    segment_length,
    segment_slope,
    segment_width,
)
from svgtree.utils.math_helpers import format_number, parse_number

logger = logging.getLogger(__name__)


class Svg(Element):
    """Root container. Defaults to a lone xmlns attribute."""

    tag = Tag.SVG

    def __init__(self, options: DocumentOptions | None = None) -> None:
        options = options or DocumentOptions()
        super().__init__(options.attributes)


class Group(Element):
    tag = Tag.GROUP


class Rect(Element):
    tag = Tag.RECT

    def __init__(self, x: float = 0, y: float = 0, width: float = 0, height: float = 0) -> None:
        super().__init__({"x": x, "y": y, "width": width, "height": height})


class Circle(Element):
    tag = Tag.CIRCLE

    def __init__(self, cx: float = 0, cy: float = 0, radius: float = 0) -> None:
        super().__init__({"cx": cx, "cy": cy, "r": radius})

    @classmethod
    def from_point(cls, center: tuple[float, float], radius: float) -> Circle:
        return cls(center[0], center[1], radius)


class Text(Element):
    """Text carries its value in `content`, so it never renders self-closing."""

    tag = Tag.TEXT

    def __init__(self, x: float = 0, y: float = 0, content: str = "") -> None:
        super().__init__({"x": x, "y": y}, content=content)

    @classmethod
    def from_point(cls, xy: tuple[float, float], content: str) -> Text:
        return cls(xy[0], xy[1], content)


class Line(Element):
    """Straight segment.

    Positional order is x1, x2, y1, y2 (not x1, y1, x2, y2); existing callers rely
    on it. Use Line.between for point pairs.

    Coordinates are re-read from the attributes on every query, so edits made
    through set() show up immediately.
    """

    tag = Tag.LINE

    def __init__(self, x1: float = 0, x2: float = 0, y1: float = 0, y2: float = 0) -> None:
        super().__init__({"x1": x1, "x2": x2, "y1": y1, "y2": y2})

    @classmethod
    def between(cls, start: tuple[float, float], end: tuple[float, float]) -> Line:
        return cls(start[0], end[0], start[1], end[1])

    @property
    def x1(self) -> float:
        return parse_number(self.attributes["x1"])

    @property
    def y1(self) -> float:
        return parse_number(self.attributes["y1"])

    @property
    def x2(self) -> float:
        return parse_number(self.attributes["x2"])

    @property
    def y2(self) -> float:
        return parse_number(self.attributes["y2"])

    def _segment(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)

    def get_width(self) -> float:
        return segment_width(*self._segment())

    def get_height(self) -> float:
        return segment_height(*self._segment())

    def get_length(self) -> float:
        return segment_length(*self._segment())

    def get_slope(self) -> float:
        return segment_slope(*self._segment())

    def along(self, percent: float) -> tuple[float, float]:
        """Coordinates for placing something `percent` of the way along this line."""
        return point_along(*self._segment(), percent)


class PathCommand(str, enum.Enum):
    MOVE = "M"
    LINE = "L"


@dataclass(frozen=True)
class PathSegment:
    command: PathCommand
    x: float
    y: float

    def __str__(self) -> str:
        return f"{self.command.value} {format_number(self.x)} {format_number(self.y)}"


class Path(Element):
    """Polyline built with start / line_to / to_origin.

    Segments stay structured until render time, when they are compiled into the
    `d` attribute. A `d` given through set() replaces the whole command and
    becomes the base text that later line_to calls extend.
    """

    tag = Tag.PATH

    def __init__(self) -> None:
        super().__init__()
        self._segments: list[PathSegment] = []
        self._x_start: float | None = None
        self._y_start: float | None = None

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return tuple(self._segments)

    @property
    def origin(self) -> tuple[float, float] | None:
        if self._x_start is None or self._y_start is None:
            return None
        return (self._x_start, self._y_start)

    @property
    def d(self) -> str | None:
        """Drawing command: the set() base text, if any, followed by the segments."""
        base = self.attributes.get("d")
        if base is None:
            if not self._segments:
                return None
            return " ".join(str(segment) for segment in self._segments)
        return base + "".join(f" {segment}" for segment in self._segments)

    def set(self, key: str, value: Any) -> Path:
        super().set(key, value)
        if key == "d":
            # The origin is left as is; to_origin still returns to the last start()
            self._segments = []
        return self

    set_attr = set

    def start(self, x: float, y: float) -> Path:
        """Start the path at (x, y), discarding anything drawn so far."""
        self.attributes.pop("d", None)
        self._segments = [PathSegment(PathCommand.MOVE, x, y)]
        self._x_start = x
        self._y_start = y
        return self

    def line_to(self, x: float, y: float) -> Path:
        """Draw a line to (x, y). Starts the path there if no drawing command exists yet."""
        if self.d is None:
            return self.start(x, y)
        self._segments.append(PathSegment(PathCommand.LINE, x, y))
        return self

    def line_to_point(self, point: tuple[float, float]) -> Path:
        return self.line_to(point[0], point[1])

    def to_origin(self) -> Path:
        """Draw a line back to where the path started."""
        if self.origin is None:
            logger.debug("to_origin on a path with no start point, ignoring")
            return self
        return self.line_to(self._x_start, self._y_start)

    def get(self, key: str, default: str | None = None) -> str | None:
        if key == "d":
            d = self.d
            return default if d is None else d
        return super().get(key, default)

    def render_attributes(self) -> list[tuple[str, str]]:
        attrs = dict(self.attributes)
        if self.d is not None:
            attrs["d"] = self.d
        return list(attrs.items())
