"""Leaf-node line segment geometry. No svg imports.

All arithmetic runs in single precision (numpy.float32); results are handed back
as Python floats. Segments are given as (x1, y1, x2, y2).
"""

from __future__ import annotations

import numpy as np

_F = np.float32


def _coords(x1: float, y1: float, x2: float, y2: float) -> tuple[np.float32, ...]:
    return _F(x1), _F(y1), _F(x2), _F(y2)


def _width(x1: np.float32, x2: np.float32) -> np.float32:
    return np.abs(x2 - x1)


def _height(y1: np.float32, y2: np.float32) -> np.float32:
    return np.abs(y2 - y1)


def _length(x1: np.float32, y1: np.float32, x2: np.float32, y2: np.float32) -> np.float32:
    return np.sqrt(_width(x1, x2) ** 2 + _height(y1, y2) ** 2)


def _slope(x1: np.float32, y1: np.float32, x2: np.float32, y2: np.float32) -> np.float32:
    # Vertical segments give inf (or nan when degenerate to a point)
    with np.errstate(divide="ignore", invalid="ignore"):
        return (y2 - y1) / (x2 - x1)


def segment_width(x1: float, y1: float, x2: float, y2: float) -> float:
    """|x2 - x1|"""
    x1, _, x2, _ = _coords(x1, y1, x2, y2)
    return float(_width(x1, x2))


def segment_height(x1: float, y1: float, x2: float, y2: float) -> float:
    """|y2 - y1|"""
    _, y1, _, y2 = _coords(x1, y1, x2, y2)
    return float(_height(y1, y2))


def segment_length(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean length of the segment."""
    return float(_length(*_coords(x1, y1, x2, y2)))


def segment_slope(x1: float, y1: float, x2: float, y2: float) -> float:
    """dy / dx. Not finite for vertical segments; point_along handles those separately."""
    return float(_slope(*_coords(x1, y1, x2, y2)))


def point_along(
    x1: float, y1: float, x2: float, y2: float, percent: float
) -> tuple[float, float]:
    """Point at fractional distance `percent` from (x1, y1) toward (x2, y2).

    0 is the start, 1 the end. Values outside [0, 1] extrapolate instead of failing.

    For a non-vertical segment the target x solves the intersection of the line with
    a circle of radius percent * length around the start:
        discrim = sqrt(4 * r^2 / (1 + slope^2))
        x = (2 * x1 +/- discrim) / 2
    and the candidate that overshoots both endpoints on the same side is dropped.
    Vertical segments have no slope, so x stays put and y walks toward y2.
    """
    x1, y1, x2, y2 = _coords(x1, y1, x2, y2)
    percent = _F(percent)

    if x1 != x2:
        slope = _slope(x1, y1, x2, y2)
        radius = percent * _length(x1, y1, x2, y2)
        with np.errstate(over="ignore", invalid="ignore"):
            discrim = np.sqrt(4 * radius**2 * (1 / (1 + slope**2)))

        x_a = (2 * x1 + discrim) / 2
        x_b = (2 * x1 - discrim) / 2
        x_pos = x_a
        if (x_a > x1 and x_a > x2) or (x_a < x1 and x_a < x2):
            x_pos = x_b

        y_pos = slope * (x_pos - x1) + y1
    else:
        x_pos = x1
        if y1 > y2:  # y decreasing toward the end point
            y_pos = y1 - percent * _length(x1, y1, x2, y2)
        else:
            y_pos = y1 + percent * _length(x1, y1, x2, y2)

    return (float(x_pos), float(y_pos))
