"""Number formatting helpers. No svg imports."""

from __future__ import annotations

from typing import Any

import numpy as np


def format_number(value: Any) -> str:
    """Canonical text form of an attribute value.

    Text passes through untouched. Integers keep their exact digits. Floats are
    narrowed to single precision and written in the shortest positional form that
    round-trips, so 100.0 -> "100" and 0.1 -> "0.1".
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, np.bool_)):
        return str(bool(value)).lower()
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        return np.format_float_positional(np.float32(value), trim="-")
    return str(value)


def parse_number(text: str) -> float:
    """Parse attribute text at single precision. Raises ValueError on non-numeric text."""
    return float(np.float32(text))
