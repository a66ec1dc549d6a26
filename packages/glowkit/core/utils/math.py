"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

Number = TypeVar("Number", int, float)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t


def round_half_up(x: float) -> int:
    """Round to nearest int with halves away from zero.

    Device parameters are rounded this way (76.5 -> 77), unlike the
    builtin round() which rounds halves to even.
    """
    if x < 0:
        return -math.floor(-x + 0.5)
    return math.floor(x + 0.5)
