"""Math utilities for common operations."""

from __future__ import annotations

from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


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


def clamp_unit(t: float) -> float:
    """Clamp a progress value to [0, 1]."""
    return clamp(t, 0.0, 1.0)


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Unlike the curve functions, ``t`` is not clamped, so values outside
    [0, 1] extrapolate.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t
