"""Scalar value transforms.

Usable standalone or around a curve evaluation, for example
``arch(quad_ease_in(0, 1, t))``. None of these clamp or validate their inputs.
"""

from __future__ import annotations

import numpy as np

from easekit.core.easing.defaults import DEFAULT_FLIP_DISTANCE, DEFAULT_MIRROR_PEAK
from easekit.core.utils.math import lerp


def flip(value: float, distance: float = DEFAULT_FLIP_DISTANCE) -> float:
    """Reflect value within [0, distance]: distance - value."""
    return distance - value


def power(value: float, exponent: float) -> float:
    """Raise value to exponent.

    Degenerate inputs return inf or nan rather than raising, e.g.
    ``power(0.0, -1.0)`` is inf and ``power(-8.0, 1 / 3)`` is nan.
    """
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        return float(np.power(float(value), float(exponent)))


def mix(a: float, b: float, weight_b: float) -> float:
    """Blend a and b by weight_b. Weights outside [0, 1] extrapolate."""
    return lerp(a, b, weight_b)


def scale(value: float, factor: float) -> float:
    return value * factor


def inverse_scale(value: float, factor: float) -> float:
    """Scale value by the complement of factor: value * (1 - factor)."""
    return value * (1 - factor)


def arch(value: float) -> float:
    """Parabola through 0 at value 0 and 1, peaking at 0.25 for value 0.5."""
    return value * (1 - value)


def mirror(value: float, peak: float = DEFAULT_MIRROR_PEAK) -> float:
    """Ramp up to peak and back down to 0 as value goes from 0 to 1.

    Args:
        value: Input, usually progress in [0, 1].
        peak: Height reached at value 0.5.

    Returns:
        value * peak * 2 while value <= peak / 2, else (1 - value) * peak * 2.
    """
    if value <= peak / 2:
        return value * peak * 2
    return (1 - value) * peak * 2
