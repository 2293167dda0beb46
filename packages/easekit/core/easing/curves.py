"""Scalar easing curves.

Every curve has the signature ``f(a, b, t) -> float`` and returns
``a + x(t) * (b - a)`` where ``x`` is the normalized shape of the curve.
``t`` is clamped to [0, 1] first, and the clamped endpoints return exactly
``a`` and ``b``. No curve raises; degenerate ``power`` values produce whatever
the underlying arithmetic produces.

Quadratic and exponential curves take a ``power`` keyword (default 1) that
steepens the curve. Ease-in-out shapes are fixed except for the exponential
family, which applies ``power`` to both halves.
"""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np

from easekit.core.easing.defaults import DEFAULT_POWER, EXPO_BASE_EXPONENT, IN_OUT_SPLIT, PI
from easekit.core.easing.modes import EasingPhase, InterpolationMode
from easekit.core.utils.math import clamp_unit

EasingCurve = Callable[..., float]


def _ease(a: float, b: float, t: float, shape: Callable[..., float], *args: float) -> float:
    t = clamp_unit(t)
    if t <= 0.0:
        return float(a)
    if t >= 1.0:
        return float(b)
    return a + shape(t, *args) * (b - a)


# ============================================================================
# Shape functions x(t): [0, 1] -> [0, 1]
# ============================================================================


def _linear(t: float) -> float:
    return t


def _sin_in(t: float) -> float:
    return 1.0 - math.cos(t * PI / 2.0)


def _sin_out(t: float) -> float:
    return math.sin(t * PI / 2.0)


def _sin_in_out(t: float) -> float:
    return (math.cos(PI * (t + 1.0)) + 1.0) / 2.0


def _quad_in(t: float, power: float) -> float:
    if power <= 1:
        return t * t
    return t**power


def _quad_out(t: float, power: float) -> float:
    u = 1.0 - t
    if power <= 1:
        return 1.0 - u * u
    return 1.0 - u**power


def _quad_in_out(t: float) -> float:
    if t <= IN_OUT_SPLIT:
        return 2.0 * t * t
    u = t - IN_OUT_SPLIT
    return 2.0 * u * (1.0 - u) + 0.5


def _exp2(x: float) -> float:
    # Degenerate powers overflow to inf (or nan) instead of raising
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        return float(np.exp2(x))


def _expo_in(t: float, power: float) -> float:
    return _exp2(power * EXPO_BASE_EXPONENT * (t - 1.0))


def _expo_out(t: float, power: float) -> float:
    return 1.0 - _exp2(-power * EXPO_BASE_EXPONENT * t)


def _expo_in_out(t: float, power: float) -> float:
    # Each half is the in/out curve compressed into [0, 0.5] or [0.5, 1]
    half = t * 2.0 - 1.0
    if t <= IN_OUT_SPLIT:
        return 0.5 * _exp2(power * EXPO_BASE_EXPONENT * half)
    return 0.5 * (2.0 - _exp2(-power * EXPO_BASE_EXPONENT * half))


def _circ_in(t: float) -> float:
    return 1.0 - math.sqrt(1.0 - t * t)


def _circ_out(t: float) -> float:
    return math.sqrt(1.0 - (t - 1.0) * (t - 1.0))


def _circ_in_out(t: float) -> float:
    if t <= IN_OUT_SPLIT:
        return 0.5 * (1.0 - math.sqrt(1.0 - 4.0 * t * t))
    return math.sqrt(-(t - 0.5) * (t - 1.5)) + 0.5


# ============================================================================
# Curves
# ============================================================================


def linear(a: float, b: float, t: float) -> float:
    """Constant-speed interpolation from a to b.

    Example:
        >>> linear(0.0, 10.0, 0.5)
        5.0
    """
    return _ease(a, b, t, _linear)


def sin_ease_in(a: float, b: float, t: float) -> float:
    """Sinusoidal smooth start: x(t) = 1 - cos(t * pi / 2)."""
    return _ease(a, b, t, _sin_in)


def sin_ease_out(a: float, b: float, t: float) -> float:
    """Sinusoidal smooth stop: x(t) = sin(t * pi / 2)."""
    return _ease(a, b, t, _sin_out)


def sin_ease_in_out(a: float, b: float, t: float) -> float:
    """Sinusoidal smooth start and stop: x(t) = (cos(pi * (t + 1)) + 1) / 2."""
    return _ease(a, b, t, _sin_in_out)


def quad_ease_in(a: float, b: float, t: float, power: int = DEFAULT_POWER) -> float:
    """Power smooth start: x(t) = t^n.

    Args:
        a: Start value.
        b: End value.
        t: Progress, clamped to [0, 1].
        power: Exponent. Values <= 1 square t with a plain multiplication,
            larger values use t ** power.

    Returns:
        Interpolated value.

    Example:
        >>> quad_ease_in(0.0, 1.0, 0.5)
        0.25
    """
    return _ease(a, b, t, _quad_in, power)


def quad_ease_out(a: float, b: float, t: float, power: int = DEFAULT_POWER) -> float:
    """Power smooth stop: x(t) = 1 - (1 - t)^n.

    ``power`` follows the same rule as :func:`quad_ease_in`.

    Example:
        >>> quad_ease_out(0.0, 1.0, 0.5)
        0.75
    """
    return _ease(a, b, t, _quad_out, power)


def quad_ease_in_out(a: float, b: float, t: float) -> float:
    """Quadratic smooth start and stop, joined at t = 0.5.

    x(t) = 2t^2 for t <= 0.5, otherwise 2u(1 - u) + 0.5 with u = t - 0.5.
    """
    return _ease(a, b, t, _quad_in_out)


def expo_ease_in(a: float, b: float, t: float, power: int = DEFAULT_POWER) -> float:
    """Exponential smooth start: x(t) = 2^(10 * power * (t - 1))."""
    return _ease(a, b, t, _expo_in, power)


def expo_ease_out(a: float, b: float, t: float, power: int = DEFAULT_POWER) -> float:
    """Exponential smooth stop: x(t) = 1 - 2^(-10 * power * t)."""
    return _ease(a, b, t, _expo_out, power)


def expo_ease_in_out(a: float, b: float, t: float, power: int = DEFAULT_POWER) -> float:
    """Exponential smooth start and stop, both halves steepened by power."""
    return _ease(a, b, t, _expo_in_out, power)


def circ_ease_in(a: float, b: float, t: float) -> float:
    """Circular smooth start: x(t) = 1 - sqrt(1 - t^2)."""
    return _ease(a, b, t, _circ_in)


def circ_ease_out(a: float, b: float, t: float) -> float:
    """Circular smooth stop: x(t) = sqrt(1 - (t - 1)^2)."""
    return _ease(a, b, t, _circ_out)


def circ_ease_in_out(a: float, b: float, t: float) -> float:
    """Two quarter-circle arcs joined at t = 0.5."""
    return _ease(a, b, t, _circ_in_out)


# The ``None`` family is plain linear interpolation for every phase
CURVES: dict[tuple[InterpolationMode | None, EasingPhase], EasingCurve] = {
    (None, EasingPhase.IN): linear,
    (None, EasingPhase.OUT): linear,
    (None, EasingPhase.IN_OUT): linear,
    (InterpolationMode.SINUSOIDAL, EasingPhase.IN): sin_ease_in,
    (InterpolationMode.SINUSOIDAL, EasingPhase.OUT): sin_ease_out,
    (InterpolationMode.SINUSOIDAL, EasingPhase.IN_OUT): sin_ease_in_out,
    (InterpolationMode.QUADRATIC, EasingPhase.IN): quad_ease_in,
    (InterpolationMode.QUADRATIC, EasingPhase.OUT): quad_ease_out,
    (InterpolationMode.QUADRATIC, EasingPhase.IN_OUT): quad_ease_in_out,
    (InterpolationMode.EXPONENTIAL, EasingPhase.IN): expo_ease_in,
    (InterpolationMode.EXPONENTIAL, EasingPhase.OUT): expo_ease_out,
    (InterpolationMode.EXPONENTIAL, EasingPhase.IN_OUT): expo_ease_in_out,
    (InterpolationMode.CIRCULAR, EasingPhase.IN): circ_ease_in,
    (InterpolationMode.CIRCULAR, EasingPhase.OUT): circ_ease_out,
    (InterpolationMode.CIRCULAR, EasingPhase.IN_OUT): circ_ease_in_out,
}

# Curves that take the ``power`` keyword
POWERED_CURVES: frozenset[EasingCurve] = frozenset(
    {quad_ease_in, quad_ease_out, expo_ease_in, expo_ease_out, expo_ease_in_out}
)


def get_curve(mode: InterpolationMode | None, phase: EasingPhase) -> EasingCurve:
    """Look up the curve for a family and phase. ``mode=None`` selects linear.

    Raises:
        ValueError: If the pair is not registered.
    """
    try:
        return CURVES[(mode, phase)]
    except KeyError as exc:
        raise ValueError(f"No curve registered for {mode!r} / {phase!r}") from exc
