"""Curve families and phases."""

from __future__ import annotations

from enum import Enum


class InterpolationMode(str, Enum):
    """Curve family used by the default ease entry points.

    Member order matters: the first member is the process-wide default.
    """

    SINUSOIDAL = "sinusoidal"
    QUADRATIC = "quadratic"
    EXPONENTIAL = "exponential"
    CIRCULAR = "circular"


class EasingPhase(str, Enum):
    """Which end(s) of the transition are smoothed."""

    IN = "in"  # Smooth start
    OUT = "out"  # Smooth stop
    IN_OUT = "in_out"  # Smooth start and stop


def coerce_mode(value: object) -> InterpolationMode | None:
    """Return the InterpolationMode matching value, or None if there is none.

    Accepts enum members and their string values ("circular").
    """
    if isinstance(value, InterpolationMode):
        return value
    try:
        return InterpolationMode(value)
    except (ValueError, TypeError):
        return None
