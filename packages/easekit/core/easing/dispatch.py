"""Phase-generic ease entry points routed by interpolation mode."""

from __future__ import annotations

import logging

from easekit.core.easing.curves import CURVES, EasingCurve
from easekit.core.easing.modes import EasingPhase, InterpolationMode, coerce_mode
from easekit.core.easing.registry import get_default_mode

logger = logging.getLogger(__name__)

FALLBACK_MODE = InterpolationMode.QUADRATIC


def resolve_mode_curve(mode: object, phase: EasingPhase) -> EasingCurve:
    """Return the curve for mode and phase.

    Values that are not one of the four interpolation modes resolve to the
    quadratic curve for the phase.
    """
    resolved = coerce_mode(mode)
    if resolved is None:
        logger.debug("Unknown interpolation mode %r, using %s", mode, FALLBACK_MODE.value)
        resolved = FALLBACK_MODE
    return CURVES[(resolved, phase)]


def _dispatch(
    phase: EasingPhase, a: float, b: float, t: float, mode: InterpolationMode | None
) -> float:
    if mode is None:
        mode = get_default_mode()
    return resolve_mode_curve(mode, phase)(a, b, t)


def ease_in(a: float, b: float, t: float, *, mode: InterpolationMode | None = None) -> float:
    """Smooth start using mode, or the process-wide default mode if None.

    Args:
        a: Start value.
        b: End value.
        t: Progress, clamped to [0, 1].
        mode: Curve family; overrides the default mode for this call.

    Returns:
        Interpolated value.
    """
    return _dispatch(EasingPhase.IN, a, b, t, mode)


def ease_out(a: float, b: float, t: float, *, mode: InterpolationMode | None = None) -> float:
    """Smooth stop using mode, or the process-wide default mode if None."""
    return _dispatch(EasingPhase.OUT, a, b, t, mode)


def ease_in_out(a: float, b: float, t: float, *, mode: InterpolationMode | None = None) -> float:
    """Smooth start and stop using mode, or the process-wide default mode if None."""
    return _dispatch(EasingPhase.IN_OUT, a, b, t, mode)
