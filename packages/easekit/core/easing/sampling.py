"""Batch evaluation of easing curves over a uniform grid."""

from __future__ import annotations

from typing import Any

import numpy as np

from easekit.core.easing.curves import EasingCurve
from easekit.core.easing.models import EasingSample


def sample_grid(n_samples: int) -> np.ndarray:
    """Generate n_samples evenly spaced progress values covering [0, 1].

    Both endpoints are included so sampled curves start at ``a`` and end at
    ``b``.

    Raises:
        ValueError: If n_samples < 2.

    Example:
        >>> sample_grid(5).tolist()
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")
    return np.linspace(0.0, 1.0, n_samples)


def sample_values(
    curve: EasingCurve, a: float, b: float, n_samples: int, **params: Any
) -> np.ndarray:
    """Evaluate curve at every grid point.

    Args:
        curve: Any easing curve, e.g. ``quad_ease_in``.
        a: Start value.
        b: End value.
        n_samples: Number of grid points (>= 2).
        **params: Extra keyword arguments for the curve (e.g. power).

    Returns:
        Array of n_samples interpolated values.
    """
    grid = sample_grid(n_samples)
    return np.array([curve(a, b, float(t), **params) for t in grid], dtype=float)


def sample_curve(
    curve: EasingCurve, a: float, b: float, n_samples: int, **params: Any
) -> list[EasingSample]:
    """Evaluate curve at every grid point, keeping the progress values.

    Example:
        >>> from easekit.core.easing.curves import linear
        >>> [s.value for s in sample_curve(linear, 0.0, 10.0, 3)]
        [0.0, 5.0, 10.0]
    """
    grid = sample_grid(n_samples)
    values = sample_values(curve, a, b, n_samples, **params)
    return [EasingSample(t=float(t), value=float(v)) for t, v in zip(grid, values, strict=True)]
