"""Easing curves, default-mode dispatch and value transforms."""

from easekit.core.easing.curves import (
    CURVES,
    circ_ease_in,
    circ_ease_in_out,
    circ_ease_out,
    expo_ease_in,
    expo_ease_in_out,
    expo_ease_out,
    get_curve,
    linear,
    quad_ease_in,
    quad_ease_in_out,
    quad_ease_out,
    sin_ease_in,
    sin_ease_in_out,
    sin_ease_out,
)
from easekit.core.easing.dispatch import ease_in, ease_in_out, ease_out, resolve_mode_curve
from easekit.core.easing.models import EasingConfig, EasingSample, EasingSpec
from easekit.core.easing.modes import EasingPhase, InterpolationMode
from easekit.core.easing.registry import (
    ModeRegistry,
    get_default_mode,
    reset_default_mode,
    set_default_mode,
    use_mode,
)
from easekit.core.easing.sampling import sample_curve, sample_grid, sample_values
from easekit.core.easing.transforms import (
    arch,
    flip,
    inverse_scale,
    mirror,
    mix,
    power,
    scale,
)

__all__ = [
    # Curves
    "CURVES",
    "get_curve",
    "linear",
    "sin_ease_in",
    "sin_ease_out",
    "sin_ease_in_out",
    "quad_ease_in",
    "quad_ease_out",
    "quad_ease_in_out",
    "expo_ease_in",
    "expo_ease_out",
    "expo_ease_in_out",
    "circ_ease_in",
    "circ_ease_out",
    "circ_ease_in_out",
    # Modes and dispatch
    "InterpolationMode",
    "EasingPhase",
    "ModeRegistry",
    "get_default_mode",
    "set_default_mode",
    "reset_default_mode",
    "use_mode",
    "ease_in",
    "ease_out",
    "ease_in_out",
    "resolve_mode_curve",
    # Models
    "EasingConfig",
    "EasingSpec",
    "EasingSample",
    # Sampling
    "sample_grid",
    "sample_values",
    "sample_curve",
    # Transforms
    "flip",
    "power",
    "mix",
    "scale",
    "inverse_scale",
    "arch",
    "mirror",
]
