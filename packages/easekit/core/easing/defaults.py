"""Default parameters shared by the easing curves and value transforms.

Kept separate so curves, dispatch and transforms can share them without
circular imports.
"""

import math

# Full machine precision. The reduced-precision constant below is kept only so
# callers can reproduce curves tuned against it.
PI = math.pi
LEGACY_PI = 3.14

DEFAULT_POWER = 1  # Steepness multiplier for quadratic/exponential curves
EXPO_BASE_EXPONENT = 10  # 2^(10 * ...) exponential ramp
IN_OUT_SPLIT = 0.5  # Where piecewise ease-in-out curves join

DEFAULT_FLIP_DISTANCE = 1.0
DEFAULT_MIRROR_PEAK = 1.0
