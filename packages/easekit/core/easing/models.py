"""Pydantic models for easing configuration and samples.

- EasingConfig: caller-held curve family with its own ease entry points
- EasingSpec: a fully parameterized curve (family, phase, range, power)
- EasingSample: one evaluated (t, value) pair
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from easekit.core.easing import dispatch
from easekit.core.easing.curves import POWERED_CURVES, EasingCurve, get_curve
from easekit.core.easing.defaults import DEFAULT_POWER
from easekit.core.easing.modes import EasingPhase, InterpolationMode
from easekit.core.easing.registry import DEFAULT_MODE


class EasingConfig(BaseModel):
    """Explicit curve family for the ease entry points.

    Each instance is independent of the process-wide default mode, so
    concurrent callers can each hold their own.

    Example:
        >>> config = EasingConfig(mode=InterpolationMode.CIRCULAR)
        >>> config.ease_in_out(0.0, 1.0, 1.0)
        1.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: InterpolationMode = Field(
        default=DEFAULT_MODE, description="Curve family used by ease_in/ease_out/ease_in_out"
    )

    def ease_in(self, a: float, b: float, t: float) -> float:
        return dispatch.ease_in(a, b, t, mode=self.mode)

    def ease_out(self, a: float, b: float, t: float) -> float:
        return dispatch.ease_out(a, b, t, mode=self.mode)

    def ease_in_out(self, a: float, b: float, t: float) -> float:
        return dispatch.ease_in_out(a, b, t, mode=self.mode)


class EasingSpec(BaseModel):
    """A curve together with its parameters.

    A mode of None selects the linear curve; phase is then ignored.

    Attributes:
        mode: Curve family, or None for linear.
        phase: Which end(s) are smoothed.
        start: Value at t=0.
        end: Value at t=1.
        power: Steepness for curves that accept it (ignored by the rest).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: InterpolationMode | None = None
    phase: EasingPhase = EasingPhase.IN_OUT
    start: float = 0.0
    end: float = 1.0
    power: int = DEFAULT_POWER

    @property
    def curve(self) -> EasingCurve:
        return get_curve(self.mode, self.phase)

    @property
    def name(self) -> str:
        if self.mode is None:
            return "linear"
        return f"{self.mode.value}_{self.phase.value}"

    def curve_params(self) -> dict[str, int]:
        """Keyword arguments accepted by the selected curve."""
        if self.curve in POWERED_CURVES:
            return {"power": self.power}
        return {}

    def evaluate(self, t: float) -> float:
        return self.curve(self.start, self.end, t, **self.curve_params())


class EasingSample(BaseModel):
    """A single evaluated point on an easing curve.

    ``t`` is normalized progress; ``value`` is in the caller's units and is
    not limited to [0, 1].
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized progress [0,1]")
    value: float = Field(..., description="Interpolated value")
