"""Tests for easing pydantic models."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from easekit.core.easing.curves import (
    circ_ease_in,
    circ_ease_in_out,
    circ_ease_out,
    expo_ease_out,
    get_curve,
    linear,
    quad_ease_in_out,
    sin_ease_in,
)
from easekit.core.easing.models import EasingConfig, EasingSample, EasingSpec
from easekit.core.easing.modes import EasingPhase, InterpolationMode
from easekit.core.easing.registry import get_default_mode, set_default_mode


class TestEasingConfig:
    """Tests for caller-held easing configuration."""

    def test_defaults_to_sinusoidal(self) -> None:
        config = EasingConfig()
        assert config.mode is InterpolationMode.SINUSOIDAL
        assert config.ease_in(0.0, 1.0, 0.3) == sin_ease_in(0.0, 1.0, 0.3)

    def test_routes_to_own_mode(self) -> None:
        config = EasingConfig(mode=InterpolationMode.CIRCULAR)
        assert config.ease_in(0.0, 2.0, 0.4) == circ_ease_in(0.0, 2.0, 0.4)
        assert config.ease_out(0.0, 2.0, 0.4) == circ_ease_out(0.0, 2.0, 0.4)
        assert config.ease_in_out(0.0, 2.0, 0.4) == circ_ease_in_out(0.0, 2.0, 0.4)

    def test_ignores_process_default(self) -> None:
        """Changing the shared default does not affect a held config."""
        config = EasingConfig(mode=InterpolationMode.CIRCULAR)
        set_default_mode(InterpolationMode.QUADRATIC)
        assert config.ease_in(0.0, 1.0, 0.6) == circ_ease_in(0.0, 1.0, 0.6)

    def test_does_not_touch_process_default(self) -> None:
        EasingConfig(mode=InterpolationMode.EXPONENTIAL).ease_out(0.0, 1.0, 0.5)
        assert get_default_mode() is InterpolationMode.SINUSOIDAL

    def test_accepts_string_value(self) -> None:
        config = EasingConfig.model_validate({"mode": "exponential"})
        assert config.mode is InterpolationMode.EXPONENTIAL

    def test_rejects_unknown_mode(self) -> None:
        with pytest.raises(ValidationError):
            EasingConfig.model_validate({"mode": "bogus"})

    def test_is_frozen(self) -> None:
        config = EasingConfig()
        with pytest.raises(ValidationError):
            config.mode = InterpolationMode.CIRCULAR  # type: ignore[misc]


class TestEasingSpec:
    """Tests for fully parameterized curve specs."""

    def test_no_mode_is_linear(self) -> None:
        spec = EasingSpec(start=0.0, end=10.0)
        assert spec.curve is linear
        assert spec.name == "linear"
        assert spec.evaluate(0.5) == 5.0

    @pytest.mark.parametrize("phase", list(EasingPhase))
    def test_no_mode_is_linear_for_every_phase(self, phase: EasingPhase) -> None:
        spec = EasingSpec(phase=phase, start=0.0, end=4.0)
        assert spec.curve is get_curve(None, phase)
        assert spec.evaluate(0.25) == 1.0

    def test_selects_family_and_phase(self) -> None:
        spec = EasingSpec(mode=InterpolationMode.QUADRATIC, phase=EasingPhase.IN_OUT)
        assert spec.curve is quad_ease_in_out
        assert spec.name == "quadratic_in_out"

    def test_power_passed_only_to_powered_curves(self) -> None:
        expo = EasingSpec(mode=InterpolationMode.EXPONENTIAL, phase=EasingPhase.OUT, power=2)
        circ = EasingSpec(mode=InterpolationMode.CIRCULAR, phase=EasingPhase.OUT, power=2)
        assert expo.curve_params() == {"power": 2}
        assert circ.curve_params() == {}
        assert expo.evaluate(0.5) == expo_ease_out(0.0, 1.0, 0.5, power=2)
        assert circ.evaluate(0.5) == circ_ease_out(0.0, 1.0, 0.5)

    def test_rejects_extra_fields(self) -> None:
        with pytest.raises(ValidationError):
            EasingSpec.model_validate({"mode": "circular", "duration": 3})


class TestEasingSample:
    def test_valid(self) -> None:
        sample = EasingSample(t=0.5, value=42.0)
        assert sample.value == 42.0

    @pytest.mark.parametrize("t", [-0.1, 1.1])
    def test_t_outside_unit_range_rejected(self, t: float) -> None:
        with pytest.raises(ValidationError):
            EasingSample(t=t, value=0.0)
