"""Shared pytest fixtures for easekit tests."""

from __future__ import annotations

from collections.abc import Iterator
import logging

import pytest

from easekit.core.easing.curves import CURVES, EasingCurve
from easekit.core.easing.registry import reset_default_mode

# ============================================================================
# Global State
# ============================================================================


@pytest.fixture(autouse=True)
def restore_default_mode() -> Iterator[None]:
    """Restore the process-wide default mode after every test."""
    reset_default_mode()
    yield
    reset_default_mode()


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


# ============================================================================
# Curve Fixtures
# ============================================================================


@pytest.fixture
def all_curves() -> dict[str, EasingCurve]:
    """Every easing curve keyed by a readable name."""
    curves: dict[str, EasingCurve] = {}
    for (mode, phase), curve in CURVES.items():
        name = "linear" if mode is None else f"{mode.value}_{phase.value}"
        curves[name] = curve
    return curves


@pytest.fixture
def unit_grid() -> list[float]:
    """Progress values 0.0, 0.01, ..., 1.0."""
    return [i / 100 for i in range(101)]
