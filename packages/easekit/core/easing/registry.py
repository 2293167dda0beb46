"""Process-wide default curve family.

The default ease entry points read the mode stored here. Callers that need
independent settings (for example one per thread) should pass ``mode=``
explicitly or hold an :class:`~easekit.core.easing.models.EasingConfig`
instead of mutating the shared value.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from easekit.core.easing.modes import InterpolationMode

logger = logging.getLogger(__name__)

DEFAULT_MODE = next(iter(InterpolationMode))


class ModeRegistry:
    """Holds one InterpolationMode.

    Writes are serialized with a lock; reads return the last stored value.
    The setter does not validate, so unknown values are stored as given and
    the dispatch layer decides how to treat them.
    """

    def __init__(self, mode: InterpolationMode = DEFAULT_MODE) -> None:
        self._mode = mode
        self._lock = threading.Lock()

    def get(self) -> InterpolationMode:
        return self._mode

    def set(self, mode: InterpolationMode) -> InterpolationMode:
        """Replace the stored mode and return the previous one."""
        with self._lock:
            previous = self._mode
            self._mode = mode
        logger.debug("Default interpolation mode changed: %s -> %s", previous, mode)
        return previous

    def reset(self) -> None:
        self.set(DEFAULT_MODE)


_default_registry = ModeRegistry()


def get_default_mode() -> InterpolationMode:
    """Return the process-wide default mode."""
    return _default_registry.get()


def set_default_mode(mode: InterpolationMode) -> None:
    """Set the process-wide default mode used by ease_in/ease_out/ease_in_out."""
    _default_registry.set(mode)


def reset_default_mode() -> None:
    """Restore the process-wide default mode to sinusoidal."""
    _default_registry.reset()


@contextmanager
def use_mode(mode: InterpolationMode) -> Iterator[InterpolationMode]:
    """Temporarily switch the process-wide default mode.

    Example:
        >>> with use_mode(InterpolationMode.CIRCULAR):
        ...     value = ease_in(0.0, 1.0, 0.5)
    """
    previous = _default_registry.set(mode)
    try:
        yield mode
    finally:
        _default_registry.set(previous)
