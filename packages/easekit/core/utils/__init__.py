"""Shared utilities for easekit."""

from easekit.core.utils.json import read_json
from easekit.core.utils.math import clamp, lerp

__all__ = [
    "clamp",
    "lerp",
    "read_json",
]
