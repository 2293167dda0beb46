"""Configuration management for easekit."""

from easekit.core.config.loader import (
    apply_app_config,
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from easekit.core.config.models import AppConfig, LoggingConfig

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "detect_format",
    "configure_logging",
    "apply_app_config",
    # Models
    "AppConfig",
    "LoggingConfig",
]
