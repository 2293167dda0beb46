"""Configuration models for easekit."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from easekit.core.easing.models import EasingConfig
from easekit.core.utils.logging import DEFAULT_FORMAT


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = DEFAULT_FORMAT
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file path (stdout if unset)")


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    logging: LoggingConfig = LoggingConfig()
    easing: EasingConfig = EasingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("easekit.yaml")
