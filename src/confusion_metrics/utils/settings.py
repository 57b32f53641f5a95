"""Environment driven settings for the confusion metrics application."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """Supported structured log renderers."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"


class AppSettings(BaseSettings):
    """Application wide settings such as logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CONFUSION_METRICS_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Minimum level of emitted log records",
    )
    log_format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="Renderer used for log records",
    )
    log_file_path: Path | None = Field(
        default=None,
        description="Optional file receiving log records in addition to stderr",
    )


class OutputSettings(BaseSettings):
    """Presentation settings for rendered metric tables."""

    model_config = SettingsConfigDict(
        env_prefix="CONFUSION_METRICS_OUTPUT_",
        env_file=".env",
        extra="ignore",
    )

    decimal_places: int = Field(
        default=4,
        ge=0,
        le=12,
        description="Digits shown after the decimal point for float metrics",
    )
    nan_display: str = Field(
        default="NaN",
        description="Text shown for metrics that are undefined",
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return the cached application settings."""
    return AppSettings()


@lru_cache(maxsize=1)
def get_output_settings() -> OutputSettings:
    """Return the cached output settings."""
    return OutputSettings()


def reset_settings() -> None:
    """Drop cached settings so the environment is read again."""
    get_settings.cache_clear()
    get_output_settings.cache_clear()


__all__ = [
    "AppSettings",
    "LogFormat",
    "OutputSettings",
    "get_output_settings",
    "get_settings",
    "reset_settings",
]
