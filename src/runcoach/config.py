"""Configuration management for the running coach dashboard."""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .classifier import (
    DEFAULT_THRESHOLD_HR,
    DEFAULT_THRESHOLD_PACE,
    ClassificationThresholds,
)

logger = logging.getLogger(__name__)


def find_env_file() -> Path | None:
    """Find .env file at git root (project root)."""
    current = Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / ".git").exists():
            env_file = parent / ".env"
            if env_file.exists():
                return env_file
            break
    # Fallback to current directory
    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env
    return None


# Find env file once at module load
_env_file = find_env_file()


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Classification thresholds can be tuned per deployment with nested keys,
    e.g. ``THRESHOLDS__LONG_RUN_KM=18``.
    """

    model_config = SettingsConfigDict(
        env_file=_env_file,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Athlete reference fallbacks
    default_threshold_hr: int = Field(
        default=DEFAULT_THRESHOLD_HR,
        description="Lactate-threshold HR used when the profile has none",
        gt=0,
    )
    default_threshold_pace: str = Field(
        default=DEFAULT_THRESHOLD_PACE,
        description="Lactate-threshold pace (M:SS per km) used when the profile has none",
    )

    # Classifier tuning
    thresholds: ClassificationThresholds = Field(
        default_factory=ClassificationThresholds,
        description="Workout classification thresholds",
    )

    # Application Settings
    environment: str = Field(
        default="dev",
        description="Environment: dev, staging, prod",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern).

    Returns:
        Settings instance with all configuration
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(f"Loaded settings for environment {_settings.environment}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for command-line use.

    Args:
        level: Level name; defaults to the configured log_level
    """
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
