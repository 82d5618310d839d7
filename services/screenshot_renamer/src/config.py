"""Configuration management for the Screenshot Renamer."""

import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "screenshot-renamer"
APP_VERSION = "0.1.0"


def default_screenshots_dir() -> Path:
    """Return the screenshots folder inside the user's Pictures directory."""
    return Path.home() / "Pictures" / "Screenshots"


def default_log_file() -> Path:
    """Return the log file path inside the user's local data directory."""
    data_dir = os.getenv("LOCALAPPDATA") or os.getenv("XDG_DATA_HOME")
    base = Path(data_dir) if data_dir else Path.home() / ".local" / "share"
    return base / APP_NAME / f"{APP_NAME}.log"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SCREENSHOT_RENAMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    screenshots_dir: Path = Field(default_factory=default_screenshots_dir, description="Screenshots directory")
    log_file: Path = Field(default_factory=default_log_file, description="Log file path")
    watch: bool = Field(default=False, description="Watch for changes and automatically rename")
    dry_run: bool = Field(default=False, description="Log what would be renamed without renaming")
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    settle_delay: float = Field(
        default=0.2,
        ge=0.0,
        description="Seconds to wait after a change notification before renaming",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level


def get_settings(**overrides: object) -> Settings:
    """Load settings from the environment, applying non-None overrides.

    Args:
        **overrides: Values taken from the command line

    Returns:
        Settings instance

    """
    return Settings(**{key: value for key, value in overrides.items() if value is not None})
