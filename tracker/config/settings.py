"""
Configuration Management for Personal Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Every knob is read from TRACKER_* variables or a local .env file,
so the console and the chat front end always agree on where data lives.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class TrackerSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Persistence
    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding the save files"
    )
    tasks_file: str = Field(
        default="tasks.txt",
        description="File name of the task save file"
    )
    expenses_file: str = Field(
        default="expenses.txt",
        description="File name of the expense save file"
    )
    save_retry_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="How many times a failed write is attempted"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Minimum level of audit events that get emitted"
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Write audit log lines here instead of stderr"
    )

    # Chat front end
    bot_name: str = Field(
        default="Duke",
        min_length=1,
        description="Name the bot introduces itself with"
    )
    user_avatar: str = Field(
        default="🧑",
        description="Avatar shown next to user messages"
    )
    bot_avatar: str = Field(
        default="🤖",
        description="Avatar shown next to bot messages"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept the standard logging level names."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}. Allowed: {sorted(LOG_LEVELS)}")
        return level

    @property
    def tasks_path(self) -> Path:
        """Full path to the task save file."""
        return self.data_dir / self.tasks_file

    @property
    def expenses_path(self) -> Path:
        """Full path to the expense save file."""
        return self.data_dir / self.expenses_file


@lru_cache()
def get_settings() -> TrackerSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return TrackerSettings()
