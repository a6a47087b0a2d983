"""Settings for Theme Studio, read from THEME_STUDIO_* variables or a .env file."""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from theme_studio.domain.value_objects import ThemeMode


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Override via environment variables (prefixed with THEME_STUDIO_) or .env file.

    Examples:
        THEME_STUDIO_LOG_LEVEL=DEBUG
        THEME_STUDIO_DEFAULT_MODE=dark
        THEME_STUDIO_HISTORY_LIMIT=50
    """

    model_config = SettingsConfigDict(
        env_prefix="THEME_STUDIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Theme Studio"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["json", "console"] | None = Field(
        default=None,
        validate_default=True,
        description="Log output format: 'json' for production, 'console' for development",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    # Editor
    default_mode: ThemeMode = Field(
        default=ThemeMode.LIGHT, description="Mode applied when a session starts"
    )
    history_limit: int = Field(
        default=30, ge=1, le=500, description="Maximum undo steps kept per session"
    )

    @field_validator("log_format", mode="after")
    @classmethod
    def set_log_format_from_environment(cls, v: str | None, info) -> str:
        """Default to JSON logging in production."""
        if v is None:
            if info.data.get("environment") == Environment.PRODUCTION:
                return "json"
            return "console"
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings; get_settings.cache_clear() forces a reload."""
    return Settings()
