"""Centralized configuration management using pydantic-settings.

Configuration is loaded from environment variables with sensible defaults.
All settings can be overridden via environment variables or a .env file.

The render target is chosen here, once, at configuration time. Nothing in
the package inspects the runtime to guess which platform it is rendering for.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class RenderTarget(str, Enum):
    """Platform consuming the computed style."""

    DOCUMENT = "document"
    NATIVE = "native"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Override via environment variables (prefixed with UBOX_) or .env file.

    Examples:
        UBOX_RENDER_TARGET=native
        UBOX_THEME=inverse
        UBOX_LOG_LEVEL=DEBUG
        UBOX_ENVIRONMENT=production
    """

    model_config = SettingsConfigDict(
        env_prefix="UBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "universal-box"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = Field(default=False, description="Enable debug mode")

    # Rendering
    render_target: RenderTarget = Field(
        default=RenderTarget.DOCUMENT,
        description="Render target: 'document' for browsers, 'native' for mobile",
    )
    theme: str | None = Field(
        default=None,
        description="Name of the active theme. Unknown or empty names use the default theme.",
    )

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["json", "console"] | None = Field(
        default=None,
        validate_default=True,
        description="Log output format: 'json' for production, 'console' for development",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    @field_validator("log_format", mode="after")
    @classmethod
    def set_log_format_from_environment(cls, v: str | None, info) -> str:
        """Default to JSON logging in production."""
        if v is None:
            env = info.data.get("environment")
            if env == Environment.PRODUCTION:
                return "json"
        return v or "console"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_native(self) -> bool:
        """Check if styles are rendered for the native target."""
        return self.render_target == RenderTarget.NATIVE


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload settings.

    Returns:
        Configured Settings instance.
    """
    return Settings()
