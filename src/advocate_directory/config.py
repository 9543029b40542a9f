"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DirectorySettings(BaseSettings):
    """Application settings loaded from environment variables.

    Order of precedence (highest → lowest):
        1. Environment variables (``DATABASE_URL``, ``LOG_LEVEL``, ...)
        2. ``.env`` file
        3. Defaults below
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = Field(
        default="sqlite:///advocates.db",
        description="SQLAlchemy-style connection URL",
    )
    database_echo: bool = Field(default=False, description="Log all SQL statements")
    seed_on_startup: bool = Field(
        default=False,
        description="Replace table contents with the seed dataset when the API starts",
    )

    # ── API ──────────────────────────────────────────────────────────────
    api_title: str = Field(default="Advocate Directory", description="OpenAPI title")
    api_version: str = Field(default="0.1.0", description="OpenAPI version string")
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")
    debug: bool = Field(default=False, description="Expose exception text in 500 responses")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console", "auto"] = "auto"


# Global settings instance
_settings: DirectorySettings | None = None


def get_settings() -> DirectorySettings:
    """Get or create settings instance."""
    global _settings
    if _settings is None:
        _settings = DirectorySettings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
