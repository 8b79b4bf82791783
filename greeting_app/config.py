"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from greeting_app.domain.entities.origin_allowlist import OriginAllowlist

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_PORT = 8080
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    port: int = Field(
        default=DEFAULT_PORT,
        description="TCP port the HTTP server listens on",
        gt=0,
        lt=65536,
    )
    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to",
        min_length=1,
    )
    client_url: str | None = Field(
        default=None,
        description="Comma separated list of origins allowed by CORS, or '*' to allow any",
    )
    api_url: str = Field(
        default=f"http://localhost:{DEFAULT_PORT}",
        description="Base URL used by the web client to reach the API",
        min_length=1,
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of: {', '.join(_LOG_LEVELS)}")
        return normalized

    def origin_allowlist(self) -> OriginAllowlist:
        """Return the CORS allowlist described by ``client_url``."""

        return OriginAllowlist.from_config(self.client_url)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
