"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["critical", "error", "warning", "info", "debug"]


class BackendSettings(BaseSettings):
    """Centralized settings for the KrishiCash backend service.

    Every field can be overridden with an environment variable of the same
    name, e.g. ``DATABASE_URL`` or ``SAVE_SLOT_KEY``, or through ``.env``.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    database_url: str = "sqlite:///./krishicash.db"
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=8000, ge=1, le=65535)
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )
    save_slot_key: str = Field(default="krishicash_game_state", min_length=1)
    log_level: LogLevel = "info"


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


settings = get_settings()

__all__ = ["BackendSettings", "LogLevel", "get_settings", "settings"]
