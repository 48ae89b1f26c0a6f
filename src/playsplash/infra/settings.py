"""
Application settings for playsplash.

Settings come from environment variables only, using Pydantic BaseSettings.
Nothing is read from or written to disk, so no state carries over between runs.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..config import defaults


class Settings(BaseSettings):
    """Launcher settings using Pydantic BaseSettings."""

    log_file: str = Field(default=defaults.LOG_FILE_NAME, alias="PLAYSPLASH_LOG_FILE")
    log_level: str = Field(default="INFO", alias="PLAYSPLASH_LOG_LEVEL")
    player_binary: str = Field(default=defaults.PLAYER_BINARY, alias="PLAYSPLASH_PLAYER")
    # Relative to the current user's home directory
    target_app: str = Field(default=defaults.TARGET_APP_RELPATH, alias="PLAYSPLASH_TARGET_APP")
    env: str = Field(default="prod", alias="PLAYSPLASH_ENV")  # dev|prod|test

    model_config: SettingsConfigDict = SettingsConfigDict(
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


def load_settings(**overrides: object) -> Settings:
    """Build settings from the current environment, applying explicit overrides."""
    values = {k: v for k, v in overrides.items() if v is not None}
    return Settings(**values)  # type: ignore[arg-type]
