"""Configuration and settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="PAGE_MATCH_",
        env_file=".env",
        extra="ignore",
    )

    # Matching settings
    match_window: int = Field(default=50, ge=1)  # Characters of title/url searched

    # Session settings
    max_sessions: int = Field(default=64, ge=1)

    # Filtering settings
    default_limit: int | None = Field(default=None, ge=1)

    # Diagnostics
    debug: bool = False
    profile: bool = False
    profiles_dir: Path = Path("profiles")


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings, loaded from the environment on first use."""
    return Settings()
