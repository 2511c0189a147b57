"""
Application configuration using Pydantic Settings.
"""

import os
from functools import lru_cache
from pydantic_settings import BaseSettings

FALLBACK_SITE_URL = "https://english-calculators.netlify.app"


def get_env_file() -> str:
    """Determine which env file to use based on environment."""
    env = os.getenv("APP_ENV", "development")
    if env == "production":
        return ".env.production"
    return ".env.development"


def normalize_site_url(value: str | None) -> str:
    """Strip whitespace and a trailing slash, falling back to the default site."""
    if not value:
        return FALLBACK_SITE_URL
    trimmed = value.strip()
    if not trimmed:
        return FALLBACK_SITE_URL
    return trimmed[:-1] if trimmed.endswith("/") else trimmed


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App settings
    app_name: str = "English Calculators"
    debug: bool = False
    log_level: str = "INFO"
    app_env: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Static site output
    site_url: str = FALLBACK_SITE_URL
    dist_dir: str = "dist"

    # Preferences (theme, accessibility)
    preferences_path: str = "preferences.json"

    class Config:
        env_file = get_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def canonical_site_url(self) -> str:
        return normalize_site_url(self.site_url)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
