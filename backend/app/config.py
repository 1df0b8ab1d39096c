"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Upstream host, locale and result caps are settings, never literals in routes

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults reproduce the public store API and the client's caps: works out-of-the-box
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store API
    store_base_url: str = "https://store.steampowered.com"
    store_country_code: str = "us"
    store_language: str = "english"

    @field_validator("store_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are appended as "/api/...", so no trailing slash."""
        return v.rstrip("/")

    http_timeout_seconds: float = 100.0

    # Result caps
    genre_limit: int = 10
    games_per_tab_limit: int = 5
    games_limit: int = 5

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
