"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` singleton is available for import throughout the app.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Supabase
    SUPABASE_URL: str
    SUPABASE_KEY: str

    # Posts table
    POSTS_TABLE: str = "posts"
    # Must not exceed PostgREST max-rows: a short page ends the scan
    SCAN_PAGE_SIZE: int = 1000
    MAX_LIST_LIMIT: int = 100

    # postId sequence: "store" uses the database function, "local" a
    # per-process counter
    POST_SEQUENCE_BACKEND: Literal["store", "local"] = "store"
    POST_SEQUENCE_FUNCTION: str = "next_post_id"

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()  # type: ignore[call-arg]
