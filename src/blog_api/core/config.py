"""
Application Configuration

Centralized settings management using Pydantic BaseSettings.
All values are loaded from environment variables or .env file.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable binding.

    Optional env vars:
        STORE_BACKEND (memory), DATABASE_URL (local SQLite file),
        LOG_LEVEL (INFO), ENVIRONMENT (local)
    """

    PROJECT_NAME: str = "Blog Posts API"
    ENVIRONMENT: str = "local"

    # Storage
    STORE_BACKEND: Literal["memory", "sql"] = "memory"
    DATABASE_URL: str = "sqlite+aiosqlite:///./blog_posts.db"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",  # Silently ignore unknown env vars
    )


settings = Settings()
