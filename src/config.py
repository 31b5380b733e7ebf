"""Application configuration loaded from environment variables and .env file."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    LOG_LEVEL: str = "INFO"

    # Month selector lists the twelve months of this year only
    QUEST_TARGET_YEAR: int = 2026

    # Default document acquisition.
    # Precedence: QUEST_DATA_PATH, then QUEST_DATA_BASE_URL, then the file
    # of that name inside QUEST_STATIC_DIR (also served at /static).
    QUEST_DATA_FILENAME: str = "quest-data.json"
    QUEST_DATA_PATH: Optional[str] = None
    QUEST_DATA_BASE_URL: Optional[str] = None  # e.g. "https://example.org/static/"
    QUEST_STATIC_DIR: str = "src/data"
    FETCH_TIMEOUT: float = 10.0
    AUTO_LOAD_ON_STARTUP: bool = True


settings = Settings()
