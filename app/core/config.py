from typing import Optional, Set

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Reactive Books API"
    VERSION: str = "v1"
    DESCRIPTION: str = "A streaming REST API for Book management"

    API_V1_STR: str = "/api/v1"

    # --- Database ---
    DATABASE_URL: str = "sqlite+aiosqlite:///./books.db"
    DB_ECHO: bool = False

    # --- Streaming ---
    BOOK_STREAM_DELAY_SECONDS: float = 1.0

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    LOGGING_EXCLUDE_PATHS: Set[str] = {"/health", "/favicon.ico"}

    # --- CORS ---
    CORS_ORIGINS: str = ""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
