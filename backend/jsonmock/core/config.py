# jsonmock/core/config.py
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

from settings import DatabaseConfig

class Settings(BaseSettings):
    DATABASE_URL: str = DatabaseConfig.DATABASE_URL
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",  # vite dev server
        "http://127.0.0.1:5173",
    ]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        extra="allow",  # allow additional fields from .env
        env_file=".env",
    )

settings = Settings()
