"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Gemini API credential (read from API_KEY). Required at startup.
    api_key: str | None = None

    # Model Configuration
    gemini_model: str = "gemini-2.5-flash"

    # Service Configuration
    prompt_service_host: str = "0.0.0.0"
    prompt_service_port: int = 8000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
