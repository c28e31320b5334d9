"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).  Every field
has a default, so the service starts with an empty environment.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Regimen: personalized daily fitness plans"
    VERSION: str = "0.1.0"
    APP_DISPLAY_NAME: str = "Regimen"

    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./regimen.db"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
