"""
Slack Notifier - Application Configuration
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        env_ignore_empty=True,
        extra="ignore",
    )
    
    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------
    APP_ENV: str = Field(default="development")
    APP_DEBUG: bool = Field(default=False)
    
    # -------------------------------------------------------------------------
    # Slack
    # -------------------------------------------------------------------------
    SLACK_WEBHOOK_URL: str = Field(default="")
    # 0 disables the client timeout; an empty value falls back to the default
    SLACK_TIMEOUT_SECONDS: Optional[float] = Field(default=10.0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
