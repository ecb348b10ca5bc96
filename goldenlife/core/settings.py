"""Application settings using Pydantic Settings for typed configuration.

This module centralizes all configuration and provides type-safe access to settings.
Settings are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    env_name: str = Field(default="development", alias="ENV_NAME")

    # Backend API
    api_base_url: str = Field(default="http://localhost:5000", alias="API_BASE_URL")
    http_connect_timeout: float = Field(
        default=5.0, alias="HTTP_CONNECT_TIMEOUT", gt=0
    )
    http_read_timeout: float = Field(default=10.0, alias="HTTP_READ_TIMEOUT", gt=0)

    # Locale
    default_language: str = Field(default="en", alias="DEFAULT_LANGUAGE")
    locale_store_path: Path = Field(
        default=Path("~/.goldenlife/preferences.json"), alias="LOCALE_STORE_PATH"
    )

    # Image generation (OpenAI-compatible)
    image_api_key: str | None = Field(
        default=None, alias="AI_INTEGRATIONS_OPENAI_API_KEY"
    )
    image_api_base_url: str = Field(
        default="https://api.openai.com/v1", alias="AI_INTEGRATIONS_OPENAI_BASE_URL"
    )

    @computed_field
    @property
    def resolved_locale_store_path(self) -> Path:
        """Locale store path with the user's home directory expanded."""
        return self.locale_store_path.expanduser()

    @computed_field
    @property
    def image_generation_configured(self) -> bool:
        """Whether an API key for the image provider is present."""
        return bool(self.image_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
