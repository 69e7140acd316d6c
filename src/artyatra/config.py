"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_SWECHA_API_BASE = "https://api.corpus.swecha.org/api/v1"
DEFAULT_SWECHA_CATEGORY_ID = "4366cab1-031e-4b37-816b-311ee34461a9"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = "low"
    openai_store: bool = False
    swecha_api_base: str = DEFAULT_SWECHA_API_BASE
    swecha_default_category_id: str = DEFAULT_SWECHA_CATEGORY_ID
    max_image_bytes: int = 10 * 1024 * 1024
    max_relay_bytes: int = 20 * 1024 * 1024
    idle_timeout_minutes: int = 30
    max_session_minutes: int = 8 * 60
    http_timeout_seconds: float = 30.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
