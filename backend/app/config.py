"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # LLM provider
    openai_api_key: SecretStr | None = None
    openai_model: str = "gpt-4o-mini"

    # Placeholder itineraries instead of a provider call; never enabled implicitly
    use_stub_llm: bool = False

    # Low temperature favors consistent itineraries over creative ones
    llm_temperature: float = 0.4

    # UI -> backend
    backend_url: str = "http://localhost:8000"
    backend_timeout_s: float = 120.0

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
