"""
Application configuration settings.

All configuration is loaded from environment variables with sensible defaults.
"""
import json
from typing import Any
from functools import lru_cache

import structlog
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

logger = structlog.get_logger()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "AgriFusion Backend"
    app_version: str = "1.0.0"
    api_debug: bool = True

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=5000, validation_alias=AliasChoices("api_port", "port"))
    cors_origins: list[str] = ["*"]

    # LLM Configuration
    llm_provider: str = "openai"  # openai, mock
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    openai_base_url: str = "https://api.openai.com/v1"
    openai_timeout_seconds: float = 30.0
    llm_max_tokens: int = 500
    llm_temperature: float = 0.7

    # Price history
    history_default_days: int = 30
    history_max_days: int = 365

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        """Parse CORS origins from JSON string or list."""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [v]
        return v

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        frozen = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()


def validate_api_key(api_key: str | None = None) -> bool:
    """
    Check that an OpenAI API key is configured and looks valid.

    Args:
        api_key: Key to check. Defaults to the configured key.

    Returns:
        True if the key is present and starts with ``sk-``.
    """
    if api_key is None:
        api_key = settings.openai_api_key

    if not api_key:
        logger.warning("OPENAI_API_KEY not found in environment variables")
        return False

    if not api_key.startswith("sk-"):
        logger.warning('OPENAI_API_KEY appears to be invalid (should start with "sk-")')
        return False

    return True
