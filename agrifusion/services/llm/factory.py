"""
LLM client factory.

Creates the appropriate LLM client based on configuration.
"""
import structlog
from functools import lru_cache

from agrifusion.core.config import settings, validate_api_key
from agrifusion.services.llm.base import LLMClient
from agrifusion.services.llm.openai_client import OpenAIClient
from agrifusion.services.llm.mock_client import MockLLMClient

logger = structlog.get_logger()


@lru_cache()
def get_llm_client(provider: str | None = None) -> LLMClient:
    """
    Get an LLM client instance based on provider configuration.

    Args:
        provider: Override the provider from settings. Options: openai, mock

    Returns:
        Configured LLM client instance.
    """
    provider = (provider or settings.llm_provider).lower()

    logger.info("Creating LLM client", provider=provider)

    if provider == "openai":
        if not validate_api_key():
            logger.warning("OpenAI API key not usable, falling back to mock client")
            return MockLLMClient()
        return OpenAIClient()

    elif provider == "mock":
        return MockLLMClient()

    else:
        logger.warning("Unknown LLM provider, using mock client", provider=provider)
        return MockLLMClient()


def clear_llm_client_cache() -> None:
    """Clear the cached LLM client. Useful for testing."""
    get_llm_client.cache_clear()
