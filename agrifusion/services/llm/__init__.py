"""
LLM service abstraction layer.

Provides a unified interface for different LLM providers.
"""
from agrifusion.services.llm.base import LLMClient, LLMError, LLMResponse
from agrifusion.services.llm.factory import get_llm_client

__all__ = ["LLMClient", "LLMError", "LLMResponse", "get_llm_client"]
