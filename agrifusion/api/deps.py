"""
API dependencies.

Routes receive their LLM client and randomness source through these so
tests can swap them with ``app.dependency_overrides``.
"""
import random

from agrifusion.services.llm import LLMClient, get_llm_client
from agrifusion.services.series import RandomSource


def get_llm() -> LLMClient:
    """LLM client for the configured provider."""
    return get_llm_client()


def get_rng() -> RandomSource:
    """Fresh randomness source per request."""
    return random.Random()
