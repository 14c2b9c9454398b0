"""
Core module containing configuration and shared utilities.
"""
from agrifusion.core.config import settings, get_settings, validate_api_key
from agrifusion.core.prompts import (
    CompletionProfile,
    FARMING_PROFILE,
    TIMING_PROFILE,
    SYSTEM_PROMPTS,
)

__all__ = [
    "settings",
    "get_settings",
    "validate_api_key",
    "CompletionProfile",
    "FARMING_PROFILE",
    "TIMING_PROFILE",
    "SYSTEM_PROMPTS",
]
