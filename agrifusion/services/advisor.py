"""
AI advisor service.

Farming advice and buyer timing recommendations backed by an LLM client.
When the provider is unavailable or unconfigured a canned response is
returned instead, marked with a ``note``.
"""
import random
from datetime import datetime, timezone
from typing import Any

import structlog

from agrifusion.core.prompts import (
    FARMING_PROFILE,
    TIMING_PROFILE,
    get_farming_advice_prompt,
    get_timing_advice_prompt,
)
from agrifusion.services.llm import LLMClient, LLMError, get_llm_client
from agrifusion.services.llm.mock_client import MockLLMClient
from agrifusion.services.series import RandomSource

logger = structlog.get_logger()

FALLBACK_NOTE = "This is a fallback response due to API unavailability"


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


async def get_farming_advice(
    crop: str,
    location: str,
    client: LLMClient | None = None,
) -> dict[str, Any]:
    """
    Get farming advice for a crop grown in a location.

    Args:
        crop: Crop type, e.g. "wheat".
        location: Growing region, e.g. "Iowa".
        client: LLM client. Defaults to the configured provider.

    Returns:
        Dict with crop, location, advice and timestamp; fallback
        responses also carry a note.
    """
    client = client or get_llm_client()

    if not client.is_fallback:
        try:
            response = await client.generate(
                prompt=get_farming_advice_prompt(crop, location),
                system_prompt=FARMING_PROFILE.system_prompt,
                temperature=FARMING_PROFILE.temperature,
                max_tokens=FARMING_PROFILE.max_tokens,
            )
            return {
                "crop": crop,
                "location": location,
                "advice": response.content,
                "timestamp": _timestamp(),
            }
        except LLMError as e:
            logger.error("Farming advice generation failed", error=str(e), crop=crop, location=location)

    return {
        "crop": crop,
        "location": location,
        "advice": MockLLMClient.farming_advice(crop, location),
        "timestamp": _timestamp(),
        "note": FALLBACK_NOTE,
    }


async def get_timing_advice(
    client: LLMClient | None = None,
    rng: RandomSource | None = None,
) -> dict[str, Any]:
    """
    Get advice on when buyers should purchase agricultural products.

    Args:
        client: LLM client. Defaults to the configured provider.
        rng: Randomness source for the market indicator.

    Returns:
        Dict with recommendation, timestamp and marketIndicator (BUY/WAIT).
    """
    client = client or get_llm_client()
    rng = rng or random.Random()

    if not client.is_fallback:
        try:
            response = await client.generate(
                prompt=get_timing_advice_prompt(),
                system_prompt=TIMING_PROFILE.system_prompt,
                temperature=TIMING_PROFILE.temperature,
                max_tokens=TIMING_PROFILE.max_tokens,
            )
            return {
                "recommendation": response.content,
                "timestamp": _timestamp(),
                "marketIndicator": "BUY" if rng.random() > 0.5 else "WAIT",
            }
        except LLMError as e:
            logger.error("Timing advice generation failed", error=str(e))

    return {
        "recommendation": MockLLMClient.timing_advice(),
        "timestamp": _timestamp(),
        "marketIndicator": "WAIT",
        "note": FALLBACK_NOTE,
    }
