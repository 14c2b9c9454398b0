"""
Prompt templates and completion profiles for the advisor service.

Profiles are immutable so they can be shared across requests.
"""
from dataclasses import dataclass
from types import MappingProxyType

from agrifusion.core.config import settings

SYSTEM_PROMPTS = MappingProxyType({
    "farming": (
        "You are an expert agricultural advisor providing practical farming advice "
        "based on crop type, location, and current agricultural best practices."
    ),
    "market": (
        "You are an agricultural market analyst providing insights on market trends, "
        "pricing, and buying/selling timing."
    ),
    "general": "You are a helpful AI assistant specialized in agriculture and farming.",
})


@dataclass(frozen=True)
class CompletionProfile:
    """Sampling parameters and system prompt for one kind of completion."""
    system_prompt: str
    temperature: float
    max_tokens: int


FARMING_PROFILE = CompletionProfile(
    system_prompt=SYSTEM_PROMPTS["farming"],
    temperature=settings.llm_temperature,
    max_tokens=settings.llm_max_tokens,
)

# Lower temperature and a shorter answer for timing recommendations
TIMING_PROFILE = CompletionProfile(
    system_prompt=SYSTEM_PROMPTS["market"],
    temperature=0.6,
    max_tokens=300,
)


def get_farming_advice_prompt(crop: str, location: str) -> str:
    """Build the user prompt for crop and location specific advice."""
    return f"""Provide farming advice for growing {crop} in {location}. Include information about:
- Best planting time
- Soil requirements
- Water needs
- Common pests and diseases
- Expected yield
- Market tips

Keep the response concise but informative."""


def get_timing_advice_prompt() -> str:
    """Build the user prompt for buyer timing advice."""
    return """Based on current market trends and seasonal factors, provide advice on the best timing for buyers to purchase agricultural products. Consider:
- Current market prices
- Seasonal availability
- Storage costs
- Demand patterns

Give a clear recommendation on whether it's a good time to buy now or wait."""
