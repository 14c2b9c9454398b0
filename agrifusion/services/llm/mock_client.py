"""
Mock LLM client for testing and development.

Serves canned agricultural responses without calling external APIs. The
advisor service also uses it as the fallback when the live provider fails.
"""
import re

from agrifusion.services.llm.base import LLMClient, LLMResponse

_ADVICE_PATTERN = re.compile(r"farming advice for growing (?P<crop>.+?) in (?P<location>.+?)\.", re.IGNORECASE)


class MockLLMClient(LLMClient):
    """
    Mock LLM client that returns fixed placeholder responses.

    Useful for testing, development, and when no API key is configured.
    """

    @property
    def provider_name(self) -> str:
        return "mock"

    @property
    def is_fallback(self) -> bool:
        return True

    async def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 500,
    ) -> LLMResponse:
        """Generate a mock response based on the prompt context."""
        content = self._generate_contextual_response(prompt)

        return LLMResponse(
            content=content,
            model="mock-model",
            provider=self.provider_name,
            usage={
                "prompt_tokens": len(prompt.split()),
                "completion_tokens": len(content.split()),
                "total_tokens": len(prompt.split()) + len(content.split()),
            },
        )

    def _generate_contextual_response(self, prompt: str) -> str:
        """Pick a canned response from prompt keywords."""
        match = _ADVICE_PATTERN.search(prompt)
        if match:
            return self.farming_advice(match.group("crop"), match.group("location"))

        prompt_lower = prompt.lower()
        if "timing" in prompt_lower or "buy now or wait" in prompt_lower:
            return self.timing_advice()

        return "Mock response: Agricultural guidance is currently unavailable. Please try again later."

    @staticmethod
    def farming_advice(crop: str, location: str) -> str:
        return (
            f"Mock advice: For {crop} in {location}, ensure proper irrigation and soil testing. "
            "Consult local agricultural extension services for specific recommendations."
        )

    @staticmethod
    def timing_advice() -> str:
        return (
            "Mock timing advice: Current market conditions suggest waiting 2-3 weeks for "
            "potentially better prices. Monitor local supply and demand."
        )
