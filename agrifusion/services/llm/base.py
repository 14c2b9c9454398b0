"""
Base LLM client interface.

Defines the abstract interface that all LLM providers must implement.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class LLMError(Exception):
    """Raised when a completion cannot be obtained from the provider."""
    pass


@dataclass
class LLMResponse:
    """Response from an LLM provider."""
    content: str
    model: str
    provider: str
    usage: dict[str, int] | None = None
    raw_response: Any = None


class LLMClient(ABC):
    """
    Abstract base class for LLM clients.

    All LLM provider implementations must inherit from this class
    and implement the required methods.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the name of the LLM provider."""
        pass

    @property
    def is_fallback(self) -> bool:
        """Whether responses are canned rather than produced by a live model."""
        return False

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 500,
    ) -> LLMResponse:
        """
        Generate text based on a prompt.

        Args:
            prompt: The user prompt to send to the LLM.
            system_prompt: Optional system prompt to set context.
            temperature: Sampling temperature (0-1).
            max_tokens: Maximum tokens to generate.

        Returns:
            LLMResponse containing the generated text and metadata.

        Raises:
            LLMError: If the provider call fails.
        """
        pass
