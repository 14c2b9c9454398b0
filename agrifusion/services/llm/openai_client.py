"""
OpenAI LLM client implementation.
"""
import structlog
from openai import AsyncOpenAI, OpenAIError

from agrifusion.core.config import settings
from agrifusion.services.llm.base import LLMClient, LLMError, LLMResponse

logger = structlog.get_logger()


class OpenAIClient(LLMClient):
    """OpenAI chat completions client."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize the OpenAI client.

        Args:
            api_key: OpenAI API key. Defaults to settings.
            model: Model to use. Defaults to settings.
            base_url: API base URL. Defaults to settings.
            timeout: Request timeout in seconds. Defaults to settings.
        """
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.openai_model
        self.client = AsyncOpenAI(
            api_key=self.api_key,
            base_url=base_url or settings.openai_base_url,
            timeout=timeout or settings.openai_timeout_seconds,
            max_retries=0,
        )

    @property
    def provider_name(self) -> str:
        return "openai"

    async def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 500,
    ) -> LLMResponse:
        """Generate text using the chat completions endpoint."""
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError as e:
            logger.error("OpenAI API error", error=str(e), model=self.model)
            raise LLMError(f"OpenAI request failed: {e}") from e

        if not response.choices or not response.choices[0].message.content:
            raise LLMError("OpenAI returned an empty completion")

        return LLMResponse(
            content=response.choices[0].message.content,
            model=self.model,
            provider=self.provider_name,
            usage={
                "prompt_tokens": response.usage.prompt_tokens if response.usage else 0,
                "completion_tokens": response.usage.completion_tokens if response.usage else 0,
                "total_tokens": response.usage.total_tokens if response.usage else 0,
            },
            raw_response=response,
        )
