"""
Tests for LLM service.
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from agrifusion.services.llm import LLMError, get_llm_client
from agrifusion.services.llm.factory import clear_llm_client_cache
from agrifusion.services.llm.mock_client import MockLLMClient
from agrifusion.services.llm.openai_client import OpenAIClient


@pytest.fixture(autouse=True)
def reset_factory_cache():
    clear_llm_client_cache()
    yield
    clear_llm_client_cache()


def _completion(content="Rotate crops yearly."):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(prompt_tokens=10, completion_tokens=4, total_tokens=14),
    )


@pytest.mark.asyncio
async def test_mock_client_generate():
    """Test mock client generates responses."""
    client = MockLLMClient()

    response = await client.generate("Test prompt")

    assert response.content
    assert response.provider == "mock"
    assert response.model == "mock-model"
    assert client.is_fallback


@pytest.mark.asyncio
async def test_mock_client_farming_advice_names_crop_and_location():
    client = MockLLMClient()

    response = await client.generate("Provide farming advice for growing maize in Kenya. Include soil needs.")

    assert response.content.startswith("Mock advice: For maize in Kenya")


@pytest.mark.asyncio
async def test_mock_client_timing_advice():
    client = MockLLMClient()

    response = await client.generate("Advise on the best timing for buyers")

    assert "2-3 weeks" in response.content


def test_get_llm_client_mock_provider():
    client = get_llm_client("mock")
    assert isinstance(client, MockLLMClient)


def test_get_llm_client_falls_back_without_valid_key():
    with patch("agrifusion.services.llm.factory.validate_api_key", return_value=False):
        client = get_llm_client("openai")
    assert isinstance(client, MockLLMClient)


def test_get_llm_client_openai_with_valid_key():
    with patch("agrifusion.services.llm.factory.validate_api_key", return_value=True):
        client = get_llm_client("openai")
    assert isinstance(client, OpenAIClient)
    assert not client.is_fallback


def test_get_llm_client_unknown_provider():
    client = get_llm_client("carrier-pigeon")
    assert isinstance(client, MockLLMClient)


class TestOpenAIClient:
    """OpenAI client with the SDK call mocked out."""

    @pytest.fixture
    def client(self):
        client = OpenAIClient(api_key="sk-test", model="gpt-3.5-turbo")
        client.client = MagicMock()
        return client

    @pytest.mark.asyncio
    async def test_generate_returns_content_and_usage(self, client):
        client.client.chat.completions.create = AsyncMock(return_value=_completion())

        response = await client.generate("How do I grow rice?", system_prompt="Be helpful.", max_tokens=300)

        assert response.content == "Rotate crops yearly."
        assert response.provider == "openai"
        assert response.usage["total_tokens"] == 14

    @pytest.mark.asyncio
    async def test_generate_sends_system_and_user_messages(self, client):
        create = AsyncMock(return_value=_completion())
        client.client.chat.completions.create = create

        await client.generate("prompt", system_prompt="system", temperature=0.6, max_tokens=300)

        kwargs = create.call_args.kwargs
        assert kwargs["model"] == "gpt-3.5-turbo"
        assert kwargs["messages"] == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "prompt"},
        ]
        assert kwargs["temperature"] == 0.6
        assert kwargs["max_tokens"] == 300

    @pytest.mark.asyncio
    async def test_sdk_errors_become_llm_errors(self, client):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        client.client.chat.completions.create = AsyncMock(
            side_effect=openai.APIConnectionError(request=request)
        )

        with pytest.raises(LLMError):
            await client.generate("prompt")

    @pytest.mark.asyncio
    async def test_empty_completion_is_an_error(self, client):
        client.client.chat.completions.create = AsyncMock(return_value=_completion(content=""))

        with pytest.raises(LLMError):
            await client.generate("prompt")
