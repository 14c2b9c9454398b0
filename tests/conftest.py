"""
Pytest configuration and fixtures.

Provides fixtures for:
- HTTP client with the LLM client and randomness source overridden
- Fake LLM clients for success and failure paths
- Scripted randomness sources
"""
import random
from datetime import date
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from agrifusion.api.deps import get_llm, get_rng
from agrifusion.main import app
from agrifusion.services.llm.base import LLMClient, LLMError, LLMResponse
from agrifusion.services.llm.mock_client import MockLLMClient

FIXED_TODAY = date(2024, 3, 15)


class StaticLLMClient(LLMClient):
    """Live-looking client that always answers with the same text."""

    def __init__(self, content: str = "Plant early and rotate crops."):
        self.content = content
        self.calls: list[dict] = []

    @property
    def provider_name(self) -> str:
        return "static"

    async def generate(self, prompt, system_prompt=None, temperature=0.7, max_tokens=500):
        self.calls.append({
            "prompt": prompt,
            "system_prompt": system_prompt,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        return LLMResponse(content=self.content, model="static-model", provider=self.provider_name)


class FailingLLMClient(LLMClient):
    """Live-looking client whose upstream is down."""

    def __init__(self, exc: Exception | None = None):
        self.exc = exc or LLMError("upstream unavailable")

    @property
    def provider_name(self) -> str:
        return "failing"

    async def generate(self, prompt, system_prompt=None, temperature=0.7, max_tokens=500):
        raise self.exc


class ScriptedRandom:
    """Randomness source replaying a fixed sequence of floats, cycling at the end."""

    def __init__(self, values):
        self.values = list(values)
        self.index = 0

    def random(self) -> float:
        value = self.values[self.index % len(self.values)]
        self.index += 1
        return value


@pytest.fixture
def today() -> date:
    return FIXED_TODAY


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def static_llm() -> StaticLLMClient:
    return StaticLLMClient()


@pytest.fixture
def failing_llm() -> FailingLLMClient:
    return FailingLLMClient()


@pytest.fixture
def llm_client() -> LLMClient:
    """LLM client used by the `client` fixture. Override in a test module to change it."""
    return MockLLMClient()


@pytest_asyncio.fixture(scope="function")
async def client(llm_client) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with deterministic dependencies."""
    app.dependency_overrides[get_llm] = lambda: llm_client
    app.dependency_overrides[get_rng] = lambda: random.Random(42)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
