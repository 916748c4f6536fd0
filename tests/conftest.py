"""
pytest configuration and shared fixtures for the channel analyzer tests.

Tests never reach OpenAI or Apify:
  1. A FakeLLMClient stands in for OpenAIClient and records every call.
  2. The Apify fetcher is given an httpx.MockTransport.
  3. API tests override the app's analyzer/fetcher dependencies.
"""

import os
from typing import List, Optional

import pytest
from httpx import ASGITransport, AsyncClient

# Set env vars BEFORE importing the app so Settings picks them up correctly
os.environ.setdefault("ENV", "development")
os.environ.pop("ALLOWED_API_KEYS", None)

from channel_analyzer.agents.analysis import ChannelAnalyzer  # noqa: E402
from channel_analyzer.config import get_settings  # noqa: E402
from channel_analyzer.models.analysis import ChannelInfo, VideoRecord  # noqa: E402


class FakeLLMClient:
    """In-memory LLM client: returns a canned response or raises a canned error."""

    def __init__(self, response: Optional[str] = "Mock report", error: Optional[Exception] = None,
                 available: bool = True, model: str = "fake-model"):
        self.response = response
        self.error = error
        self._available = available
        self.model = model
        self.calls: List[dict] = []

    @property
    def available(self) -> bool:
        return self._available

    async def complete(self, prompt, system_prompt, max_tokens, temperature):
        self.calls.append({
            "prompt": prompt,
            "system_prompt": system_prompt,
            "max_tokens": max_tokens,
            "temperature": temperature,
        })
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; start and end every test with a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def channel() -> ChannelInfo:
    return ChannelInfo(name="Test Channel", subscriber_count=12500, video_count=120)


@pytest.fixture()
def videos() -> List[VideoRecord]:
    return [
        VideoRecord(id="v1", title="Morning routine vlog", view_count=1500,
                    published_at="2024-03-01T09:00:00Z", transcript="a" * 150),
        VideoRecord(id="v2", title="Budget travel tips", view_count=90000,
                    published_at="2024-02-15T09:00:00Z"),
        VideoRecord(id="v3", title="Cooking for beginners", view_count=40000,
                    published_at="2024-01-20T09:00:00Z", transcript="short"),
    ]


@pytest.fixture()
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture()
def analyzer(fake_llm) -> ChannelAnalyzer:
    return ChannelAnalyzer(fake_llm)


@pytest.fixture()
async def client():
    """
    HTTPX async test client wired to the FastAPI app.

    Dependency overrides set by a test are removed afterwards.
    """
    from channel_analyzer.api import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
