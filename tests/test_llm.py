"""
Unit tests for the OpenAI client wrapper.

The SDK client is replaced with a mock; tests check request building and
the translation of openai exceptions into pipeline errors.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from channel_analyzer.config import Settings
from channel_analyzer.services.llm import OpenAIClient
from channel_analyzer.utils.api_helpers import (
    BackendUnavailableError,
    LLMServiceError,
    ModelUnavailableError,
    QuotaExceededError,
)

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _status_error(cls, status_code, message="error"):
    return cls(message, response=httpx.Response(status_code, request=_REQUEST), body=None)


def _completion(content, total_tokens=42):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(total_tokens=total_tokens),
    )


def _client_with(create_mock) -> OpenAIClient:
    client = OpenAIClient(api_key="sk-test", model="gpt-4o-mini")
    client._client = MagicMock()
    client._client.chat.completions.create = create_mock
    return client


class TestOpenAIClient:
    def test_available_only_with_key(self):
        assert OpenAIClient(api_key="sk-test", model="m").available
        assert not OpenAIClient(api_key=None, model="m").available

    def test_from_settings(self):
        settings = Settings(openai_api_key="sk-test", openai_model="gpt-test", _env_file=None)
        client = OpenAIClient.from_settings(settings)
        assert client.model == "gpt-test"
        assert client.available

    async def test_complete_returns_content(self):
        create = AsyncMock(return_value=_completion("report text"))
        client = _client_with(create)

        result = await client.complete("user prompt", "system prompt", max_tokens=100, temperature=0.5)

        assert result == "report text"
        kwargs = create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["messages"] == [
            {"role": "system", "content": "system prompt"},
            {"role": "user", "content": "user prompt"},
        ]
        assert kwargs["max_tokens"] == 100
        assert kwargs["temperature"] == 0.5

    async def test_no_choices_returns_none(self):
        client = _client_with(AsyncMock(return_value=SimpleNamespace(choices=[], usage=None)))
        assert await client.complete("p", "s", max_tokens=10, temperature=0) is None

    async def test_without_key_raises(self):
        with pytest.raises(BackendUnavailableError):
            await OpenAIClient(api_key=None, model="m").complete("p", "s", max_tokens=10, temperature=0)

    @pytest.mark.parametrize("error, expected", [
        (_status_error(openai.AuthenticationError, 401), BackendUnavailableError),
        (_status_error(openai.RateLimitError, 429, "You exceeded your current quota"), QuotaExceededError),
        (_status_error(openai.NotFoundError, 404), ModelUnavailableError),
        (_status_error(openai.PermissionDeniedError, 403), ModelUnavailableError),
        (_status_error(openai.InternalServerError, 500), LLMServiceError),
        (openai.APIConnectionError(request=_REQUEST), LLMServiceError),
    ])
    async def test_error_translation(self, error, expected):
        client = _client_with(AsyncMock(side_effect=error))
        with pytest.raises(expected):
            await client.complete("p", "s", max_tokens=10, temperature=0)

    async def test_quota_maps_to_429(self):
        client = _client_with(AsyncMock(side_effect=_status_error(openai.RateLimitError, 429)))
        with pytest.raises(QuotaExceededError) as exc_info:
            await client.complete("p", "s", max_tokens=10, temperature=0)
        assert exc_info.value.status_code == 429
