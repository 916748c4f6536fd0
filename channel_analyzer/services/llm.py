"""
OpenAI chat-completion client used for channel reports.

The client is built once from settings and injected where it is needed
(orchestrator, API dependencies) instead of living in a module global.
SDK exceptions are translated into the pipeline's error types here, so
callers never depend on openai exception classes.
"""
import logging
from typing import Optional, Protocol

from openai import (
    AsyncOpenAI,
    APIError as OpenAIAPIError,
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
)

from ..config import Settings
from ..utils.api_helpers import (
    BackendUnavailableError,
    LLMServiceError,
    ModelUnavailableError,
    QuotaExceededError,
)

logger = logging.getLogger(__name__)


class LLMClient(Protocol):
    """What the orchestrator needs from a text-completion backend."""

    model: str

    @property
    def available(self) -> bool: ...

    async def complete(
        self,
        prompt: str,
        system_prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> Optional[str]: ...


class OpenAIClient:
    """
    Thin async wrapper around the OpenAI chat completions API.

    Without an API key the client is constructed but reports itself as
    unavailable; calling complete() then raises BackendUnavailableError.
    """

    def __init__(self, api_key: Optional[str], model: str, timeout: float = 60):
        self.model = model
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout) if api_key else None

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenAIClient":
        return cls(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            timeout=settings.openai_timeout,
        )

    @property
    def available(self) -> bool:
        return self._client is not None

    async def complete(
        self,
        prompt: str,
        system_prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> Optional[str]:
        """
        Send one chat completion and return the message text.

        Returns:
            Generated text, or None when the response carried no content

        Raises:
            BackendUnavailableError: No key configured, or the key was rejected
            QuotaExceededError: Rate or usage limit reached
            ModelUnavailableError: The model does not exist or is not accessible
            LLMServiceError: Any other OpenAI API failure
        """
        if self._client is None:
            raise BackendUnavailableError("OPENAI_API_KEY is not configured")

        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except AuthenticationError as e:
            raise BackendUnavailableError(
                f"OpenAI API key was rejected: {e}",
                user_message="AI analysis service configuration error. Please contact the administrator.",
            ) from e
        except RateLimitError as e:
            raise QuotaExceededError(f"OpenAI quota exceeded: {e}") from e
        except (NotFoundError, PermissionDeniedError) as e:
            raise ModelUnavailableError(f"Model {self.model} is not accessible: {e}") from e
        except OpenAIAPIError as e:
            logger.error(f"OpenAI API error (model={self.model}): {e}")
            raise LLMServiceError(f"OpenAI API error: {e}") from e

        if response.usage is not None:
            logger.info(f"LLM call completed (model={self.model}, total_tokens={response.usage.total_tokens})")

        if not response.choices:
            return None
        return response.choices[0].message.content
