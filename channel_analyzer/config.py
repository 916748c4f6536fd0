from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache

from .constants import (
    OPENAI_MODEL_FAST,
    APIFY_DEFAULT_ACTOR,
    APIFY_RUN_TIMEOUT,
    DEFAULT_TIMEOUT_HTTPX,
    KEYWORD_DEFAULT_SCRIPT_RANGES,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = "production"

    # OpenAI
    openai_api_key: Optional[str] = None
    openai_model: str = OPENAI_MODEL_FAST
    openai_timeout: float = Field(
        default=DEFAULT_TIMEOUT_HTTPX,
        description="Timeout in seconds for OpenAI requests"
    )

    # Apify (video fetch)
    apify_api_token: Optional[str] = None
    apify_actor_id: str = APIFY_DEFAULT_ACTOR
    apify_timeout: float = Field(
        default=APIFY_RUN_TIMEOUT,
        description="Timeout in seconds for a synchronous actor run"
    )

    # API Security
    allowed_api_keys: str = ""

    # Report
    report_language: str = Field(
        default="Korean",
        description="Language the LLM is asked to write the report in"
    )
    keyword_script_ranges: str = Field(
        default=KEYWORD_DEFAULT_SCRIPT_RANGES,
        description="Regex character ranges of the native script kept by keyword extraction"
    )

    # Caption fallback
    transcript_fallback_enabled: bool = Field(
        default=False,
        description="Fetch captions with youtube-transcript-api when the scraper returned none"
    )
    transcript_languages: str = "ko,en"

    @property
    def api_keys_set(self) -> set[str]:
        return {k.strip() for k in self.allowed_api_keys.split(",") if k.strip()}

    @property
    def transcript_languages_list(self) -> list[str]:
        return [lang.strip() for lang in self.transcript_languages.split(",") if lang.strip()]

    @property
    def is_development(self) -> bool:
        return self.env.lower() == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
