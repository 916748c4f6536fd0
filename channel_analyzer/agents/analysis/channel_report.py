"""
Channel report orchestrator.

Runs one AI analysis cycle:
1. Precondition checks (backend configured, at least one video)
2. Cost estimate (logged and returned, never blocks the run)
3. Prompt construction
4. One LLM call, no retries
5. Normalization of the response
"""
import logging
import time
from typing import Sequence

from ...constants import (
    ReportVariant,
    LLM_MAX_TOKENS_CHANNEL_REPORT,
    LLM_TEMP_CHANNEL_REPORT,
)
from ...models.analysis import AnalysisMetadata, AnalysisOutcome, ChannelInfo, VideoRecord
from ...services.llm import LLMClient
from ...utils.api_helpers import BackendUnavailableError, EmptyReportError, InsufficientDataError
from ...utils.cost import estimate_cost
from ...utils.engagement import transcript_coverage
from .prompt_builder import build_prompt, system_prompt_for
from .report_normalizer import normalize_report

logger = logging.getLogger(__name__)


class ChannelAnalyzer:
    """
    Composes cost estimation, prompt building, the LLM call and
    normalization into a single request/response cycle.

    The LLM client is injected so tests can substitute a fake one.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        language: str = "Korean",
        max_tokens: int = LLM_MAX_TOKENS_CHANNEL_REPORT,
        temperature: float = LLM_TEMP_CHANNEL_REPORT,
    ):
        self.llm_client = llm_client
        self.language = language
        self.max_tokens = max_tokens
        self.temperature = temperature

    @property
    def available(self) -> bool:
        return self.llm_client.available

    async def run(
        self,
        channel: ChannelInfo,
        videos: Sequence[VideoRecord],
        variant: ReportVariant = ReportVariant.FREE_TEXT,
    ) -> AnalysisOutcome:
        """
        Analyze a channel with the LLM.

        Args:
            channel: Channel metadata
            videos: Canonical video records
            variant: Report shape to request

        Returns:
            AnalysisOutcome with the normalized report and run metadata

        Raises:
            BackendUnavailableError: No LLM credential configured
            InsufficientDataError: No videos supplied
            EmptyReportError: The LLM returned no content
            MalformedReportError: Structured output was not a JSON object
            QuotaExceededError, ModelUnavailableError, LLMServiceError: from the client
        """
        variant = ReportVariant(variant)

        if not self.llm_client.available:
            raise BackendUnavailableError("OPENAI_API_KEY is not configured")

        if not videos:
            raise InsufficientDataError("No video data to analyze")

        logger.info(f"AI analysis started: {channel.name} ({len(videos)} videos, variant={variant.value})")

        cost_estimate = estimate_cost(videos)
        logger.info(
            f"Estimated cost: ${cost_estimate.estimated_cost_usd} "
            f"({cost_estimate.estimated_cost_krw} KRW, {cost_estimate.estimated_tokens} tokens)"
        )

        videos_with_transcripts, coverage_rate = transcript_coverage(videos)
        logger.info(f"Videos with usable captions: {videos_with_transcripts}/{len(videos)}")

        prompt = build_prompt(channel, videos, variant, language=self.language)
        logger.info(f"Prompt length: {len(prompt)} chars")

        start = time.perf_counter()
        raw_text = await self.llm_client.complete(
            prompt,
            system_prompt_for(variant),
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        duration_ms = int((time.perf_counter() - start) * 1000)

        if not raw_text:
            raise EmptyReportError("LLM returned no content")

        report = normalize_report(raw_text, variant)
        logger.info(f"AI analysis completed in {duration_ms}ms")

        return AnalysisOutcome(
            report=report,
            metadata=AnalysisMetadata(
                analyzed_videos_count=len(videos),
                videos_with_transcripts=videos_with_transcripts,
                transcript_coverage_rate=coverage_rate,
                analysis_duration_ms=duration_ms,
                cost_estimate=cost_estimate,
                ai_model_used=self.llm_client.model,
            ),
        )
