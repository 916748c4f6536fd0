"""
Main module for YouTube channel analysis business logic.

Two entry points:
- analyze_channel_data: AI report for channel data supplied by the caller
- analyze_channel_url: fetch a channel by URL, compute statistics and,
  optionally, add the AI report

In the URL flow the AI step is allowed to fail on its own: its error is
embedded in place of the report and the statistics are still returned.
"""
import logging
from typing import Any, Dict, Optional, Sequence

from channel_analyzer.agents.analysis import ChannelAnalyzer
from channel_analyzer.constants import (
    ReportVariant,
    AnalysisType,
    API_VERSION,
    DATA_SOURCE_NAME,
    MAX_VIDEOS_MIN,
    MAX_VIDEOS_MAX,
    TRANSCRIPT_KEYWORD_MIN_TEXT,
    KEYWORD_DEFAULT_SCRIPT_RANGES,
)
from channel_analyzer.models.analysis import (
    AnalysisOutcome,
    AnalysisReport,
    ChannelInfo,
    StructuredReport,
    VideoRecord,
)
from channel_analyzer.services.apify import ApifyVideoFetcher
from channel_analyzer.utils.api_helpers import (
    BackendUnavailableError,
    InsufficientDataError,
    build_inline_error,
    utc_timestamp,
)
from channel_analyzer.utils.engagement import (
    analyzed_period,
    engagement_analysis,
    subtitle_details,
    transcript_coverage,
)
from channel_analyzer.utils.keywords import extract_keywords, keyword_frequencies
from channel_analyzer.utils.report_formatter import generate_markdown_report
from channel_analyzer.utils.transcript import fill_missing_transcripts
from channel_analyzer.utils.youtube import is_youtube_url

logger = logging.getLogger(__name__)


def serialize_report(report: AnalysisReport) -> Dict[str, Any]:
    """Report as returned to clients; structured reports also carry Markdown."""
    data = report.model_dump()
    if isinstance(report, StructuredReport):
        data["report_markdown"] = generate_markdown_report(report)
    return data


def _outcome_metadata(outcome: AnalysisOutcome) -> Dict[str, Any]:
    return outcome.metadata.model_dump()


async def analyze_channel_data(
    analyzer: ChannelAnalyzer,
    channel: ChannelInfo,
    videos: Sequence[VideoRecord],
    variant: ReportVariant = ReportVariant.FREE_TEXT,
) -> Dict[str, Any]:
    """
    AI analysis of caller-supplied channel data.

    Returns:
        Response "data" block: ai_analysis, analysis_metadata,
        channel_summary and meta

    Raises:
        APIError subclasses from the orchestrator; nothing is caught here
    """
    outcome = await analyzer.run(channel, videos, variant)

    return {
        "ai_analysis": serialize_report(outcome.report),
        "analysis_metadata": _outcome_metadata(outcome),
        "channel_summary": {
            "name": channel.name,
            "subscriber_count": channel.subscriber_count,
            "analyzed_period": analyzed_period(videos),
        },
        "meta": {
            "analyzed_at": utc_timestamp(),
            "api_version": API_VERSION,
            "analysis_type": AnalysisType.AI_COMPREHENSIVE.value,
        },
    }


def validate_url_request(url: Any, max_videos: Any) -> None:
    """
    Validate the URL flow input.

    Raises:
        InsufficientDataError: Bad URL or out-of-range video count
    """
    if not url or not isinstance(url, str):
        raise InsufficientDataError("Missing URL", user_message="Please provide a valid YouTube URL.")

    if not is_youtube_url(url):
        raise InsufficientDataError(f"Not a YouTube URL: {url}", user_message="Please enter a correct YouTube URL.")

    if not isinstance(max_videos, int) or not MAX_VIDEOS_MIN <= max_videos <= MAX_VIDEOS_MAX:
        raise InsufficientDataError(
            f"maxVideos out of range: {max_videos}",
            user_message=f"The number of videos must be between {MAX_VIDEOS_MIN} and {MAX_VIDEOS_MAX}.",
        )


async def analyze_channel_url(
    url: str,
    max_videos: int,
    fetcher: ApifyVideoFetcher,
    analyzer: ChannelAnalyzer,
    include_ai_analysis: bool = False,
    variant: ReportVariant = ReportVariant.FREE_TEXT,
    transcript_languages: Optional[Sequence[str]] = None,
    script_ranges: str = KEYWORD_DEFAULT_SCRIPT_RANGES,
) -> Dict[str, Any]:
    """
    Fetch a channel by URL and build the combined analysis.

    Args:
        url: Channel or video URL
        max_videos: Number of videos to fetch (1-50)
        fetcher: Video fetch service
        analyzer: AI report orchestrator
        include_ai_analysis: Also run the AI report
        variant: AI report shape
        transcript_languages: When set, fetch missing captions in these languages
        script_ranges: Native-script ranges for keyword extraction

    Returns:
        Response "data" block

    Raises:
        InsufficientDataError, BackendUnavailableError, UpstreamNotFoundError,
        UpstreamFetchError: fetch-side failures end the request
    """
    validate_url_request(url, max_videos)

    if not fetcher.available:
        raise BackendUnavailableError(
            "APIFY_API_TOKEN is not configured",
            user_message="The video data service is not configured. Please contact the administrator.",
        )

    logger.info(f"Channel analysis started: {url} (up to {max_videos} videos)")
    fetched = await fetcher.fetch_channel(url, max_videos)
    videos = fetched.videos

    if transcript_languages:
        videos = await fill_missing_transcripts(videos, transcript_languages)

    videos_with_transcripts, coverage_rate = transcript_coverage(videos)

    all_transcripts = " ".join(v.transcript for v in videos if v.has_usable_transcript)
    keyword_analysis = None
    if len(all_transcripts) > TRANSCRIPT_KEYWORD_MIN_TEXT:
        keyword_analysis = keyword_frequencies(all_transcripts, script_ranges=script_ranges)

    logger.info(f"Statistics complete: {len(videos)} videos, {videos_with_transcripts} with captions")

    data: Dict[str, Any] = {
        "channel_info": fetched.channel_info.model_dump(),
        "videos": [video.model_dump() for video in videos],
        "analysis_summary": {
            **fetched.analysis_summary,
            "subtitle_coverage_rate": coverage_rate,
            "top_keywords": extract_keywords(videos, script_ranges=script_ranges),
        },
        "keyword_analysis": keyword_analysis,
        "engagement_analysis": engagement_analysis(videos),
        "subtitle_details": subtitle_details(videos),
    }

    if include_ai_analysis:
        if analyzer.available:
            try:
                outcome = await analyzer.run(fetched.channel_info, videos, variant)
                data["ai_analysis"] = serialize_report(outcome.report)
                data["ai_analysis_metadata"] = _outcome_metadata(outcome)
            except Exception as e:
                # Keep the statistics even when the AI step fails
                logger.error(f"AI analysis failed, returning base analysis only: {e}", exc_info=True)
                data["ai_analysis"] = build_inline_error(e)
        else:
            logger.warning("AI analysis requested but OPENAI_API_KEY is not configured")
            data["ai_analysis"] = build_inline_error(
                BackendUnavailableError("OPENAI_API_KEY is not configured")
            )

    data["meta"] = {
        "analyzed_at": utc_timestamp(),
        "data_source": DATA_SOURCE_NAME,
        "api_version": API_VERSION,
        "analysis_type": (
            AnalysisType.COMPREHENSIVE_WITH_AI.value if include_ai_analysis
            else AnalysisType.COMPREHENSIVE.value
        ),
        "ai_analysis_enabled": include_ai_analysis,
        "ai_analysis_available": analyzer.available,
    }
    return data
