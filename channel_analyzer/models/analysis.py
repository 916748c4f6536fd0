from datetime import datetime, timezone
from typing import Dict, Any, Optional, List, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from channel_analyzer.constants import TRANSCRIPT_MIN_VALID_LENGTH
from channel_analyzer.utils.youtube import extract_video_id

UNKNOWN_CHANNEL_NAME = "Unknown Channel"


def _first_present(raw: Dict[str, Any], *keys: str) -> Any:
    """Return the first non-empty value among ``keys`` (upstream shapes differ)."""
    for key in keys:
        value = raw.get(key)
        if value not in (None, ""):
            return value
    return None


# ============================================================================
# INPUT RECORDS
# ============================================================================

class VideoRecord(BaseModel):
    """One analyzed video, in the single canonical shape used internally."""
    model_config = ConfigDict(frozen=True)

    id: str = ""
    title: str
    description: str = ""
    view_count: int = Field(default=0, ge=0)
    like_count: Optional[int] = Field(default=None, ge=0)
    comment_count: Optional[int] = Field(default=None, ge=0)
    published_at: str = ""
    transcript: Optional[str] = None

    @field_validator("description", mode="before")
    @classmethod
    def _empty_description(cls, value: Any) -> Any:
        return value or ""

    @field_validator("view_count", mode="before")
    @classmethod
    def _zero_views(cls, value: Any) -> Any:
        return value or 0

    @property
    def has_usable_transcript(self) -> bool:
        """Captions count as usable only when longer than the validity threshold."""
        return bool(self.transcript) and len(self.transcript) > TRANSCRIPT_MIN_VALID_LENGTH

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "VideoRecord":
        """
        Build a canonical record from an upstream item.

        Accepts both the scraper shape (viewCount, likes, commentsCount,
        date, text, subtitles) and the canonical shape. Scraper field names
        win when both are present.
        """
        transcript = None
        subtitles = raw.get("subtitles")
        if isinstance(subtitles, list) and subtitles:
            first = subtitles[0]
            if isinstance(first, dict):
                transcript = first.get("plaintext")
        if not transcript:
            transcript = raw.get("transcript")

        published_at = _first_present(raw, "date", "published_at")
        if not published_at:
            published_at = datetime.now(timezone.utc).isoformat()

        return cls(
            id=str(_first_present(raw, "id", "video_id") or extract_video_id(str(raw.get("url") or "")) or ""),
            title=raw.get("title"),
            description=raw.get("text") or raw.get("description") or "",
            view_count=raw.get("viewCount") or raw.get("view_count") or 0,
            like_count=_first_present(raw, "likes", "like_count"),
            comment_count=_first_present(raw, "commentsCount", "comment_count"),
            published_at=str(published_at),
            transcript=transcript,
        )


class ChannelInfo(BaseModel):
    """Channel-level metadata."""
    model_config = ConfigDict(frozen=True)

    name: str = UNKNOWN_CHANNEL_NAME
    subscriber_count: Optional[int] = Field(default=None, ge=0)
    video_count: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _default_name(cls, value: Any) -> Any:
        return value or UNKNOWN_CHANNEL_NAME

    @classmethod
    def from_raw(cls, raw: Optional[Dict[str, Any]], fallback_video_count: Optional[int] = None) -> "ChannelInfo":
        """
        Build channel info from user input or from the first scraped video.

        Scraped videos carry channel fields (channelName, numberOfSubscribers,
        channelTotalVideos, channelDescription) next to the video fields.
        """
        raw = raw or {}
        video_count = _first_present(raw, "channelTotalVideos", "video_count")
        return cls(
            name=_first_present(raw, "channelName", "name"),
            subscriber_count=_first_present(raw, "numberOfSubscribers", "subscriber_count"),
            video_count=video_count if video_count is not None else fallback_video_count,
            description=_first_present(raw, "channelDescription", "description"),
        )


# ============================================================================
# DERIVED VALUES
# ============================================================================

class CostEstimate(BaseModel):
    """Estimated token usage and price of one report call."""
    estimated_tokens: int
    estimated_cost_usd: float
    estimated_cost_krw: int


class AnalysisMetadata(BaseModel):
    """Bookkeeping returned next to every AI report."""
    analyzed_videos_count: int
    videos_with_transcripts: int
    transcript_coverage_rate: int
    analysis_duration_ms: int
    cost_estimate: CostEstimate
    ai_model_used: str


# ============================================================================
# REPORTS
# ============================================================================

class FreeTextReport(BaseModel):
    """Free-text variant: the whole LLM output, verbatim."""
    model_config = ConfigDict(frozen=True)

    report_text: str


class StructuredReport(BaseModel):
    """
    Structured variant: five report sections.

    Sections are kept as plain dicts so a section supplied by the LLM is
    returned exactly as given.
    """
    model_config = ConfigDict(frozen=True)

    channel_overview: Dict[str, Any]
    title_analysis: Dict[str, Any]
    performance_analysis: Dict[str, Any]
    content_strategy_report: Dict[str, Any]
    executive_summary: Dict[str, Any]


AnalysisReport = Union[FreeTextReport, StructuredReport]


class AnalysisOutcome(BaseModel):
    """Normalized report plus the metadata of the run that produced it."""
    report: AnalysisReport
    metadata: AnalysisMetadata


class ChannelFetchResult(BaseModel):
    """Channel summary and canonical videos returned by the fetch service."""
    channel_info: ChannelInfo
    videos: List[VideoRecord] = Field(default_factory=list)
    analysis_summary: Dict[str, Any] = Field(default_factory=dict)
