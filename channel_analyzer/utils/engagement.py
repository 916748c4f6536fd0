"""
Non-AI channel statistics: view distribution, extremes, caption details.
"""
import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from channel_analyzer.constants import (
    SUBTITLE_TITLE_PREVIEW_LENGTH,
    SUBTITLE_TEXT_PREVIEW_LENGTH,
    READING_WORDS_PER_MINUTE,
    VIEWS_1M,
    VIEWS_100K,
    VIEWS_10K,
)
from channel_analyzer.models.analysis import VideoRecord
from .numbers import round_half_up


def total_views(videos: Sequence[VideoRecord]) -> int:
    return sum(video.view_count for video in videos)


def average_views(videos: Sequence[VideoRecord]) -> int:
    """Rounded mean view count; 0 for an empty list."""
    if not videos:
        return 0
    return int(round_half_up(total_views(videos) / len(videos)))


def transcript_coverage(videos: Sequence[VideoRecord]) -> tuple[int, int]:
    """
    Count videos with usable captions.

    Returns:
        (videos_with_transcripts, coverage_rate_percent)
    """
    with_transcripts = sum(1 for video in videos if video.has_usable_transcript)
    if not videos:
        return with_transcripts, 0
    return with_transcripts, int(round_half_up(with_transcripts / len(videos) * 100))


def summarize_videos(videos: Sequence[VideoRecord]) -> Dict[str, int]:
    """Totals reported as the channel analysis summary."""
    return {
        "total_videos": len(videos),
        "total_views": total_views(videos),
        "average_views": average_views(videos),
        "total_likes": sum(video.like_count or 0 for video in videos),
        "total_comments": sum(video.comment_count or 0 for video in videos),
    }


def engagement_analysis(videos: Sequence[VideoRecord]) -> Optional[Dict[str, Any]]:
    """
    View-count extremes and distribution buckets.

    The first video wins ties for most/least viewed. Buckets are
    cumulative thresholds (a 2M-view video counts in every "over" bucket).
    """
    if not videos:
        return None

    # max()/min() return the first extreme in input order
    most_viewed = max(videos, key=lambda video: video.view_count)
    least_viewed = min(videos, key=lambda video: video.view_count)

    return {
        "avg_views": average_views(videos),
        "most_viewed": most_viewed.model_dump(),
        "least_viewed": least_viewed.model_dump(),
        "view_distribution": {
            "over_1m": sum(1 for v in videos if v.view_count >= VIEWS_1M),
            "over_100k": sum(1 for v in videos if v.view_count >= VIEWS_100K),
            "over_10k": sum(1 for v in videos if v.view_count >= VIEWS_10K),
            "under_10k": sum(1 for v in videos if v.view_count < VIEWS_10K),
        },
    }


def subtitle_details(videos: Sequence[VideoRecord]) -> List[Dict[str, Any]]:
    """Per-video caption statistics for videos with usable captions."""
    details = []
    for video in videos:
        if not video.has_usable_transcript:
            continue
        word_count = len(video.transcript.split())
        details.append({
            "video_id": video.id,
            "title": video.title[:SUBTITLE_TITLE_PREVIEW_LENGTH] + "...",
            "transcript_length": len(video.transcript),
            "word_count": word_count,
            "estimated_reading_time": math.ceil(word_count / READING_WORDS_PER_MINUTE),
            "preview": video.transcript[:SUBTITLE_TEXT_PREVIEW_LENGTH] + "...",
        })
    return details


def _parse_date(value: str) -> Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (ValueError, AttributeError):
        return None
    # Compare everything as naive UTC
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def analyzed_period(videos: Sequence[VideoRecord]) -> Dict[str, Optional[str]]:
    """Oldest and newest publish dates among the analyzed videos."""
    dated = []
    for video in videos:
        parsed = _parse_date(video.published_at)
        if parsed is not None:
            dated.append((parsed, video.published_at))

    if not dated:
        return {"oldest_video": None, "newest_video": None}

    return {
        "oldest_video": min(dated, key=lambda item: item[0])[1],
        "newest_video": max(dated, key=lambda item: item[0])[1],
    }
