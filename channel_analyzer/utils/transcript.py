"""
Caption fallback for videos the scraper returned without subtitles.

Uses youtube-transcript-api. The library is synchronous, so each fetch runs
in a worker thread to keep the event loop free.
"""
import asyncio
import logging
from typing import List, Optional, Sequence

from youtube_transcript_api import YouTubeTranscriptApi, CouldNotRetrieveTranscript

from channel_analyzer.models.analysis import VideoRecord

logger = logging.getLogger(__name__)


def fetch_transcript(video_id: str, languages: Sequence[str]) -> Optional[str]:
    """
    Fetch the caption text of a video.

    Args:
        video_id: YouTube video ID
        languages: Preferred caption languages, in order

    Returns:
        Caption text joined with spaces, or None if unavailable
    """
    try:
        fetched = YouTubeTranscriptApi().fetch(video_id, languages=list(languages))
        text = " ".join(snippet.text for snippet in fetched).strip()
    except CouldNotRetrieveTranscript as e:
        logger.info(f"No captions for {video_id}: {type(e).__name__}")
        return None
    except Exception as e:
        # Network failures and unparseable caption bodies (e.g. empty XML)
        logger.warning(f"Caption fetch failed for {video_id}: {e}", exc_info=True)
        return None

    return text or None


async def fill_missing_transcripts(
    videos: Sequence[VideoRecord],
    languages: Sequence[str],
) -> List[VideoRecord]:
    """
    Return the videos with captions fetched for those lacking usable ones.

    Videos are processed one after another; records are copied, never mutated.
    """
    filled = []
    for video in videos:
        if video.has_usable_transcript or not video.id:
            filled.append(video)
            continue

        text = await asyncio.to_thread(fetch_transcript, video.id, languages)
        if text:
            logger.info(f"Caption fallback succeeded for {video.id} ({len(text)} chars)")
            filled.append(video.model_copy(update={"transcript": text}))
        else:
            filled.append(video)
    return filled
