"""
Keyword frequency helpers.

Words are lowercased, split on whitespace and stripped of every character
that is neither an ASCII word character nor part of the configured native
script (Hangul syllables by default). Short tokens are dropped.
"""
import re
from collections import Counter
from functools import lru_cache
from typing import Dict, Iterable, List

from channel_analyzer.constants import (
    KEYWORD_MIN_LENGTH,
    KEYWORD_TOP_N,
    KEYWORD_DEFAULT_SCRIPT_RANGES,
)
from channel_analyzer.models.analysis import VideoRecord


@lru_cache(maxsize=8)
def _strip_pattern(script_ranges: str) -> re.Pattern:
    return re.compile(rf"[^\w{script_ranges}]", re.ASCII)


def tokenize(text: str, script_ranges: str = KEYWORD_DEFAULT_SCRIPT_RANGES) -> List[str]:
    """Split text into cleaned, lowercased tokens of at least KEYWORD_MIN_LENGTH chars."""
    pattern = _strip_pattern(script_ranges)
    words = (pattern.sub("", word) for word in text.lower().split())
    return [word for word in words if len(word) >= KEYWORD_MIN_LENGTH]


def _ranked(words: List[str]) -> List[tuple]:
    # Counter keeps first-occurrence order and sorted() is stable
    return sorted(Counter(words).items(), key=lambda item: item[1], reverse=True)


def extract_keywords(
    videos: Iterable[VideoRecord],
    limit: int = KEYWORD_TOP_N,
    script_ranges: str = KEYWORD_DEFAULT_SCRIPT_RANGES,
) -> List[str]:
    """
    Most frequent words across titles, descriptions and transcripts.

    Args:
        videos: Videos to scan
        limit: Maximum number of keywords returned
        script_ranges: Regex character ranges of the native script to keep

    Returns:
        Keywords ordered by descending frequency, ties in first-seen order
    """
    blob = " ".join(
        f"{video.title} {video.description or ''} {video.transcript or ''}"
        for video in videos
    )
    words = tokenize(blob, script_ranges)
    return [word for word, _ in _ranked(words)[:limit]]


def keyword_frequencies(
    text: str,
    limit: int = KEYWORD_TOP_N,
    script_ranges: str = KEYWORD_DEFAULT_SCRIPT_RANGES,
) -> List[Dict[str, object]]:
    """
    Top keywords of a text with counts and share of all kept tokens.

    Returns:
        List of {"word": str, "count": int, "percentage": "12.34"}
    """
    words = tokenize(text, script_ranges)
    if not words:
        return []

    total = len(words)
    return [
        {
            "word": word,
            "count": count,
            "percentage": f"{count / total * 100:.2f}",
        }
        for word, count in _ranked(words)[:limit]
    ]
