"""
Content and Size Limit Constants.

Video counts, transcript thresholds and keyword limits.
"""

# ============================================================================
# VIDEO FETCH
# ============================================================================

MAX_VIDEOS_MIN = 1
"""Smallest number of videos a caller may request."""

MAX_VIDEOS_MAX = 50
"""Largest number of videos a caller may request."""

MAX_VIDEOS_DEFAULT = 5
"""Number of videos fetched when the caller does not say."""


# ============================================================================
# TRANSCRIPT PROCESSING
# ============================================================================

TRANSCRIPT_MIN_VALID_LENGTH = 100
"""A transcript must be longer than this to count as usable captions."""

TRANSCRIPT_KEYWORD_MIN_TEXT = 500
"""Joined transcript text must exceed this before keyword frequencies are computed."""

SUBTITLE_TITLE_PREVIEW_LENGTH = 50
"""Characters of the title shown in subtitle details."""

SUBTITLE_TEXT_PREVIEW_LENGTH = 200
"""Characters of the transcript shown in subtitle details."""

READING_WORDS_PER_MINUTE = 200
"""Reading speed used for the estimated reading time."""


# ============================================================================
# KEYWORD EXTRACTION
# ============================================================================

KEYWORD_MIN_LENGTH = 3
"""Minimum word length for keyword extraction."""

KEYWORD_TOP_N = 20
"""Number of keywords returned."""

KEYWORD_DEFAULT_SCRIPT_RANGES = "가-힣"
"""Native-script character ranges kept next to ASCII word characters (Hangul syllables)."""


# ============================================================================
# VIEW DISTRIBUTION BUCKETS
# ============================================================================

VIEWS_1M = 1_000_000
VIEWS_100K = 100_000
VIEWS_10K = 10_000
