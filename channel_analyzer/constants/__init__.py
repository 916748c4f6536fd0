"""
Application Constants Package.

This package centralizes all constants used throughout the application,
organized by domain/concern for better maintainability.

All constants are re-exported from this __init__.py for convenience.
You can import either from the main package or specific modules:

    from channel_analyzer.constants import ReportVariant, KEYWORD_TOP_N
    from channel_analyzer.constants.enums import ReportVariant
    from channel_analyzer.constants.cost import TOKEN_OVERHEAD
"""

# ============================================================================
# ENUMERATIONS
# ============================================================================

from .enums import (
    ReportVariant,
    AnalysisType,
)

# ============================================================================
# API & NETWORK
# ============================================================================

from .api import (
    DEFAULT_TIMEOUT_HTTPX,
    APIFY_RUN_TIMEOUT,
    APIFY_BASE_URL,
    APIFY_DEFAULT_ACTOR,
    DATA_SOURCE_NAME,
    API_VERSION,
)

# ============================================================================
# LLM CONFIGURATION
# ============================================================================

from .llm import (
    OPENAI_MODEL_FAST,
    LLM_TEMP_CHANNEL_REPORT,
    LLM_MAX_TOKENS_CHANNEL_REPORT,
)

# ============================================================================
# COST ESTIMATION
# ============================================================================

from .cost import (
    TOKENS_PER_CHARACTER,
    TOKEN_OVERHEAD,
    USD_PER_1K_TOKENS,
    KRW_PER_USD,
    USD_DECIMALS,
)

# ============================================================================
# CONTENT LIMITS
# ============================================================================

from .content_limits import (
    # Video fetch
    MAX_VIDEOS_MIN,
    MAX_VIDEOS_MAX,
    MAX_VIDEOS_DEFAULT,

    # Transcript
    TRANSCRIPT_MIN_VALID_LENGTH,
    TRANSCRIPT_KEYWORD_MIN_TEXT,
    SUBTITLE_TITLE_PREVIEW_LENGTH,
    SUBTITLE_TEXT_PREVIEW_LENGTH,
    READING_WORDS_PER_MINUTE,

    # Keywords
    KEYWORD_MIN_LENGTH,
    KEYWORD_TOP_N,
    KEYWORD_DEFAULT_SCRIPT_RANGES,

    # View buckets
    VIEWS_1M,
    VIEWS_100K,
    VIEWS_10K,
)

__all__ = [
    "ReportVariant",
    "AnalysisType",
    "DEFAULT_TIMEOUT_HTTPX",
    "APIFY_RUN_TIMEOUT",
    "APIFY_BASE_URL",
    "APIFY_DEFAULT_ACTOR",
    "DATA_SOURCE_NAME",
    "API_VERSION",
    "OPENAI_MODEL_FAST",
    "LLM_TEMP_CHANNEL_REPORT",
    "LLM_MAX_TOKENS_CHANNEL_REPORT",
    "TOKENS_PER_CHARACTER",
    "TOKEN_OVERHEAD",
    "USD_PER_1K_TOKENS",
    "KRW_PER_USD",
    "USD_DECIMALS",
    "MAX_VIDEOS_MIN",
    "MAX_VIDEOS_MAX",
    "MAX_VIDEOS_DEFAULT",
    "TRANSCRIPT_MIN_VALID_LENGTH",
    "TRANSCRIPT_KEYWORD_MIN_TEXT",
    "SUBTITLE_TITLE_PREVIEW_LENGTH",
    "SUBTITLE_TEXT_PREVIEW_LENGTH",
    "READING_WORDS_PER_MINUTE",
    "KEYWORD_MIN_LENGTH",
    "KEYWORD_TOP_N",
    "KEYWORD_DEFAULT_SCRIPT_RANGES",
    "VIEWS_1M",
    "VIEWS_100K",
    "VIEWS_10K",
]
