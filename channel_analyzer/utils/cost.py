"""
Token and price estimate for one channel report call.
"""
import math
from typing import Iterable

from channel_analyzer.constants import (
    TOKENS_PER_CHARACTER,
    TOKEN_OVERHEAD,
    USD_PER_1K_TOKENS,
    KRW_PER_USD,
    USD_DECIMALS,
)
from channel_analyzer.models.analysis import CostEstimate, VideoRecord
from .numbers import round_half_up


def total_text_length(videos: Iterable[VideoRecord]) -> int:
    """Characters of title, description and transcript across all videos."""
    return sum(
        len(video.title) + len(video.description or "") + len(video.transcript or "")
        for video in videos
    )


def estimate_cost(videos: Iterable[VideoRecord]) -> CostEstimate:
    """
    Estimate token usage and price of a report call.

    An empty list is valid and yields the fixed overhead.

    Example:
        >>> estimate_cost([VideoRecord(title="ab")]).estimated_tokens
        1003
    """
    estimated_tokens = math.ceil(total_text_length(videos) * TOKENS_PER_CHARACTER) + TOKEN_OVERHEAD
    cost_usd = (estimated_tokens / 1000) * USD_PER_1K_TOKENS

    return CostEstimate(
        estimated_tokens=estimated_tokens,
        estimated_cost_usd=round_half_up(cost_usd, USD_DECIMALS),
        estimated_cost_krw=int(round_half_up(cost_usd * KRW_PER_USD)),
    )
