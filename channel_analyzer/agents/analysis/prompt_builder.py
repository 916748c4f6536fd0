"""
Prompt construction for channel reports.

Renders channel metadata and the video list into a bounded prompt. Two
variants exist:
- free_text: asks for a seven-part plain-text report
- structured: adds high/low performer lists and asks for a JSON object
  with the five report sections

The output depends only on the inputs (no timestamps, no randomness), so
identical inputs give byte-identical prompts.
"""
import math
from typing import List, Sequence

from ...constants import ReportVariant
from ...models.analysis import ChannelInfo, VideoRecord
from ...prompts import (
    SYSTEM_PROMPT_FREE_TEXT,
    SYSTEM_PROMPT_STRUCTURED,
    ANALYST_ROLE,
    JSON_OUTPUT_STRICT,
    PLAIN_TEXT_OUTPUT,
    LANGUAGE_INSTRUCTION_TEMPLATE,
    REPORT_REQUIREMENTS,
    FREE_TEXT_REPORT_OUTLINE,
    STRUCTURED_REPORT_SCHEMA,
)
from ...utils.engagement import average_views, total_views
from ...utils.numbers import format_count

SYSTEM_PROMPTS = {
    ReportVariant.FREE_TEXT: SYSTEM_PROMPT_FREE_TEXT,
    ReportVariant.STRUCTURED: SYSTEM_PROMPT_STRUCTURED,
}

# ============================================================================
# SECTIONS
# ============================================================================


def _render_header(channel: ChannelInfo, videos: Sequence[VideoRecord]) -> str:
    return f"""**Channel information:**
- Channel name: {channel.name}
- Subscribers: {format_count(channel.subscriber_count)}
- Channel video count: {format_count(channel.video_count)}
- Analyzed videos: {len(videos)}
- Total views: {total_views(videos):,}
- Average views: {average_views(videos):,}"""


def _render_video(index: int, video: VideoRecord) -> str:
    return f"""{index}. "{video.title}"
   Views: {video.view_count:,}
   Published: {video.published_at}"""


def _render_video_list(videos: Sequence[VideoRecord]) -> str:
    return "\n".join(_render_video(i, video) for i, video in enumerate(videos, start=1))


def split_performers(videos: Sequence[VideoRecord]) -> tuple[List[VideoRecord], List[VideoRecord]]:
    """
    Top and bottom thirds by view count.

    Videos are sorted by descending views (stable, so ties keep input
    order); each third holds ceil(n / 3) videos. Both lists keep the
    sorted order.
    """
    ranked = sorted(videos, key=lambda video: video.view_count, reverse=True)
    size = math.ceil(len(ranked) / 3)
    if size == 0:
        return [], []
    return ranked[:size], ranked[-size:]


def _render_performers(videos: Sequence[VideoRecord]) -> str:
    high, low = split_performers(videos)
    high_lines = "\n".join(f'- "{v.title}" ({v.view_count:,} views)' for v in high)
    low_lines = "\n".join(f'- "{v.title}" ({v.view_count:,} views)' for v in low)
    return f"""**High performers (top third by views):**
{high_lines}

**Low performers (bottom third by views):**
{low_lines}"""


# ============================================================================
# PUBLIC API
# ============================================================================


def build_prompt(
    channel: ChannelInfo,
    videos: Sequence[VideoRecord],
    variant: ReportVariant = ReportVariant.FREE_TEXT,
    language: str = "Korean",
) -> str:
    """
    Build the user prompt for a channel report.

    Callers must guard against an empty video list; given one, this still
    returns a prompt listing zero videos.

    Args:
        channel: Channel metadata
        videos: Canonical video records, rendered in input order
        variant: Which report shape to request
        language: Language the report should be written in

    Returns:
        Prompt string
    """
    variant = ReportVariant(variant)
    language_block = LANGUAGE_INSTRUCTION_TEMPLATE.format(language=language)

    parts = [
        f"{ANALYST_ROLE} Analyze the channel data below.",
        _render_header(channel, videos),
        f"**All analyzed videos:**\n{_render_video_list(videos)}",
    ]

    if variant is ReportVariant.STRUCTURED:
        parts.append(_render_performers(videos))
        parts.append(
            "Write a data-driven analysis report as a JSON object with exactly "
            "this structure (values shown are placeholders):\n"
            f"{STRUCTURED_REPORT_SCHEMA}"
        )
        parts.append(JSON_OUTPUT_STRICT.strip())
    else:
        parts.append(
            "Write the analysis report as plain text following this outline:\n\n"
            f"{FREE_TEXT_REPORT_OUTLINE}"
        )
        parts.append(PLAIN_TEXT_OUTPUT.strip())

    parts.append(REPORT_REQUIREMENTS.strip())
    parts.append(language_block.strip())

    return "\n\n".join(parts)


def system_prompt_for(variant: ReportVariant) -> str:
    """System message sent with the prompt for a variant."""
    return SYSTEM_PROMPTS[ReportVariant(variant)]
