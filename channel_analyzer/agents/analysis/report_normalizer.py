"""
Normalization of raw LLM output into a complete report.

Structured reports are merged over placeholder defaults one level deep:
a section present in the LLM output replaces its default as a whole, and
missing fields inside a present section are not backfilled. Only absent
(or non-object) sections fall back to the full placeholder section.
"""
import copy
import json
import logging
import re
from typing import Any, Dict, List, Tuple

from ...constants import ReportVariant
from ...models.analysis import AnalysisReport, FreeTextReport, StructuredReport
from ...utils.api_helpers import EmptyReportError, MalformedReportError

logger = logging.getLogger(__name__)

PLACEHOLDER = "Insufficient data"
"""Sentinel used for every field the LLM did not provide."""

# ============================================================================
# DEFAULTS
# ============================================================================

REPORT_SECTIONS: List[Tuple[str, Dict[str, Any]]] = [
    ("channel_overview", {
        "summary": PLACEHOLDER,
        "key_metrics": {
            "avg_views": 0,
            "total_views": 0,
            "top_performing_video": PLACEHOLDER,
            "content_consistency": PLACEHOLDER,
        },
    }),
    ("title_analysis", {
        "common_patterns": [PLACEHOLDER],
        "successful_title_formats": [PLACEHOLDER],
        "keyword_usage": [PLACEHOLDER],
        "title_length_analysis": PLACEHOLDER,
        "emotional_triggers": [PLACEHOLDER],
    }),
    ("performance_analysis", {
        "high_performers": [
            {"title": PLACEHOLDER, "views": 0, "success_factors": PLACEHOLDER},
        ],
        "low_performers": [
            {"title": PLACEHOLDER, "views": 0, "improvement_suggestions": PLACEHOLDER},
        ],
        "performance_insights": PLACEHOLDER,
    }),
    ("content_strategy_report", {
        "trending_topics": [PLACEHOLDER],
        "content_gaps": [PLACEHOLDER],
        "optimization_recommendations": [PLACEHOLDER],
        "future_content_ideas": [PLACEHOLDER],
    }),
    ("executive_summary", {
        "key_findings": [PLACEHOLDER],
        "immediate_actions": [PLACEHOLDER],
        "long_term_strategies": [PLACEHOLDER],
        "expected_outcomes": [PLACEHOLDER],
    }),
]

_CODE_FENCE = re.compile(r"^\s*```(?:json)?\s*(.*?)\s*```\s*$", re.DOTALL)


def default_section(name: str) -> Dict[str, Any]:
    """Fresh copy of the placeholder default for a section."""
    for section_name, default in REPORT_SECTIONS:
        if section_name == name:
            return copy.deepcopy(default)
    raise KeyError(name)


# ============================================================================
# NORMALIZERS
# ============================================================================


def _strip_code_fence(raw_text: str) -> str:
    match = _CODE_FENCE.match(raw_text)
    return match.group(1) if match else raw_text


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} is not allowed")


def normalize_structured(raw_text: str) -> StructuredReport:
    """
    Parse a JSON report and fill absent sections with placeholders.

    Raises:
        MalformedReportError: If the text is not a JSON object
    """
    try:
        parsed = json.loads(_strip_code_fence(raw_text or ""), parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError, or a NaN/Infinity literal that JSON responses cannot carry
        logger.warning(f"LLM response is not valid JSON: {e}")
        raise MalformedReportError(f"LLM response was not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise MalformedReportError(
            f"LLM response was JSON but not an object (got {type(parsed).__name__})"
        )

    sections = {}
    for name, default in REPORT_SECTIONS:
        value = parsed.get(name)
        if isinstance(value, dict):
            sections[name] = value
        else:
            sections[name] = copy.deepcopy(default)

    defaulted = [name for name, _ in REPORT_SECTIONS if sections[name] is not parsed.get(name)]
    if defaulted:
        logger.info(f"Report sections filled with placeholders: {', '.join(defaulted)}")

    return StructuredReport(**sections)


def normalize_free_text(raw_text: str) -> FreeTextReport:
    """
    Wrap a plain-text report verbatim.

    Raises:
        EmptyReportError: If the text is empty or whitespace only
    """
    if not raw_text or not raw_text.strip():
        raise EmptyReportError("LLM returned an empty report")
    return FreeTextReport(report_text=raw_text)


def normalize_report(raw_text: str, variant: ReportVariant) -> AnalysisReport:
    """Normalize raw LLM output according to the requested variant."""
    if ReportVariant(variant) is ReportVariant.STRUCTURED:
        return normalize_structured(raw_text)
    return normalize_free_text(raw_text)
