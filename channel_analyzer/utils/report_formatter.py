"""
Utility to render an analysis report as Markdown.

Structured reports are rendered section by section; any field missing from
a section (the normalizer does not backfill fields inside a section the LLM
supplied) is simply skipped. Free-text reports are returned unchanged.
"""
from typing import Any, Dict, List

from channel_analyzer.models.analysis import AnalysisReport, FreeTextReport, StructuredReport


def _bullets(items: Any) -> List[str]:
    if not isinstance(items, list):
        return []
    return [f"- {item}" for item in items if item not in (None, "")]


def _list_block(title: str, items: Any) -> List[str]:
    lines = _bullets(items)
    if not lines:
        return []
    return [f"### {title}\n", *lines, ""]


def _text_block(title: str, text: Any) -> List[str]:
    if not text:
        return []
    return [f"### {title}\n", f"{text}\n"]


def _format_number(value: Any) -> str:
    return f"{value:,}" if isinstance(value, int) else str(value)


def _channel_overview(section: Dict[str, Any]) -> List[str]:
    lines = ["## Channel Overview\n"]
    if section.get("summary"):
        lines.append(f"{section['summary']}\n")

    metrics = section.get("key_metrics")
    if isinstance(metrics, dict):
        lines.append("### Key Metrics\n")
        if metrics.get("avg_views"):
            lines.append(f"- **Average views**: {_format_number(metrics['avg_views'])}")
        if metrics.get("total_views"):
            lines.append(f"- **Total views**: {_format_number(metrics['total_views'])}")
        if metrics.get("top_performing_video"):
            lines.append(f"- **Top performer**: {metrics['top_performing_video']}")
        if metrics.get("content_consistency"):
            lines.append(f"\n**Content consistency**\n{metrics['content_consistency']}\n")
    return lines


def _title_analysis(section: Dict[str, Any]) -> List[str]:
    lines = ["## Title Analysis\n"]
    lines += _list_block("Common Patterns", section.get("common_patterns"))
    lines += _list_block("Successful Title Formats", section.get("successful_title_formats"))

    keywords = section.get("keyword_usage")
    if isinstance(keywords, list) and keywords:
        lines.append("### Keyword Usage\n")
        lines.append(", ".join(f"`{k}`" for k in keywords) + "\n")

    lines += _text_block("Title Length", section.get("title_length_analysis"))
    lines += _list_block("Emotional Triggers", section.get("emotional_triggers"))
    return lines


def _performers(title: str, performers: Any, note_key: str) -> List[str]:
    if not isinstance(performers, list) or not performers:
        return []
    lines = [f"### {title}\n"]
    for entry in performers:
        if not isinstance(entry, dict):
            lines.append(f"- {entry}")
            continue
        views = entry.get("views")
        views_text = f" ({_format_number(views)} views)" if views else ""
        lines.append(f"- **{entry.get('title', '')}**{views_text}")
        if entry.get(note_key):
            lines.append(f"  - {entry[note_key]}")
    lines.append("")
    return lines


def _performance_analysis(section: Dict[str, Any]) -> List[str]:
    lines = ["## Performance Analysis\n"]
    lines += _performers("High Performers", section.get("high_performers"), "success_factors")
    lines += _performers("Low Performers", section.get("low_performers"), "improvement_suggestions")
    lines += _text_block("Insights", section.get("performance_insights"))
    return lines


def _content_strategy(section: Dict[str, Any]) -> List[str]:
    lines = ["## Content Strategy\n"]
    lines += _list_block("Trending Topics", section.get("trending_topics"))
    lines += _list_block("Content Gaps", section.get("content_gaps"))
    lines += _list_block("Optimization Recommendations", section.get("optimization_recommendations"))
    lines += _list_block("Future Content Ideas", section.get("future_content_ideas"))
    return lines


def _executive_summary(section: Dict[str, Any]) -> List[str]:
    lines = ["## Executive Summary\n"]
    lines += _list_block("Key Findings", section.get("key_findings"))
    lines += _list_block("Immediate Actions", section.get("immediate_actions"))
    lines += _list_block("Long-term Strategies", section.get("long_term_strategies"))
    lines += _list_block("Expected Outcomes", section.get("expected_outcomes"))
    return lines


def generate_markdown_report(report: AnalysisReport) -> str:
    """
    Render a report as Markdown.

    Args:
        report: Normalized structured or free-text report

    Returns:
        Markdown string
    """
    if isinstance(report, FreeTextReport):
        return report.report_text

    if not isinstance(report, StructuredReport):
        raise TypeError(f"Unsupported report type: {type(report).__name__}")

    sections = ["# AI Analysis Report\n"]
    sections += _channel_overview(report.channel_overview)
    sections += _title_analysis(report.title_analysis)
    sections += _performance_analysis(report.performance_analysis)
    sections += _content_strategy(report.content_strategy_report)
    sections += _executive_summary(report.executive_summary)

    return "\n".join(sections)
