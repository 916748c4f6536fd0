"""
Analysis agents - prompt construction, LLM report generation and normalization.
"""
from .prompt_builder import build_prompt, system_prompt_for, split_performers
from .report_normalizer import (
    normalize_report,
    normalize_structured,
    normalize_free_text,
    REPORT_SECTIONS,
    PLACEHOLDER,
)
from .channel_report import ChannelAnalyzer

__all__ = [
    "build_prompt",
    "system_prompt_for",
    "split_performers",
    "normalize_report",
    "normalize_structured",
    "normalize_free_text",
    "REPORT_SECTIONS",
    "PLACEHOLDER",
    "ChannelAnalyzer",
]
