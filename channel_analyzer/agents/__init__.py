"""
Agents for YouTube channel analysis.

- analysis: prompt construction, LLM report generation and normalization
"""
from .analysis import ChannelAnalyzer, build_prompt, normalize_report

__all__ = [
    "ChannelAnalyzer",
    "build_prompt",
    "normalize_report",
]
