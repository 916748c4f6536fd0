"""
Enumeration classes for the application.

All enum types used throughout the application for type safety and validation.
"""

from enum import Enum


class ReportVariant(str, Enum):
    """
    Shape of the report requested from the LLM.

    - FREE_TEXT: A single readable text report, returned verbatim
    - STRUCTURED: A JSON object with five fixed report sections
    """
    FREE_TEXT = "free_text"
    STRUCTURED = "structured"

    @property
    def description(self) -> str:
        """Returns human-readable description."""
        descriptions = {
            self.FREE_TEXT: "Plain-text report (7-part outline)",
            self.STRUCTURED: "Structured JSON report (5 sections)"
        }
        return descriptions[self]


class AnalysisType(str, Enum):
    """
    Kind of analysis reported in the response meta block.

    - AI_COMPREHENSIVE: Direct AI analysis of supplied channel data
    - COMPREHENSIVE: URL-based statistics without the AI report
    - COMPREHENSIVE_WITH_AI: URL-based statistics plus the AI report
    """
    AI_COMPREHENSIVE = "ai_comprehensive"
    COMPREHENSIVE = "comprehensive"
    COMPREHENSIVE_WITH_AI = "comprehensive_with_ai"
