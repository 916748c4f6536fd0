"""
Prompts Package.

Centralized location for reusable prompt components and instructions.
The prompt builder composes these snippets into the final report prompts.
"""

from .common import (
    # Roles
    ANALYST_ROLE,
    SYSTEM_PROMPT_FREE_TEXT,
    SYSTEM_PROMPT_STRUCTURED,

    # Output format
    JSON_OUTPUT_STRICT,
    PLAIN_TEXT_OUTPUT,

    # Language
    LANGUAGE_INSTRUCTION_TEMPLATE,

    # Requirements
    REPORT_REQUIREMENTS,

    # Outlines / schemas
    FREE_TEXT_REPORT_OUTLINE,
    STRUCTURED_REPORT_SCHEMA,
)

__all__ = [
    "ANALYST_ROLE",
    "SYSTEM_PROMPT_FREE_TEXT",
    "SYSTEM_PROMPT_STRUCTURED",
    "JSON_OUTPUT_STRICT",
    "PLAIN_TEXT_OUTPUT",
    "LANGUAGE_INSTRUCTION_TEMPLATE",
    "REPORT_REQUIREMENTS",
    "FREE_TEXT_REPORT_OUTLINE",
    "STRUCTURED_REPORT_SCHEMA",
]
