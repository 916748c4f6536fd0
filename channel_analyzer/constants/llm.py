"""
LLM (Large Language Model) Configuration Constants.

Model names, temperature settings, and other LLM-specific parameters.
"""

# ============================================================================
# MODEL NAMES
# ============================================================================

OPENAI_MODEL_FAST = "gpt-4o-mini"
"""Fast, cost-effective model used for channel reports."""


# ============================================================================
# GENERATION SETTINGS
# ============================================================================
# Lower temperature = more deterministic/focused
# Higher temperature = more creative/varied

LLM_TEMP_CHANNEL_REPORT = 0.7
"""Temperature for channel report generation."""

LLM_MAX_TOKENS_CHANNEL_REPORT = 4000
"""Maximum output tokens for a channel report."""
