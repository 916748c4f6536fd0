"""
Cost Estimation Constants.

Token heuristics and pricing used to estimate the price of one report call.
"""

# ============================================================================
# TOKEN HEURISTICS
# ============================================================================

TOKENS_PER_CHARACTER = 1.5
"""Rough token count per input character (Hangul ~1.5 tokens per syllable)."""

TOKEN_OVERHEAD = 1000
"""Fixed tokens for prompt scaffolding and the expected response."""


# ============================================================================
# PRICING
# ============================================================================

USD_PER_1K_TOKENS = 0.045
"""Blended input/output price per 1K tokens."""

KRW_PER_USD = 1300
"""Exchange rate applied to the USD estimate."""

USD_DECIMALS = 3
"""Decimal places kept in the USD estimate."""
