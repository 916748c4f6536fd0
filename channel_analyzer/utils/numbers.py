"""
Number helpers shared by statistics and prompt rendering.
"""
import math
from typing import Optional


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round halves away from zero for non-negative values.

    Python's round() uses banker's rounding (round(58.5) == 58); reported
    statistics round 0.5 up.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def format_count(value: Optional[int], missing: str = "N/A") -> str:
    """Format a count with thousands separators, or ``missing`` when unknown."""
    if value is None:
        return missing
    return f"{value:,}"
