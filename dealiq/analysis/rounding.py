"""Rounding used for every reported figure."""

from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` places with exact halves going up (2.5 -> 3, -2.5 -> -2)."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale
