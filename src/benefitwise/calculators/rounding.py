"""Currency rounding helpers (half-up, never banker's rounding)."""

from __future__ import annotations

import math


def round_dollars(value: float) -> int:
    """Round to whole dollars, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


def round_cents(value: float) -> float:
    return math.floor(value * 100 + 0.5) / 100
