"""Math helpers: half-up rounding, non-raising ceil/floor and lenient numeric field access. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any


def round_half_up(value: float) -> float:
    """Round to the nearest integer, .5 going up (2.5 → 3, -2.5 → -2).

    Non-finite values pass through unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def ceil_finite(value: float) -> float:
    """math.ceil that leaves inf/nan untouched instead of raising."""
    if not math.isfinite(value):
        return value
    return math.ceil(value)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def num(record: Mapping[str, Any], key: str, fallback: float = 0) -> float:
    """Numeric field or ``fallback`` when the key is missing or not a number."""
    value = record.get(key)
    return value if is_number(value) else fallback


def truthy_num(value: Any) -> float:
    """Treat None, 0 and non-numbers alike as 0."""
    return value if is_number(value) and value else 0


def floor_finite(value: float) -> float:
    """math.floor that leaves inf/nan untouched instead of raising."""
    if not math.isfinite(value):
        return value
    return math.floor(value)


def safe_divide(numerator: float, denominator: float) -> float:
    """Division that yields ±inf / nan on a zero denominator instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return float("nan")
        return math.copysign(math.inf, numerator)
    return numerator / denominator
