"""Numeric helpers."""

import math


def get_value_to_decimal(value: float = 0, decimal_points: int = 0) -> float:
    """Return value rounded to decimal_points places.

    Halves round toward positive infinity (2.5 -> 3, -2.5 -> -2), unlike the
    built-in round() which rounds halves to even. NaN and infinities are
    returned unchanged.
    """
    if not math.isfinite(value):
        return value
    factor = 10**decimal_points
    return math.floor(factor * value + 0.5) / factor
