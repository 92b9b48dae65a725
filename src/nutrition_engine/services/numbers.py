"""Numeric coercion helpers shared by the scoring services."""

import math


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves moving away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def to_float(value: object) -> float:
    """Coerce a loosely typed nutriment value, treating junk as 0.0.

    Non-finite values (NaN, infinities, overflowing literals) count as junk.
    """
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        return 0.0
    try:
        result = float(value)
    except (ValueError, OverflowError):
        return 0.0
    return result if math.isfinite(result) else 0.0
