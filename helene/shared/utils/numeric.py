"""Numeric helpers shared by the scoring services.

Scores shown to users and clinicians must be reproducible to the digit, so
rounding is always half-up (2.45 -> 2.5), never Python's banker's rounding.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Union

Number = Union[int, float]


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round half away from zero at the given number of decimals."""
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def round_to_int(value: float) -> int:
    """Half-up rounding to the nearest integer."""
    return int(round_half_up(value, 0))


def clamp(value: Number, low: Number, high: Number) -> Number:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def mean(values: Iterable[Number]) -> float:
    """Arithmetic mean, 0.0 for an empty iterable."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def coerce_number(value: object) -> Optional[float]:
    """Best-effort conversion of a user supplied value to a number.

    Returns None for absent or unparseable values. Booleans are rejected
    since they never represent a scale reading.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number != number:  # NaN
        return None
    return number
