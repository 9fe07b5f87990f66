"""Rounding used for every displayed calculator number."""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with ties going toward positive infinity.

    Python's built-in `round` uses banker's rounding (2.5 -> 2); calculator
    output instead matches the usual ``floor(x + 0.5)`` convention, so
    -47.5 rounds to -47 and 24.95 rounds to 25.0.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    return int(round_half_up(value))
