"""Decimal rounding shared by every derived score."""

import math


def round_to(value: float, decimals: int) -> float:
    """Round half up to a fixed number of decimal places.

    Halves round toward positive infinity (2.5 -> 3, -2.5 -> -2), unlike
    the built-in round(), which rounds halves to even.

    Args:
        value: Number to round.
        decimals: Number of decimal places (>= 0).

    Returns:
        Rounded value.

    Raises:
        ValueError: If decimals is negative.
    """
    if decimals < 0:
        msg = f"decimals must be >= 0, got {decimals}"
        raise ValueError(msg)
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor
