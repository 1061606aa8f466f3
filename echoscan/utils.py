"""Module with project-wide utilities."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int) -> float:
    """
    Round a float to a number of decimal places, rounding ties away from zero.

    The exact binary value of the float is rounded, so `0.125` becomes `0.13`
    while `1.005` (stored as 1.00499...) becomes `1.0`.

    Args:
        value (float): Value to be rounded.
        digits (int): Number of decimal places to keep.

    Returns:
        float: The rounded value.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
