"""Number formatting for recommendation messages and score cards."""

from decimal import ROUND_HALF_UP, Decimal


def to_fixed(value: float, digits: int) -> str:
    """
    Format `value` with `digits` decimals, rounding halves away from zero.

    The exact binary value is rounded, so 250.5 -> "251" and 0.125 -> "0.13",
    unlike format(), which rounds halves to even.
    """
    quantum = Decimal(1).scaleb(-digits)
    return f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP):f}"
