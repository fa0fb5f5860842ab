"""Number formatting shared by the statistics and the renderers."""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Rational
from typing import Union

Number = Union[int, float]


def _exact(value) -> Decimal:
    if isinstance(value, (int, float, Decimal)):
        return Decimal(value)
    if isinstance(value, Rational):
        return Decimal(value.numerator) / Decimal(value.denominator)
    return Decimal(float(value))


def to_fixed(value: Number, digits: int) -> str:
    """Format with a fixed number of decimals, rounding half up.

    Rounds the exact binary value of ``value``, so 1.005 -> '1.00' and
    0.125 -> '0.13'. Fractions are rounded from their exact value.
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")
    with localcontext() as ctx:
        ctx.prec = 200
        quantum = Decimal(1).scaleb(-digits)
        return f"{_exact(value).quantize(quantum, rounding=ROUND_HALF_UP):f}"


def round_to(value: Number, digits: int) -> float:
    """Round to ``digits`` decimals using to_fixed() semantics."""
    return float(to_fixed(value, digits))


def format_number(value: Number) -> str:
    """Shortest text for a number; integral floats drop the '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)
