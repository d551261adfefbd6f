"""Decimal helpers for currency amounts."""

from decimal import ROUND_HALF_UP, Decimal

ZERO = Decimal("0")
CENT = Decimal("0.01")


def to_money(value: object) -> Decimal:
    """Normalize a numeric value to ``Decimal`` without float artefacts.

    - Accepts None, int, str, float, Decimal
    - Floats go through ``str()`` so ``0.1`` stays ``Decimal("0.1")``
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a currency amount")
    if isinstance(value, (int, str)):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    raise TypeError(f"Cannot convert {type(value).__name__} to a currency amount")


def quantize(value: Decimal, quantum: Decimal = CENT) -> Decimal:
    """Round half-up to the currency quantum for display."""
    return value.quantize(quantum, rounding=ROUND_HALF_UP)
