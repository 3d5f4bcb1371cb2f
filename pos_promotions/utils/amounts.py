# pos_promotions/utils/amounts.py
from decimal import Decimal, InvalidOperation, ROUND_FLOOR, ROUND_HALF_UP
from typing import Any, Optional

WHOLE_UNIT = Decimal("1")
ZERO = Decimal("0")


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Convert int/float/str/Decimal input into a Decimal.
    Floats go through str() so 99.99 stays 99.99 instead of its binary expansion.
    Returns None for None.
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("amount must be int | float | str | Decimal")
    if isinstance(value, (int, float, str)):
        try:
            return Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value!r}")
    raise TypeError("amount must be int | float | str | Decimal")


def is_configured(value: Any) -> bool:
    """Absent and zero both count as "not configured"."""
    amount = to_decimal(value)
    return amount is not None and amount != ZERO


def round_half_up(amount: Decimal) -> Decimal:
    """Round to the nearest whole currency unit, halves away from zero."""
    return amount.quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP)


def round_down(amount: Decimal) -> Decimal:
    return amount.quantize(WHOLE_UNIT, rounding=ROUND_FLOOR)


def format_amount(value: Any) -> str:
    """
    Render a number for customer-facing text: 10 -> '10', 10.50 -> '10.5',
    1000.0 -> '1000'. Never uses exponent notation.
    """
    amount = to_decimal(value)
    if amount is None:
        return ""
    if amount == amount.to_integral_value():
        return str(amount.quantize(WHOLE_UNIT))
    return format(amount.normalize(), "f")
