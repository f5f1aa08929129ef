"""Quantity parsing utilities."""

from decimal import Decimal, InvalidOperation, getcontext
import re
from typing import Any, Optional

# Leading number only, so decorated values like "50 box" still parse.
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def _within_context(number: Decimal) -> bool:
    """Check that ``number`` fits the exponent range of the decimal context."""
    if not number:
        return True
    context = getcontext()
    return context.Emin <= number.adjusted() <= context.Emax


def parse_leading_number(value: Any) -> Optional[Decimal]:
    """Extract the leading numeric portion of a value.

    Handles various inputs:
    - 50, 12.5, Decimal("3")
    - "50"
    - "50 box"
    - "  -2.5kg"
    - "1e3"

    Numbers whose exponent lies outside the decimal context ("1e1000000")
    are treated as carrying no number.

    Args:
        value: Number, numeric-bearing text, or None

    Returns:
        Decimal value, or None if the value carries no number
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        number = value if value.is_finite() else None
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        number = Decimal(str(value))
    else:
        match = _LEADING_NUMBER.match(str(value))
        if match is None:
            return None
        try:
            number = Decimal(match.group(1))
        except InvalidOperation:
            return None

    if number is None or not _within_context(number):
        return None
    return number


def parse_quantity(value: Any) -> Decimal:
    """Coerce a value to a quantity, degrading to zero.

    Never raises: anything that yields no valid number becomes 0.
    """
    number = parse_leading_number(value)
    if number is None:
        return Decimal("0")
    return number


def parse_factor(factor: Any) -> Optional[Decimal]:
    """Parse an item conversion factor.

    Args:
        factor: Factor text such as "50", "Manual" or "-"

    Returns:
        Numeric ratio, or None when the factor carries no fixed ratio
    """
    return parse_leading_number(factor)


def format_quantity(quantity: Decimal) -> str:
    """Render a quantity as plain text without exponent or trailing zeros."""
    if quantity == 0:
        return "0"
    return format(quantity.normalize(), "f")
