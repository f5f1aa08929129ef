"""Field validation shared by the catalog and ledger services."""

from decimal import Decimal
from typing import Any

from stockledger.domain.errors import (
    ValidationError,
    missing_field,
    negative_quantity,
    not_a_number,
    number_too_large,
    too_many_decimals,
)
from stockledger.utils.quantity_parser import parse_leading_number

# Quantities and thresholds are stored as NUMERIC(14, 4).
QUANTITY_SCALE = 4
QUANTITY_INTEGER_DIGITS = 10


def require_text(value: Any, field_name: str) -> str:
    """Return ``value`` as text, rejecting None and blank strings."""
    if value is None or not str(value).strip():
        raise ValidationError(missing_field(field_name))
    return str(value)


def require_number(value: Any, field_name: str) -> Decimal:
    """Return the number carried by ``value``.

    Decorated values ("12 kg") are accepted; values with no number are not.
    The number must be storable without rounding: at most
    ``QUANTITY_SCALE`` decimal places and ``QUANTITY_INTEGER_DIGITS`` integer
    digits.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(missing_field(field_name))
    number = parse_leading_number(value)
    if number is None:
        raise ValidationError(not_a_number(field_name, value))
    if not number:
        return number
    if number.adjusted() >= QUANTITY_INTEGER_DIGITS:
        raise ValidationError(number_too_large(field_name, value, QUANTITY_INTEGER_DIGITS))
    if number.normalize().as_tuple().exponent < -QUANTITY_SCALE:
        raise ValidationError(too_many_decimals(field_name, value, QUANTITY_SCALE))
    return number


def require_quantity(value: Any) -> Decimal:
    """Return a transaction quantity: a non-negative number."""
    quantity = require_number(value, "quantity")
    if quantity < 0:
        raise ValidationError(negative_quantity(value))
    return quantity
