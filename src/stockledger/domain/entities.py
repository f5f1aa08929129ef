"""Domain model entities for stockledger.

These are pure data classes representing business concepts, independent of
database schema. Items and transactions are linked only by the transaction's
free-text ``item_name``; there is no foreign key between them.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from stockledger.utils.quantity_parser import parse_factor

NO_ALT_UNIT = "-"
MANUAL_FACTOR = "Manual"
NO_FACTOR = "-"


class MovementType(str, Enum):
    """Direction of a stock movement."""

    IN = "IN"
    OUT = "OUT"

    @classmethod
    def normalize(cls, value: Any) -> "MovementType":
        """Normalize stored type text, defaulting to IN.

        Case and surrounding whitespace are ignored. Missing or unrecognized
        values are treated as IN.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.IN
        text = str(value).strip().upper()
        if text == cls.OUT.value:
            return cls.OUT
        return cls.IN

    @property
    def sign(self) -> int:
        return 1 if self is MovementType.IN else -1


@dataclass(frozen=True)
class Item:
    """Catalog item domain entity."""

    id: int
    name: str
    unit: str
    alt_unit: str
    factor: str
    alert_qty: Decimal
    created_at: datetime

    @property
    def conversion_factor(self) -> Optional[Decimal]:
        """Numeric primary-to-alternate ratio, or None for "Manual"/"-"."""
        return parse_factor(self.factor)

    @property
    def has_alt_unit(self) -> bool:
        return bool(self.alt_unit) and self.alt_unit.strip() != NO_ALT_UNIT


@dataclass(frozen=True)
class Transaction:
    """Stock movement domain entity."""

    id: int
    date: str
    type: MovementType
    item_name: str
    quantity: Decimal
    alt_qty: str
    unit: str
    alt_unit: str
    rate: Decimal
    remarks: str
    created_at: datetime


@dataclass(frozen=True)
class StockLevel:
    """Derived primary and alternate quantities for one item."""

    quantity: Decimal
    alt_quantity: Decimal


@dataclass(frozen=True)
class ItemStock:
    """Catalog item merged with its reconciled stock level."""

    item: Item
    quantity: Decimal
    alt_quantity: Decimal

    @property
    def is_low_stock(self) -> bool:
        """True when stock is at or below the item's alert threshold."""
        return self.quantity <= self.item.alert_qty
