"""Item catalog domain service."""

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional

from stockledger.domain.consistency import ConsistencyMaintainer
from stockledger.domain.entities import (
    MANUAL_FACTOR,
    NO_ALT_UNIT,
    Item as ItemEntity,
    ItemStock,
)
from stockledger.domain.errors import NotFoundError, item_not_found
from stockledger.domain.matching import group_by_item_key, normalize_item_name
from stockledger.domain.reconciliation import item_stock
from stockledger.domain.validation import require_number, require_text

if TYPE_CHECKING:
    from stockledger.database.base import Database

logger = logging.getLogger(__name__)


def _default_text(value: Optional[str], default: str) -> str:
    if value is None or not value.strip():
        return default
    return value


class ItemService:
    """Service for managing catalog items and reporting their stock."""

    def __init__(self, db: "Database"):
        """Initialize item service.

        Args:
            db: Database instance
        """
        self.db = db
        self.consistency = ConsistencyMaintainer(db)

    def create_item(
        self,
        name: str,
        unit: str,
        alert_qty: Any,
        alt_unit: Optional[str] = NO_ALT_UNIT,
        factor: Optional[str] = MANUAL_FACTOR,
    ) -> ItemStock:
        """Create a catalog item.

        A new item has no history, so its stock is reported as zero. The
        ledger is not touched.

        Args:
            name: Item name (business key)
            unit: Primary unit label
            alert_qty: Low-stock threshold
            alt_unit: Alternate unit label, "-" for none
            factor: Numeric ratio as text, "Manual" or "-"

        Returns:
            The created item with zero stock

        Raises:
            ValidationError: If name or unit is blank or alert_qty is not a number
        """
        name = require_text(name, "name")
        unit = require_text(unit, "unit")
        threshold = require_number(alert_qty, "alert_qty")

        self._warn_on_duplicate_name(name)

        item_id = self.db.create_item(
            name=name,
            unit=unit,
            alert_qty=threshold,
            alt_unit=_default_text(alt_unit, NO_ALT_UNIT),
            factor=_default_text(factor, MANUAL_FACTOR),
        )
        logger.info("Created item %d ('%s')", item_id, name)
        return ItemStock(item=self.require_item(item_id), quantity=Decimal("0"), alt_quantity=Decimal("0"))

    def get_item(self, item_id: int) -> Optional[ItemEntity]:
        """Get item by ID.

        Args:
            item_id: Item ID

        Returns:
            Item entity or None if not found
        """
        return self.db.get_item(item_id)

    def require_item(self, item_id: int) -> ItemEntity:
        """Get item by ID or raise NotFoundError."""
        item = self.db.get_item(item_id)
        if item is None:
            raise NotFoundError(item_not_found(item_id))
        return item

    def find_items(self, name: str) -> list[ItemEntity]:
        """Find items matching a name (trimmed, case-insensitive, whole name)."""
        return self.db.find_items_by_name(name)

    def get_item_stock(self, item_id: int) -> ItemStock:
        """Get an item with its current stock.

        Raises:
            NotFoundError: If item doesn't exist
        """
        item = self.require_item(item_id)
        return item_stock(item, self.db.list_transactions(item_name=item.name))

    def list_items(self) -> list[ItemStock]:
        """List all items with stock derived from the ledger.

        The ledger is read once and indexed by normalized item name; each item
        is then reconciled independently. Output follows catalog order.

        Returns:
            List of items with quantity and alternate quantity
        """
        items = self.db.list_items()
        index = group_by_item_key(self.db.list_transactions())
        return [item_stock(item, index.get(normalize_item_name(item.name), [])) for item in items]

    def list_low_stock_items(self) -> list[ItemStock]:
        """List items whose quantity is at or below their alert threshold."""
        return [stock for stock in self.list_items() if stock.is_low_stock]

    def update_item(
        self,
        item_id: int,
        name: Optional[str] = None,
        unit: Optional[str] = None,
        alt_unit: Optional[str] = None,
        factor: Optional[str] = None,
        alert_qty: Any = None,
    ) -> ItemStock:
        """Update item fields, relinking transactions when the name changes.

        Args:
            item_id: Item ID to update
            name: Optional new name
            unit: Optional new primary unit
            alt_unit: Optional new alternate unit
            factor: Optional new factor
            alert_qty: Optional new low-stock threshold

        Returns:
            The updated item with its current stock

        Raises:
            NotFoundError: If item doesn't exist
            ValidationError: If a supplied field is blank or not a number
            CascadeFailure: If the item was renamed but its transactions were not
        """
        item = self.require_item(item_id)

        if name is not None:
            name = require_text(name, "name")
        if unit is not None:
            unit = require_text(unit, "unit")
        threshold = require_number(alert_qty, "alert_qty") if alert_qty is not None else None

        renamed = name is not None and name != item.name
        if renamed and normalize_item_name(name) != normalize_item_name(item.name):
            self._warn_on_duplicate_name(name)

        self.db.update_item(
            item_id=item_id,
            name=name,
            unit=unit,
            alt_unit=alt_unit,
            factor=factor,
            alert_qty=threshold,
        )
        logger.info("Updated item %d", item_id)

        if renamed:
            self.consistency.cascade_rename(self.require_item(item_id), old_name=item.name)

        return self.get_item_stock(item_id)

    def delete_item(self, item_id: int) -> None:
        """Delete an item and every transaction recorded under its name.

        Args:
            item_id: Item ID to delete

        Raises:
            NotFoundError: If item doesn't exist
            CascadeFailure: If the item was deleted but its transactions were not
        """
        item = self.require_item(item_id)
        self.consistency.delete_item(item)

    def _warn_on_duplicate_name(self, name: str) -> None:
        existing = self.db.find_items_by_name(name)
        if existing:
            logger.warning(
                "Item name '%s' collides with item(s) %s; they will share the same transactions",
                name,
                ", ".join(str(item.id) for item in existing),
            )
