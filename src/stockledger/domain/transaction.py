"""Transaction ledger domain service."""

import logging
from typing import TYPE_CHECKING, Any, Optional

from stockledger.domain.entities import (
    Item as ItemEntity,
    MovementType,
    Transaction as TransactionEntity,
)
from stockledger.domain.errors import NotFoundError, transaction_not_found
from stockledger.domain.reconciliation import fill_alt_qty
from stockledger.domain.validation import require_quantity, require_text
from stockledger.utils.quantity_parser import parse_quantity

if TYPE_CHECKING:
    from stockledger.database.base import Database

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for recording and maintaining stock movements."""

    def __init__(self, db: "Database"):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        date: str,
        item_name: str,
        quantity: Any,
        type: Any = MovementType.IN,
        alt_qty: Any = None,
        unit: str = "",
        alt_unit: str = "",
        rate: Any = None,
        remarks: str = "",
    ) -> TransactionEntity:
        """Record a stock movement.

        The item name is not checked against the catalog; a transaction for an
        unknown item is kept and simply counts towards no item's stock.

        Args:
            date: Movement date (YYYY-MM-DD)
            item_name: Name of the item moved
            quantity: Magnitude in the primary unit (non-negative)
            type: IN or OUT; anything else is recorded as IN
            alt_qty: Magnitude in the alternate unit. If missing or zero it is
                derived from the item's numeric factor
            unit: Primary unit label
            alt_unit: Alternate unit label
            rate: Purchase price
            remarks: Free-text remarks

        Returns:
            The stored transaction

        Raises:
            ValidationError: If date or item_name is blank or quantity is invalid
        """
        date = require_text(date, "date")
        item_name = require_text(item_name, "item_name")
        amount = require_quantity(quantity)

        transaction_id = self.db.create_transaction(
            date=date,
            type=MovementType.normalize(type).value,
            item_name=item_name,
            quantity=amount,
            alt_qty=fill_alt_qty(alt_qty, amount, self._find_item(item_name)),
            unit=unit or "",
            alt_unit=alt_unit or "",
            rate=parse_quantity(rate),
            remarks=remarks or "",
        )
        logger.info("Recorded transaction %d for '%s'", transaction_id, item_name)
        return self.require_transaction(transaction_id)

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> TransactionEntity:
        """Get transaction by ID or raise NotFoundError."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def update_transaction(
        self,
        transaction_id: int,
        date: Optional[str] = None,
        item_name: Optional[str] = None,
        quantity: Any = None,
        type: Any = None,
        alt_qty: Any = None,
        unit: Optional[str] = None,
        alt_unit: Optional[str] = None,
        rate: Any = None,
        remarks: Optional[str] = None,
    ) -> TransactionEntity:
        """Update transaction fields.

        The alternate quantity fill is applied again to the merged record. When
        quantity or item changes without a new alt_qty, the stored alt_qty is
        treated as stale and re-derived.

        Args:
            transaction_id: Transaction ID to update
            date: Optional new date
            item_name: Optional new item name
            quantity: Optional new quantity
            type: Optional new movement type
            alt_qty: Optional new alternate quantity
            unit: Optional new unit label
            alt_unit: Optional new alternate unit label
            rate: Optional new rate
            remarks: Optional new remarks

        Returns:
            The updated transaction

        Raises:
            NotFoundError: If transaction doesn't exist
            ValidationError: If a supplied field is invalid
        """
        txn = self.require_transaction(transaction_id)

        if date is not None:
            date = require_text(date, "date")
        if item_name is not None:
            item_name = require_text(item_name, "item_name")
        amount = require_quantity(quantity) if quantity is not None else None

        effective_name = item_name if item_name is not None else txn.item_name
        effective_quantity = amount if amount is not None else txn.quantity
        if alt_qty is not None:
            candidate_alt = alt_qty
        elif amount is not None or item_name is not None:
            candidate_alt = None
        else:
            candidate_alt = txn.alt_qty

        self.db.update_transaction(
            transaction_id=transaction_id,
            date=date,
            type=MovementType.normalize(type).value if type is not None else None,
            item_name=item_name,
            quantity=amount,
            alt_qty=fill_alt_qty(candidate_alt, effective_quantity, self._find_item(effective_name)),
            unit=unit,
            alt_unit=alt_unit,
            rate=parse_quantity(rate) if rate is not None else None,
            remarks=remarks,
        )
        logger.info("Updated transaction %d", transaction_id)
        return self.require_transaction(transaction_id)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction. The catalog is not affected.

        Args:
            transaction_id: Transaction ID to delete

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        self.require_transaction(transaction_id)
        self.db.delete_transaction(transaction_id)
        logger.info("Deleted transaction %d", transaction_id)

    def list_transactions(self, item_name: Optional[str] = None) -> list[TransactionEntity]:
        """List transactions, newest date first.

        Args:
            item_name: Optional item name filter (matched like the stock report)

        Returns:
            List of transaction entities
        """
        return self.db.list_transactions(item_name=item_name)

    def _find_item(self, item_name: str) -> Optional[ItemEntity]:
        items = self.db.find_items_by_name(item_name)
        return items[0] if items else None
