"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from stockledger.domain.entities import Item, Transaction


class Database(ABC):
    """Abstract store of record for the item catalog and the transaction ledger.

    The two collections are independent: transactions reference items only
    by ``item_name`` text. Implementations keep a normalized copy of every
    name (see ``stockledger.domain.matching.normalize_item_name``) for lookups.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Item operations
    @abstractmethod
    def create_item(
        self,
        name: str,
        unit: str,
        alert_qty: Decimal,
        alt_unit: str = "-",
        factor: str = "Manual",
    ) -> int:
        """Create a catalog item. Returns item ID."""
        pass

    @abstractmethod
    def get_item(self, item_id: int) -> Optional[Item]:
        """Get item by ID."""
        pass

    @abstractmethod
    def list_items(self) -> list[Item]:
        """List all items in storage order."""
        pass

    @abstractmethod
    def find_items_by_name(self, name: str) -> list[Item]:
        """Find items whose normalized name equals the normalized ``name``."""
        pass

    @abstractmethod
    def update_item(
        self,
        item_id: int,
        name: Optional[str] = None,
        unit: Optional[str] = None,
        alt_unit: Optional[str] = None,
        factor: Optional[str] = None,
        alert_qty: Optional[Decimal] = None,
    ) -> None:
        """Update the given item fields. None leaves a field unchanged."""
        pass

    @abstractmethod
    def delete_item(self, item_id: int) -> None:
        """Delete an item. Does not touch the ledger."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        date: str,
        type: str,
        item_name: str,
        quantity: Decimal,
        alt_qty: str = "0",
        unit: str = "",
        alt_unit: str = "",
        rate: Decimal = Decimal("0"),
        remarks: str = "",
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        date: Optional[str] = None,
        type: Optional[str] = None,
        item_name: Optional[str] = None,
        quantity: Optional[Decimal] = None,
        alt_qty: Optional[str] = None,
        unit: Optional[str] = None,
        alt_unit: Optional[str] = None,
        rate: Optional[Decimal] = None,
        remarks: Optional[str] = None,
    ) -> None:
        """Update the given transaction fields. None leaves a field unchanged."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def list_transactions(self, item_name: Optional[str] = None) -> list[Transaction]:
        """List transactions, newest date first.

        Args:
            item_name: If given, only transactions whose normalized item name
                equals the normalized ``item_name``

        Ties on date are returned in insertion order.
        """
        pass

    # Ledger maintenance
    @abstractmethod
    def rename_item_references(self, old_name: str, new_name: str) -> int:
        """Point transactions named exactly ``old_name`` at ``new_name``.

        Returns the number of transactions rewritten.
        """
        pass

    @abstractmethod
    def delete_item_references(self, name: str) -> int:
        """Delete transactions named exactly ``name``.

        Returns the number of transactions deleted.
        """
        pass
