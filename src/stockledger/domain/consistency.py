"""Propagation of catalog renames and deletions into the ledger.

Transactions point at items by name, so renaming or deleting an item has to
be followed by a bulk rewrite or delete over the ledger. The catalog change
and the ledger change are two separate store operations: when the second one
fails the catalog change stays committed and ``CascadeFailure`` is raised.
Both ledger operations match the stored name exactly and are idempotent, so
the caller recovers by calling ``rename_references`` or ``purge_references``
again.
"""

import logging
from typing import TYPE_CHECKING

from stockledger.domain.entities import Item
from stockledger.domain.errors import (
    CascadeFailure,
    cascade_delete_failed,
    cascade_rename_failed,
)

if TYPE_CHECKING:
    from stockledger.database.base import Database

logger = logging.getLogger(__name__)


class ConsistencyMaintainer:
    """Keeps transaction item names in step with the catalog."""

    def __init__(self, db: "Database"):
        """Initialize consistency maintainer.

        Args:
            db: Database instance
        """
        self.db = db

    def rename_references(self, old_name: str, new_name: str) -> int:
        """Point every transaction named exactly ``old_name`` at ``new_name``.

        Returns:
            Number of transactions rewritten
        """
        if old_name == new_name:
            return 0
        count = self.db.rename_item_references(old_name, new_name)
        logger.info("Relinked %d transaction(s) from '%s' to '%s'", count, old_name, new_name)
        return count

    def purge_references(self, name: str) -> int:
        """Delete every transaction named exactly ``name``.

        Returns:
            Number of transactions deleted
        """
        count = self.db.delete_item_references(name)
        logger.info("Removed %d transaction(s) referencing '%s'", count, name)
        return count

    def cascade_rename(self, item: Item, old_name: str) -> int:
        """Follow a committed item rename into the ledger.

        Args:
            item: Item as stored after the rename
            old_name: Name stored before the rename

        Returns:
            Number of transactions rewritten

        Raises:
            CascadeFailure: If the ledger could not be rewritten
        """
        try:
            return self.rename_references(old_name, item.name)
        except Exception as exc:
            logger.error(
                "Rename cascade failed for item %d ('%s' -> '%s'): %s",
                item.id,
                old_name,
                item.name,
                exc,
            )
            raise CascadeFailure(cascade_rename_failed(old_name, item.name), item=item, cause=exc) from exc

    def delete_item(self, item: Item) -> int:
        """Delete an item, then the transactions that name it.

        Args:
            item: Item to delete

        Returns:
            Number of transactions deleted

        Raises:
            CascadeFailure: If the item was deleted but its transactions were not
        """
        self.db.delete_item(item.id)
        logger.info("Deleted item %d ('%s')", item.id, item.name)
        try:
            return self.purge_references(item.name)
        except Exception as exc:
            logger.error("Delete cascade failed for item %d ('%s'): %s", item.id, item.name, exc)
            raise CascadeFailure(cascade_delete_failed(item.name), item=item, cause=exc) from exc
