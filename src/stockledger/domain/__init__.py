"""Domain layer for stockledger application."""

from stockledger.domain.item import ItemService
from stockledger.domain.transaction import TransactionService
from stockledger.domain.consistency import ConsistencyMaintainer

__all__ = [
    "ItemService",
    "TransactionService",
    "ConsistencyMaintainer",
]
