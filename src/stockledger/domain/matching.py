"""Resolution of free-text transaction item names to catalog items.

A transaction belongs to an item when both names are equal after trimming
surrounding whitespace and lower-casing. Matching is whole-string, never
substring: "Rice" matches " rice " but not "Basmati Rice". Names are compared
as plain text, so characters such as ``.``, ``*`` or ``(`` are literal.

The ledger persists the normalized form of every transaction's item name
(see ``normalize_item_name``) so stores can look transactions up by key
instead of scanning.

Two items whose names normalize to the same key both see the same
transactions. That ambiguity is not resolved here.
"""

from collections import defaultdict
from typing import Iterable, Optional

from stockledger.domain.entities import Transaction


def normalize_item_name(name: Optional[str]) -> str:
    """Return the matching key for an item name.

    Args:
        name: Item name as stored on an item or a transaction

    Returns:
        Trimmed, lower-cased name ("" for None)
    """
    if name is None:
        return ""
    return name.strip().lower()


def names_match(item_name: Optional[str], transaction_item_name: Optional[str]) -> bool:
    """Check whether a transaction's item name refers to the given item name."""
    key = normalize_item_name(item_name)
    return key != "" and key == normalize_item_name(transaction_item_name)


def match_transactions(item_name: str, transactions: Iterable[Transaction]) -> list[Transaction]:
    """Select the transactions belonging to an item.

    Args:
        item_name: Catalog item name
        transactions: Candidate transactions

    Returns:
        Matching transactions in input order (possibly empty)
    """
    return [txn for txn in transactions if names_match(item_name, txn.item_name)]


def group_by_item_key(transactions: Iterable[Transaction]) -> dict[str, list[Transaction]]:
    """Index transactions by normalized item name.

    Args:
        transactions: Transactions to index

    Returns:
        Mapping of matching key to the transactions carrying it
    """
    index: dict[str, list[Transaction]] = defaultdict(list)
    for txn in transactions:
        key = normalize_item_name(txn.item_name)
        if key:
            index[key].append(txn)
    return dict(index)
