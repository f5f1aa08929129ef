"""Derivation of stock levels from ledger history.

Stock is never stored. It is recomputed from an item's matched transactions:

* primary quantity: signed sum of ``quantity`` (IN adds, OUT subtracts);
* alternate quantity: signed sum of the ``alt_qty`` recorded on each
  transaction (summed-history strategy).

The per-transaction conversion factor is not consulted on read. Instead the
write path (``fill_alt_qty``) materializes ``quantity * factor`` whenever a
movement is recorded without an alternate quantity, so the summed read stays
populated for factor-based items while manual figures are honored verbatim.

Unparsable values count as zero and results may be negative. A total that
overflows the decimal context is reported as zero.
"""

from decimal import Decimal, InvalidOperation, Overflow, localcontext
from typing import Any, Callable, Iterable, Optional

from stockledger.domain.entities import (
    Item,
    ItemStock,
    MovementType,
    StockLevel,
    Transaction,
)
from stockledger.utils.quantity_parser import format_quantity, parse_quantity

ZERO = Decimal("0")


def _finite_or_zero(compute: Callable[[], Decimal]) -> Decimal:
    """Evaluate ``compute`` with overflow untrapped; a non-finite result is 0."""
    with localcontext() as context:
        context.traps[Overflow] = False
        context.traps[InvalidOperation] = False
        result = compute()
    return result if result.is_finite() else ZERO


def primary_quantity(transactions: Iterable[Transaction]) -> Decimal:
    """Signed sum of primary quantities. Order does not matter."""
    return _finite_or_zero(
        lambda: sum(
            (MovementType.normalize(txn.type).sign * parse_quantity(txn.quantity) for txn in transactions),
            ZERO,
        )
    )


def alternate_quantity(transactions: Iterable[Transaction]) -> Decimal:
    """Signed sum of recorded alternate quantities. Order does not matter."""
    return _finite_or_zero(
        lambda: sum(
            (MovementType.normalize(txn.type).sign * parse_quantity(txn.alt_qty) for txn in transactions),
            ZERO,
        )
    )


def reconcile(transactions: Iterable[Transaction]) -> StockLevel:
    """Compute the stock level for an item's matched transactions.

    Args:
        transactions: Transactions already matched to one item

    Returns:
        StockLevel with primary and alternate quantities (zero for no history)
    """
    transactions = list(transactions)
    return StockLevel(
        quantity=primary_quantity(transactions),
        alt_quantity=alternate_quantity(transactions),
    )


def item_stock(item: Item, transactions: Iterable[Transaction]) -> ItemStock:
    """Merge an item with the stock level of its matched transactions."""
    level = reconcile(transactions)
    return ItemStock(item=item, quantity=level.quantity, alt_quantity=level.alt_quantity)


def derive_alt_qty(quantity: Any, item: Optional[Item]) -> Decimal:
    """Convert a primary quantity to the alternate unit using the item's factor.

    Args:
        quantity: Primary quantity (any numeric-bearing value)
        item: Catalog item, or None when the name matched no item

    Returns:
        ``quantity * factor``, or 0 if there is no item or no numeric factor
    """
    if item is None:
        return ZERO
    factor = item.conversion_factor
    if factor is None:
        return ZERO
    return _finite_or_zero(lambda: parse_quantity(quantity) * factor)


def fill_alt_qty(alt_qty: Any, quantity: Any, item: Optional[Item]) -> str:
    """Resolve the alternate quantity to persist on a transaction.

    A submitted value that parses to a non-zero number is kept verbatim
    (including decorated text such as "50 box"). Otherwise the value is
    derived from the item's factor, or "0" when that is not possible.

    Args:
        alt_qty: Submitted alternate quantity (may be None, 0, "-", text)
        quantity: Submitted primary quantity
        item: Catalog item the transaction names, if any

    Returns:
        Text to store in the transaction's ``alt_qty`` field
    """
    if parse_quantity(alt_qty) != 0:
        return str(alt_qty)
    return format_quantity(derive_alt_qty(quantity, item))
