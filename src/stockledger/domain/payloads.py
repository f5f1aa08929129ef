"""JSON payload shapes for items and transactions.

Keys follow the camelCase shape consumed by the web front end.
"""

from decimal import Decimal
from typing import Any

from stockledger.domain.entities import ItemStock, Transaction


def json_number(value: Decimal) -> int | float:
    """Render a Decimal as an int when integral, else a float."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def item_to_payload(stock: ItemStock) -> dict[str, Any]:
    """Render an item with its derived stock."""
    item = stock.item
    return {
        "id": item.id,
        "name": item.name,
        "unit": item.unit,
        "altUnit": item.alt_unit,
        "factor": item.factor,
        "alertQty": json_number(item.alert_qty),
        "quantity": json_number(stock.quantity),
        "altQuantity": json_number(stock.alt_quantity),
    }


def transaction_to_payload(txn: Transaction) -> dict[str, Any]:
    """Render a ledger transaction."""
    return {
        "id": txn.id,
        "date": txn.date,
        "type": txn.type.value,
        "itemName": txn.item_name,
        "quantity": json_number(txn.quantity),
        "altQty": txn.alt_qty,
        "unit": txn.unit,
        "altUnit": txn.alt_unit,
        "rate": json_number(txn.rate),
        "remarks": txn.remarks,
    }
