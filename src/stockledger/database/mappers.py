"""Mapper functions to convert between domain models and SQLAlchemy models.

Transaction types are normalized here, on read, so legacy rows holding
" in " or no type at all surface as proper movement types.
"""

from decimal import Decimal

from stockledger.domain import entities as domain
from stockledger.database.models import (
    Item as ORMItem,
    Transaction as ORMTransaction,
)


def item_to_domain(orm_item: ORMItem) -> domain.Item:
    """Convert SQLAlchemy Item model to domain Item entity."""
    return domain.Item(
        id=orm_item.id,
        name=orm_item.name,
        unit=orm_item.unit,
        alt_unit=orm_item.alt_unit if orm_item.alt_unit is not None else domain.NO_ALT_UNIT,
        factor=orm_item.factor if orm_item.factor is not None else domain.MANUAL_FACTOR,
        alert_qty=Decimal(orm_item.alert_qty) if orm_item.alert_qty is not None else Decimal("0"),
        created_at=orm_item.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        date=orm_transaction.date,
        type=domain.MovementType.normalize(orm_transaction.type),
        item_name=orm_transaction.item_name,
        quantity=Decimal(orm_transaction.quantity) if orm_transaction.quantity is not None else Decimal("0"),
        alt_qty=orm_transaction.alt_qty if orm_transaction.alt_qty is not None else "0",
        unit=orm_transaction.unit or "",
        alt_unit=orm_transaction.alt_unit or "",
        rate=Decimal(orm_transaction.rate) if orm_transaction.rate is not None else Decimal("0"),
        remarks=orm_transaction.remarks or "",
        created_at=orm_transaction.created_at,
    )
