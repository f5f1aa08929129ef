"""Shared domain error messages and error types."""

from typing import Any


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Missing or malformed field on a write. Nothing is persisted."""


class NotFoundError(DomainError):
    """Requested item or transaction does not exist."""


class CascadeFailure(DomainError):
    """Catalog change committed but the ledger cascade did not complete.

    The catalog side is not rolled back. Retrying the cascade is idempotent.

    Attributes:
        item: Item state as committed to the catalog
        cause: Underlying store error
    """

    def __init__(self, message: str, item: Any = None, cause: BaseException | None = None):
        super().__init__(message)
        self.item = item
        self.cause = cause


def item_not_found(item_id: int) -> str:
    """Return message for missing item by ID."""
    return f"Item {item_id} not found"


def item_name_not_found(name: str) -> str:
    """Return message for missing item by name."""
    return f"Item '{name}' not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def missing_field(field_name: str) -> str:
    """Return message for a required field that was not supplied."""
    return f"Field '{field_name}' is required"


def not_a_number(field_name: str, value: Any) -> str:
    """Return message for a numeric field that carries no number."""
    return f"Field '{field_name}' must be a number, got {value!r}"


def negative_quantity(value: Any) -> str:
    """Return message for a negative transaction quantity."""
    return f"Quantity must not be negative, got {value!r}; use type OUT for outbound stock"


def cascade_rename_failed(old_name: str, new_name: str) -> str:
    """Return message when transactions could not be relinked after a rename."""
    return (
        f"Item renamed to '{new_name}' but its transactions still reference '{old_name}'. "
        f"Retry with: stockledger ledger relink \"{old_name}\" \"{new_name}\""
    )


def cascade_delete_failed(name: str) -> str:
    """Return message when transactions could not be removed after a delete."""
    return (
        f"Item '{name}' deleted but its transactions were not removed. "
        f"Retry with: stockledger ledger purge \"{name}\""
    )


def too_many_decimals(field_name: str, value: Any, scale: int) -> str:
    """Return message for a number with more decimal places than are stored."""
    return f"Field '{field_name}' allows at most {scale} decimal places, got {value!r}"


def number_too_large(field_name: str, value: Any, digits: int) -> str:
    """Return message for a number with more integer digits than are stored."""
    return f"Field '{field_name}' allows at most {digits} digits before the decimal point, got {value!r}"
