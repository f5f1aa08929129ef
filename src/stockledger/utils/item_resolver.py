"""Utility for resolving item names to IDs."""

from stockledger.domain.item import ItemService
from stockledger.domain.errors import (
    NotFoundError,
    ValidationError,
    item_name_not_found,
    item_not_found,
)


def resolve_item(item_service: ItemService, item: str | int) -> int:
    """Resolve item name or ID to item ID.

    Names are matched trimmed and case-insensitively, as transactions are.

    Args:
        item_service: ItemService instance
        item: Item name (str) or ID (int or string representation of int)

    Returns:
        Item ID

    Raises:
        NotFoundError: If item is not found
        ValidationError: If the name matches more than one item
    """
    if isinstance(item, int):
        if item_service.get_item(item) is None:
            raise NotFoundError(item_not_found(item))
        return item

    try:
        item_id = int(item)
    except (ValueError, TypeError):
        item_id = None

    if item_id is not None:
        if item_service.get_item(item_id) is None:
            raise NotFoundError(item_not_found(item_id))
        return item_id

    matches = item_service.find_items(item)
    if not matches:
        raise NotFoundError(item_name_not_found(item))
    if len(matches) > 1:
        ids = ", ".join(str(match.id) for match in matches)
        raise ValidationError(f"Item name '{item}' is ambiguous (IDs: {ids}); use an ID instead")
    return matches[0].id
