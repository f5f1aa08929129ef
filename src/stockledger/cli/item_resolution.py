"""CLI helpers for item resolution."""

from __future__ import annotations

import click
from stockledger.cli.error_handling import handle_domain_error
from stockledger.domain.item import ItemService
from stockledger.utils.item_resolver import resolve_item


def resolve_item_or_exit(ctx: click.Context, item_service: ItemService, item: str | int) -> int:
    """Resolve item name or ID, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_item(item_service, item)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
