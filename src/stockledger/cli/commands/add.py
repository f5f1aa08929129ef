"""Add transaction command."""

import click
from stockledger.cli.error_handling import handle_domain_error
from stockledger.domain.entities import MovementType, NO_ALT_UNIT
from stockledger.domain.errors import DomainError
from stockledger.domain.item import ItemService
from stockledger.domain.transaction import TransactionService
from stockledger.utils.date_parser import to_ledger_date


@click.command("add")
@click.option("--item", "item_name", required=True, help="Item name")
@click.option(
    "--type",
    "movement_type",
    type=click.Choice([t.value for t in MovementType], case_sensitive=False),
    default=MovementType.IN.value,
    show_default=True,
    help="Movement direction",
)
@click.option("--quantity", required=True, help="Quantity in the primary unit")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Movement date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--alt-qty", help="Quantity in the alternate unit (derived from the item's factor if omitted)")
@click.option("--unit", help="Primary unit label (defaults to the item's unit)")
@click.option("--alt-unit", help="Alternate unit label (defaults to the item's alternate unit)")
@click.option("--rate", help="Purchase price")
@click.option("--remarks", default="", help="Remarks")
@click.pass_context
def add_transaction(
    ctx,
    item_name: str,
    movement_type: str,
    quantity: str,
    date: str,
    alt_qty: str | None,
    unit: str | None,
    alt_unit: str | None,
    rate: str | None,
    remarks: str,
):
    """Record a stock movement.

    Examples:
        stockledger add --item "Rice" --quantity 25
        stockledger add --item "Oil" --type OUT --quantity 4 --date yesterday
        stockledger add --item "Tiles" --quantity 10 --alt-qty "3 box" --rate 120
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)
    item_service = ItemService(db)

    try:
        txn_date = to_ledger_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    matches = item_service.find_items(item_name)
    if matches:
        catalog_item = matches[0]
        if unit is None:
            unit = catalog_item.unit
        if alt_unit is None and catalog_item.has_alt_unit:
            alt_unit = catalog_item.alt_unit
    else:
        click.echo(
            f"Warning: no item named '{item_name}' in the catalog; "
            "the movement is recorded but counts towards no item's stock",
            err=True,
        )

    try:
        txn = transaction_service.create_transaction(
            date=txn_date,
            item_name=item_name,
            quantity=quantity,
            type=movement_type,
            alt_qty=alt_qty,
            unit=unit or "",
            alt_unit=alt_unit if alt_unit and alt_unit != NO_ALT_UNIT else "",
            rate=rate,
            remarks=remarks,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {txn.id}")
    click.echo(f"  Item: {txn.item_name}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Quantity: {quantity} {txn.unit}".rstrip())
    click.echo(f"  Alt quantity: {txn.alt_qty} {txn.alt_unit}".rstrip())


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
