"""Item catalog commands."""

import json

import click
from stockledger.cli.error_handling import handle_domain_error
from stockledger.cli.item_resolution import resolve_item_or_exit
from stockledger.domain.entities import ItemStock
from stockledger.domain.errors import DomainError
from stockledger.domain.item import ItemService
from stockledger.domain.payloads import item_to_payload
from stockledger.utils.quantity_parser import format_quantity


def format_stock_line(stock: ItemStock) -> str:
    """Format one item row for the stock listing."""
    item = stock.item
    line = f"ID: {item.id:3d} | {item.name:20s} | {format_quantity(stock.quantity):>10s} {item.unit}"
    if item.has_alt_unit:
        line += f" | {format_quantity(stock.alt_quantity):>10s} {item.alt_unit}"
    if stock.is_low_stock:
        line += " | LOW"
    return line


@click.group()
def item_group():
    """Manage catalog items."""
    pass


@item_group.command("create")
@click.argument("name", metavar="ITEM_NAME")
@click.option("--unit", required=True, help="Primary unit (e.g., 'kg')")
@click.option("--alert-qty", required=True, help="Low-stock threshold in the primary unit")
@click.option("--alt-unit", default="-", show_default=True, help="Alternate unit (e.g., 'box'), '-' for none")
@click.option(
    "--factor",
    default="Manual",
    show_default=True,
    help="Alternate units per primary unit, 'Manual' or '-'",
)
@click.pass_context
def create_item(ctx, name: str, unit: str, alert_qty: str, alt_unit: str, factor: str):
    """Create a new item.

    Examples:
        stockledger item create "Rice" --unit kg --alert-qty 20
        stockledger item create "Oil" --unit litre --alt-unit can --factor 5 --alert-qty 10
    """
    db = ctx.obj["db"]
    service = ItemService(db)

    try:
        stock = service.create_item(
            name=name, unit=unit, alert_qty=alert_qty, alt_unit=alt_unit, factor=factor
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created item '{stock.item.name}' (ID: {stock.item.id})")


@item_group.command("list")
@click.option("--low-stock", is_flag=True, help="Only show items at or below their alert quantity")
@click.option("--json", "as_json", is_flag=True, help="Print items as JSON")
@click.pass_context
def list_items(ctx, low_stock: bool, as_json: bool):
    """List items with current stock."""
    db = ctx.obj["db"]
    service = ItemService(db)

    stocks = service.list_low_stock_items() if low_stock else service.list_items()

    if as_json:
        click.echo(json.dumps([item_to_payload(stock) for stock in stocks], indent=2))
        return

    if not stocks:
        click.echo("No items found.")
        return

    click.echo("\nItems:")
    click.echo("-" * 70)
    for stock in stocks:
        click.echo(format_stock_line(stock))


@item_group.command("update")
@click.argument("item", metavar="ITEM")
@click.option("--name", help="New item name (transactions are relinked)")
@click.option("--unit", help="New primary unit")
@click.option("--alt-unit", help="New alternate unit")
@click.option("--factor", help="New factor")
@click.option("--alert-qty", help="New low-stock threshold")
@click.pass_context
def update_item(
    ctx,
    item: str,
    name: str | None,
    unit: str | None,
    alt_unit: str | None,
    factor: str | None,
    alert_qty: str | None,
) -> None:
    """Update an item.

    ITEM can be an item name or ID. Renaming an item moves its transactions
    to the new name.

    Examples:
        stockledger item update "Salt" --name "Sea Salt"
        stockledger item update 3 --factor 12 --alt-unit box
    """
    db = ctx.obj["db"]
    service = ItemService(db)
    item_id = resolve_item_or_exit(ctx, service, item)

    try:
        stock = service.update_item(
            item_id=item_id,
            name=name,
            unit=unit,
            alt_unit=alt_unit,
            factor=factor,
            alert_qty=alert_qty,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated item '{stock.item.name}' (ID: {item_id})")


@item_group.command("delete")
@click.argument("item", metavar="ITEM")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_item(ctx, item: str, yes: bool) -> None:
    """Delete an item and all of its transactions.

    ITEM can be an item name or ID.

    Examples:
        stockledger item delete "Sugar"
        stockledger item delete 4 --yes
    """
    db = ctx.obj["db"]
    service = ItemService(db)
    item_id = resolve_item_or_exit(ctx, service, item)
    item_obj = service.require_item(item_id)

    if not yes and not click.confirm(
        f"Delete item '{item_obj.name}' (ID: {item_id}) and all of its transactions?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_item(item_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted item '{item_obj.name}'")


def register_commands(cli):
    """Register item commands with main CLI."""
    cli.add_command(item_group, name="item")
