"""Transaction management commands."""

import json

import click
from stockledger.cli.error_handling import handle_domain_error
from stockledger.domain.entities import MovementType, Transaction
from stockledger.domain.errors import DomainError
from stockledger.domain.payloads import transaction_to_payload
from stockledger.domain.transaction import TransactionService
from stockledger.utils.date_parser import to_ledger_date
from stockledger.utils.quantity_parser import format_quantity


def format_transaction_line(txn: Transaction) -> str:
    """Format one transaction row for the ledger listing."""
    line = (
        f"{txn.id:4d} | {txn.date:10s} | {txn.type.value:3s} | {txn.item_name:20s} | "
        f"{format_quantity(txn.quantity):>10s} {txn.unit}"
    )
    if txn.alt_unit or txn.alt_qty not in ("", "0"):
        line += f" | {txn.alt_qty} {txn.alt_unit}".rstrip()
    return line


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--item", "item_name", help="Only transactions for this item name")
@click.option("--json", "as_json", is_flag=True, help="Print transactions as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Show rate and remarks")
@click.pass_context
def list_transactions(ctx, item_name: str | None, as_json: bool, verbose: bool):
    """List transactions, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    transactions = service.list_transactions(item_name=item_name)

    if as_json:
        click.echo(json.dumps([transaction_to_payload(txn) for txn in transactions], indent=2))
        return

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo("\nTransactions:")
    click.echo("-" * 80)
    for txn in transactions:
        click.echo(format_transaction_line(txn))
        if verbose:
            click.echo(f"       Rate: {format_quantity(txn.rate)}")
            if txn.remarks:
                click.echo(f"       Remarks: {txn.remarks}")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--item", "item_name", help="Item name")
@click.option(
    "--type",
    "movement_type",
    type=click.Choice([t.value for t in MovementType], case_sensitive=False),
    help="Movement direction",
)
@click.option("--quantity", help="Quantity in the primary unit")
@click.option("--date", help="Movement date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option("--alt-qty", help="Quantity in the alternate unit")
@click.option("--unit", help="Primary unit label")
@click.option("--alt-unit", help="Alternate unit label")
@click.option("--rate", help="Purchase price")
@click.option("--remarks", help="Remarks")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    item_name: str | None,
    movement_type: str | None,
    quantity: str | None,
    date: str | None,
    alt_qty: str | None,
    unit: str | None,
    alt_unit: str | None,
    rate: str | None,
    remarks: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        stockledger transaction update 7 --quantity 12
        stockledger transaction update 7 --type OUT --remarks "returned to supplier"
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    txn_date = None
    if date is not None:
        try:
            txn_date = to_ledger_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_transaction(
            transaction_id=transaction_id,
            date=txn_date,
            item_name=item_name,
            quantity=quantity,
            type=movement_type,
            alt_qty=alt_qty,
            unit=unit,
            alt_unit=alt_unit,
            rate=rate,
            remarks=remarks,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        stockledger transaction delete 7
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Delete transaction {transaction_id} ({txn.type.value} {format_quantity(txn.quantity)} {txn.item_name})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
