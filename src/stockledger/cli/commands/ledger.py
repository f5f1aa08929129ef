"""Ledger maintenance commands.

These repeat the transaction side of an item rename or delete, for when the
catalog change went through but the ledger update did not.
"""

import click
from stockledger.domain.consistency import ConsistencyMaintainer


@click.group()
def ledger_group():
    """Repair transaction item names after catalog changes."""
    pass


@ledger_group.command("relink")
@click.argument("old_name", metavar="OLD_NAME")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def relink(ctx, old_name: str, new_name: str) -> None:
    """Move transactions named exactly OLD_NAME to NEW_NAME.

    Examples:
        stockledger ledger relink "Salt" "Sea Salt"
    """
    maintainer = ConsistencyMaintainer(ctx.obj["db"])
    count = maintainer.rename_references(old_name, new_name)
    click.echo(f"Relinked {count} transaction{'s' if count != 1 else ''} to '{new_name}'")


@ledger_group.command("purge")
@click.argument("name", metavar="ITEM_NAME")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def purge(ctx, name: str, yes: bool) -> None:
    """Delete transactions named exactly ITEM_NAME.

    Examples:
        stockledger ledger purge "Sugar"
    """
    if not yes and not click.confirm(f"Delete all transactions for '{name}'?"):
        click.echo("Purge cancelled.")
        return

    maintainer = ConsistencyMaintainer(ctx.obj["db"])
    count = maintainer.purge_references(name)
    click.echo(f"Removed {count} transaction{'s' if count != 1 else ''} for '{name}'")


def register_commands(cli):
    """Register ledger commands with main CLI."""
    cli.add_command(ledger_group, name="ledger")
