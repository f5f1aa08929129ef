"""Main CLI entry point."""

import logging

import click
from stockledger.database.factories import DB_PATH_ENVVAR, create_sqlite_database

# Import and register all commands at module level
from stockledger.cli.commands import (
    item,
    add,
    transaction,
    ledger,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENVVAR} environment variable)",
    envvar=DB_PATH_ENVVAR,
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="STOCKLEDGER_LOG_LEVEL",
    help="Logging verbosity (written to stderr)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Stockledger - Inventory stock tracking.

    Stock levels are derived from a ledger of IN/OUT movements, in a primary
    unit and an optional alternate unit.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
item.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
ledger.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
