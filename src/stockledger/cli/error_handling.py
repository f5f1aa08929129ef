"""CLI error handling helpers."""

import click

from stockledger.domain.errors import CascadeFailure, DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    if isinstance(error, CascadeFailure):
        click.echo(f"Warning: {error}", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
