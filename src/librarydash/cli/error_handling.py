"""CLI error handling helpers."""

import click

from librarydash.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError | str) -> None:
    """Render a domain error (or a recorded error message) and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
