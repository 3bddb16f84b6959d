"""Main CLI entry point."""

import click

from librarydash.cli.commands import category, dashboard
from librarydash.cli.error_handling import handle_domain_error
from librarydash.config import DashboardConfig, LOG_LEVELS
from librarydash.logger import setup_logging


@click.group()
@click.option(
    "--api-url",
    help="Dashboard API root URL (overrides LIBRARYDASH_API_URL environment variable)",
    envvar="LIBRARYDASH_API_URL",
)
@click.option(
    "--timeout",
    type=float,
    help="Request timeout in seconds (overrides LIBRARYDASH_TIMEOUT)",
    envvar="LIBRARYDASH_TIMEOUT",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Log level (overrides LIBRARYDASH_LOG_LEVEL)",
    envvar="LIBRARYDASH_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, api_url: str | None, timeout: float | None, log_level: str | None):
    """Librarydash - Library management admin dashboard.

    Shows library statistics and today's activity, and manages book
    categories through the library API.
    """
    ctx.ensure_object(dict)

    # Only read configuration when actually running a command (not when
    # showing help)
    if ctx.invoked_subcommand is not None:
        try:
            config = DashboardConfig.from_env().override(
                api_url=api_url,
                timeout=timeout,
                log_level=log_level.upper() if log_level else None,
            )
        except ValueError as e:
            handle_domain_error(ctx, e)
        setup_logging(config.log_level)
        ctx.obj["config"] = config


# Register all commands
dashboard.register_commands(cli)
category.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
