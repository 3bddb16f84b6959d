"""Dashboard overview command."""

import click

from librarydash.cli.commands.category import print_category_table
from librarydash.cli.dashboard_context import open_dashboard, wait_or_exit
from librarydash.domain.dashboard import Dashboard


def print_stat_cards(dashboard: Dashboard) -> None:
    """Print the four headline statistics."""
    stats = dashboard.stats.stats
    cards = [
        ("Total Books", stats.total_books, "All books in library"),
        ("Available Books", stats.available_books, "Ready to borrow"),
        ("Active Borrowers", stats.active_borrowers, "Currently borrowing"),
        ("Total Transactions", stats.total_transactions, "All-time transactions"),
    ]
    for title, value, description in cards:
        click.echo(f"{title:<20} {value:>8}  {description}")


def print_overview(dashboard: Dashboard) -> None:
    """Print availability and activity figures derived from the summary."""
    stats = dashboard.stats.stats
    metrics = dashboard.metrics

    click.echo("\nLibrary Overview:")
    click.echo("-" * 60)
    click.echo(f"{'Total Books':<20} {stats.total_books:>8}")
    click.echo(f"{'Available Books':<20} {stats.available_books:>8}")
    click.echo(f"{'Borrowed Books':<20} {metrics.borrowed_books:>8}")
    click.echo(f"{'Availability Rate':<20} {metrics.availability_percentage:>7}%")
    click.echo(f"Library is {metrics.stock_label}")
    click.echo(f"{'Book Availability':<20} {metrics.availability_label:>8}")
    click.echo(f"{'Usage Rate':<20} {metrics.usage_rate:>7}%")


def print_quick_stats(dashboard: Dashboard) -> None:
    """Print today's activity counters."""
    quick = dashboard.quick_stats.quick_stats
    click.echo("\nToday's Activity:")
    click.echo("-" * 60)
    click.echo(f"{'Books Added':<20} {quick.books_added_today:>8}")
    click.echo(f"{'Books Borrowed':<20} {quick.books_borrowed_today:>8}")
    click.echo(f"{'Books Returned':<20} {quick.books_returned_today:>8}")


@click.command("dashboard")
@click.pass_context
def show_dashboard(ctx):
    """Show library statistics, today's activity and categories.

    The summary, category list and today's counters are fetched
    concurrently. A failed fetch leaves its section at its defaults and the
    error is reported after the output.
    """
    dashboard = open_dashboard(ctx)
    wait_or_exit(ctx, dashboard, dashboard.mount())

    click.echo("\nDashboard")
    click.echo("=" * 60)
    print_stat_cards(dashboard)
    print_overview(dashboard)
    print_quick_stats(dashboard)

    click.echo("\nCategories:")
    print_category_table(dashboard.categories.categories)

    if dashboard.error:
        click.echo(f"\nError: {dashboard.error}", err=True)
        ctx.exit(1)


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(show_dashboard)
