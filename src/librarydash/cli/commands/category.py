"""Category management commands."""

from typing import Optional

import click

from librarydash.cli.dashboard_context import open_dashboard, wait_or_exit
from librarydash.cli.error_handling import handle_domain_error
from librarydash.domain.entities import Category
from librarydash.domain.errors import category_not_found


def print_category_table(categories: list[Category]) -> None:
    """Print categories in server order."""
    if not categories:
        click.echo("No categories found.")
        return

    click.echo("-" * 60)
    for cat in categories:
        editor = cat.who_edited or "-"
        click.echo(f"ID: {cat.category_id:3d} | {cat.category_name:20s} | Edited by: {editor}")
        if cat.category_description:
            click.echo(f"       {cat.category_description}")


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all active categories."""
    dashboard = open_dashboard(ctx)
    store = dashboard.categories

    if store.list() is None:
        handle_domain_error(ctx, store.error)

    click.echo("\nCategories:")
    print_category_table(store.categories)


@category_group.command("create")
@click.argument("name")
@click.option("--description", default="", help="Category description")
@click.option("--editor", default="", help="Editor name (defaults to the configured editor label)")
@click.pass_context
def create_category(ctx, name: str, description: str, editor: str):
    """Create a new category.

    Examples:
        librarydash category create "Science Fiction"
        librarydash category create "History" --description "World history" --editor "Jo"
    """
    dashboard = open_dashboard(ctx)
    store = dashboard.categories

    store.open_create()
    store.set_field("category_name", name)
    store.set_field("category_description", description)
    store.set_field("who_edited", editor)

    if not store.submit():
        handle_domain_error(ctx, dashboard.error)

    saved = store.last_saved
    id_str = f" (ID: {saved.category_id})" if saved else ""
    click.echo(f"Created category '{name}'{id_str}")
    wait_or_exit(ctx, dashboard, store.pending_refreshes)


@category_group.command("update")
@click.argument("category_id", type=int)
@click.option("--name", help="New category name")
@click.option("--description", help="New category description")
@click.option("--editor", help="Editor name (defaults to the configured editor label)")
@click.pass_context
def update_category(
    ctx,
    category_id: int,
    name: Optional[str],
    description: Optional[str],
    editor: Optional[str],
):
    """Update an existing category.

    Fields that are not given keep their current values.
    """
    dashboard = open_dashboard(ctx)
    store = dashboard.categories

    if store.list() is None:
        handle_domain_error(ctx, store.error)

    category = store.get_category(category_id)
    if category is None:
        handle_domain_error(ctx, category_not_found(category_id))

    store.start_edit(category)
    for field_name, value in (
        ("category_name", name),
        ("category_description", description),
        ("who_edited", editor),
    ):
        if value is not None:
            store.set_field(field_name, value)

    if not store.submit():
        handle_domain_error(ctx, dashboard.error)

    click.echo(f"Updated category {category_id}")
    wait_or_exit(ctx, dashboard, store.pending_refreshes)


@category_group.command("archive")
@click.argument("category_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def archive_category(ctx, category_id: int, yes: bool):
    """Archive (soft-delete) a category."""
    confirm = (lambda prompt: True) if yes else (lambda prompt: click.confirm(prompt))
    dashboard = open_dashboard(ctx, confirm=confirm)
    store = dashboard.categories

    if not store.archive(category_id):
        if dashboard.error:
            handle_domain_error(ctx, dashboard.error)
        click.echo("Cancelled.")
        return

    click.echo(f"Archived category {category_id}")
    wait_or_exit(ctx, dashboard, store.pending_refreshes)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
