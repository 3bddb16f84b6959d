"""CLI helpers for building the dashboard from the click context."""

from __future__ import annotations

from typing import Callable, Optional

import click

from librarydash.domain.dashboard import Dashboard


def open_dashboard(
    ctx: click.Context, confirm: Optional[Callable[[str], bool]] = None
) -> Dashboard:
    """Build a dashboard for the current command.

    The dashboard is closed automatically when the command's context ends.
    An API client placed in ``ctx.obj["api"]`` is used instead of an HTTP
    client, which is how tests inject a fake server.
    """
    config = ctx.obj["config"]
    dashboard = Dashboard.from_config(config, api=ctx.obj.get("api"), confirm=confirm)
    return ctx.with_resource(dashboard)


def wait_or_exit(ctx: click.Context, dashboard: Dashboard, futures) -> None:
    """Wait for fetches to finish, or exit if they exceed the configured timeout."""
    # Each request is bounded by the timeout; allow for a few in sequence.
    timeout = ctx.obj["config"].timeout * 3
    if not dashboard.wait(futures, timeout=timeout):
        click.echo("Error: Timed out waiting for the dashboard API", err=True)
        ctx.exit(1)
