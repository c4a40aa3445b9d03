"""decision-tree show -- render the current query string."""

from __future__ import annotations

import click

from decision_tree.cli.formatting import format_view


@click.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show the formula prompt, or one row of choice paths per step."""
    from decision_tree.cli import _hook_session
    from decision_tree.view import build_view

    with _hook_session(ctx) as (hook, console):
        format_view(build_view(hook.read(), ctx.obj["config"]), console)
