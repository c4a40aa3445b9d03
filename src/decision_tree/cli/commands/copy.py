"""decision-tree copy -- copy one choice path."""

from __future__ import annotations

import click

from decision_tree.cli.formatting import ConsoleClipboard


@click.command()
@click.argument("level", type=click.IntRange(min=1))
@click.argument("index", type=click.IntRange(min=1))
@click.pass_context
def copy(ctx: click.Context, level: int, index: int) -> None:
    """Copy the path at LEVEL and INDEX (both 1-based)."""
    from decision_tree.cli import _hook_session
    from decision_tree.view import FormView, build_view, copy_choice

    with _hook_session(ctx) as (hook, console):
        view = build_view(hook.read(), ctx.obj["config"])
        if isinstance(view, FormView):
            raise click.UsageError("No steps formula set; nothing to copy.")
        copy_choice(view, level, index, ConsoleClipboard(console))
