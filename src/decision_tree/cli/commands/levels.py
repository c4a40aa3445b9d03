"""decision-tree levels -- path counts per step."""

from __future__ import annotations

import click

from decision_tree.cli.formatting import format_counts


@click.command()
@click.pass_context
def levels(ctx: click.Context) -> None:
    """Show how many choice paths each step reaches."""
    from decision_tree.cli import _hook_session
    from decision_tree.combinations import count_paths

    with _hook_session(ctx) as (hook, console):
        format_counts(count_paths(hook.read().steps or ()), console)
