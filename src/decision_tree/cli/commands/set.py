"""decision-tree set -- submit a steps formula."""

from __future__ import annotations

import click

from decision_tree.cli.formatting import format_view, format_warning


@click.command("set")
@click.argument("formula")
@click.pass_context
def set_steps(ctx: click.Context, formula: str) -> None:
    """Store FORMULA (e.g. 's1,s2_r1,r2,r3') and print the new query string.

    An invalid formula resets the query string to the default.
    """
    from decision_tree.cli import _hook_session
    from decision_tree.codec.schema import formula_stage
    from decision_tree.exceptions import StageError
    from decision_tree.view import build_view

    with _hook_session(ctx) as (hook, console):
        config = ctx.obj["config"]
        try:
            steps = formula_stage(config).decode(formula)
        except StageError as e:
            format_warning(f"Invalid formula: {e}", console)
            hook.write(lambda _: None)
        else:
            hook.write({"steps": steps})

        query_string = ctx.obj["navigation"].get_query_string()
        console.print(f"?{query_string}", markup=False, highlight=False)
        format_view(build_view(hook.read(), config), console)
