"""Decision tree CLI -- terminal view of a steps formula.

The query string given with ``--query`` seeds an in-memory navigation cell.
Commands read and write it through a SearchParamsHook, the same way the
browser view reads and writes its URL.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from decision_tree.cli.formatting import format_error, get_console

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rich.console import Console

    from decision_tree.hook import SearchParamsHook
    from decision_tree.models.params import StepsParams


@click.group()
@click.option(
    "--query",
    default="",
    envvar="DECISION_TREE_QUERY",
    help="Current query string, e.g. 'steps=a,b_c,d'.",
)
@click.option(
    "--log-level",
    default="WARNING",
    envvar="DECISION_TREE_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for diagnostics on stderr.",
)
@click.pass_context
def cli(ctx: click.Context, query: str, log_level: str) -> None:
    """Visualize every choice path of a sequence of decision steps."""
    from decision_tree.models.config import VisualizerConfig

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj["query"] = query
    ctx.obj["config"] = VisualizerConfig()


def _get_hook(ctx: click.Context) -> SearchParamsHook[StepsParams]:
    """Bind a steps hook to a navigation cell seeded from ``--query``."""
    from decision_tree.codec.schema import steps_schema
    from decision_tree.hook import InMemoryNavigation, SearchParamsHook
    from decision_tree.models.params import StepsParams

    config = ctx.obj["config"]
    navigation = InMemoryNavigation(ctx.obj["query"])
    ctx.obj["navigation"] = navigation
    return SearchParamsHook(steps_schema(config), StepsParams(), navigation)


@contextmanager
def _hook_session(ctx: click.Context) -> Iterator[tuple[SearchParamsHook[StepsParams], Console]]:
    """Yield (hook, console) and report any exception as a CLI error."""
    console = get_console()
    try:
        yield _get_hook(ctx), console
    except SystemExit:
        raise
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None


# Register subcommands after cli group is defined
from decision_tree.cli.commands.copy import copy  # noqa: E402
from decision_tree.cli.commands.levels import levels  # noqa: E402
from decision_tree.cli.commands.set import set_steps  # noqa: E402
from decision_tree.cli.commands.show import show  # noqa: E402

cli.add_command(show)
cli.add_command(set_steps)
cli.add_command(copy)
cli.add_command(levels)
