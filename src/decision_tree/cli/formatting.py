"""Rich formatting helpers for the decision tree CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from decision_tree.view import FormView, GridView, View


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


class ConsoleClipboard:
    """Clipboard sink that prints copied text to the console."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def write_text(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False)


def format_form(form: FormView, console: Console) -> None:
    """Display the prompt shown when no formula is set."""
    console.print(escape(form.prompt))
    console.print(f"  [dim]e.g.[/dim] [blue]{escape(form.placeholder)}[/blue]")


def format_grid(grid: GridView, console: Console) -> None:
    """Display one row per level: path count, then every path."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Level", style="dim", justify="right")
    table.add_column("Paths", style="green", justify="right")
    table.add_column("Choices", overflow="fold")

    for number, level in enumerate(grid.levels, start=1):
        table.add_row(str(number), str(level.count), escape("  ".join(level.choices)))

    console.print(table)


def format_view(view: View, console: Console) -> None:
    from decision_tree.view import FormView

    if isinstance(view, FormView):
        format_form(view, console)
    else:
        format_grid(view, console)


def format_counts(counts: list[int], console: Console) -> None:
    """Display per-level path counts."""
    if not counts:
        console.print("[dim]No steps.[/dim]")
        return
    for number, count in enumerate(counts, start=1):
        console.print(f"  {number}: [green]{count}[/green]")


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)


def format_warning(message: str, console: Console) -> None:
    console.print(f"[yellow]Warning:[/yellow] {escape(message)}", highlight=False)
