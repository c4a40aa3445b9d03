"""View models for the decision tree.

build_view picks the branch the page shows: a prompt asking for a formula
when none is set, otherwise a grid with one row per decision level.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from decision_tree.combinations import combine_groups
from decision_tree.exceptions import ChoiceNotFoundError
from decision_tree.models.config import VisualizerConfig
from decision_tree.models.params import StepsParams

FORMULA_PLACEHOLDER = "s1,s2_r1,r2,r3"


@runtime_checkable
class ClipboardSink(Protocol):
    """Destination for copied choice paths."""

    def write_text(self, text: str) -> None: ...


@dataclass(frozen=True)
class FormView:
    """Shown when no formula is set."""

    prompt: str
    placeholder: str = FORMULA_PLACEHOLDER


@dataclass(frozen=True)
class Level:
    """One row of the grid: every path up to a given step."""

    choices: tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.choices)


@dataclass(frozen=True)
class GridView:
    levels: tuple[Level, ...]

    def choice(self, level: int, index: int) -> str:
        """Path at 1-based ``level`` and ``index``."""
        if not 1 <= level <= len(self.levels):
            raise ChoiceNotFoundError(level, index)
        choices = self.levels[level - 1].choices
        if not 1 <= index <= len(choices):
            raise ChoiceNotFoundError(level, index)
        return choices[index - 1]


View = Union[FormView, GridView]


def formula_example(config: VisualizerConfig) -> str:
    """The placeholder formula written with the configured delimiters."""
    return FORMULA_PLACEHOLDER.replace(",", "\0").replace("_", config.group_delimiter).replace(
        "\0", config.label_delimiter
    )


def build_view(params: StepsParams, config: VisualizerConfig | None = None) -> View:
    config = config or VisualizerConfig()
    if not params.steps:
        example = formula_example(config)
        return FormView(
            prompt=(
                f"Enter steps formula in the format {example}, "
                f"where s,r are the possible choice steps"
            ),
            placeholder=example,
        )
    levels = combine_groups(params.steps, config.path_separator)
    return GridView(levels=tuple(Level(choices=tuple(level)) for level in levels))


def copy_choice(grid: GridView, level: int, index: int, sink: ClipboardSink) -> str:
    """Write the path at ``level``/``index`` to ``sink`` and return it."""
    choice = grid.choice(level, index)
    sink.write_text(choice)
    return choice
