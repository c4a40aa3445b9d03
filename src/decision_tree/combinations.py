"""Cumulative Cartesian expansion of choice groups.

Each level k holds every path that picks one label from each of the first k
groups, in nesting order: outer loop over level k-1, inner loop over group k.
"""

from __future__ import annotations

from collections.abc import Sequence


def combine_groups(groups: Sequence[Sequence[str]], separator: str = "-") -> list[list[str]]:
    """Expand groups into one list of joined paths per prefix length.

    Example::

        >>> combine_groups([["a", "b"], ["c", "d"]])
        [['a', 'b'], ['a-c', 'a-d', 'b-c', 'b-d']]
    """
    if not groups:
        return []

    levels: list[list[str]] = [list(groups[0])]
    for group in groups[1:]:
        previous = levels[-1]
        levels.append([f"{path}{separator}{label}" for path in previous for label in group])
    return levels


def count_paths(groups: Sequence[Sequence[str]]) -> list[int]:
    """Number of paths at each level, without building them."""
    counts: list[int] = []
    total = 1
    for group in groups:
        total *= len(group)
        counts.append(total)
    return counts
