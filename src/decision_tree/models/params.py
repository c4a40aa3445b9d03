"""Typed query parameters for the decision tree view."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

Groups = tuple[tuple[str, ...], ...]


class StepsParams(BaseModel):
    """Decoded state of the visualizer.

    ``steps`` is the parsed formula: an ordered sequence of groups, each an
    ordered sequence of choice labels. ``None`` means no formula was given.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    steps: Optional[Groups] = None
