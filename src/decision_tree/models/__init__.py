"""Pydantic models: configuration and the typed query parameters."""

from decision_tree.models.config import VisualizerConfig
from decision_tree.models.params import StepsParams

__all__ = ["StepsParams", "VisualizerConfig"]
