"""Shared test fixtures for the decision tree visualizer.

Provides the steps schema, in-memory navigation cells, and hooks bound to them.
"""

import pytest

from decision_tree.codec.schema import steps_schema
from decision_tree.hook import InMemoryNavigation, SearchParamsHook
from decision_tree.models.config import VisualizerConfig
from decision_tree.models.params import StepsParams


@pytest.fixture
def config() -> VisualizerConfig:
    return VisualizerConfig()


@pytest.fixture
def schema(config):
    return steps_schema(config)


@pytest.fixture
def navigation() -> InMemoryNavigation:
    return InMemoryNavigation()


@pytest.fixture
def hook(schema, navigation) -> SearchParamsHook:
    return SearchParamsHook(schema, StepsParams(), navigation)


# ------------------------------------------------------------------
# Shared test helpers
# ------------------------------------------------------------------

def make_hook(query: str = "", **config_kwargs) -> tuple[SearchParamsHook, InMemoryNavigation]:
    """Create a steps hook over a fresh navigation cell seeded with ``query``."""
    navigation = InMemoryNavigation(query)
    schema = steps_schema(VisualizerConfig(**config_kwargs))
    return SearchParamsHook(schema, StepsParams(), navigation), navigation


class RecordingClipboard:
    """Clipboard sink that remembers everything written to it."""

    def __init__(self) -> None:
        self.texts: list[str] = []

    def write_text(self, text: str) -> None:
        self.texts.append(text)
