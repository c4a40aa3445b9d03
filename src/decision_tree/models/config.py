"""Configuration model for the visualizer.

VisualizerConfig names the query parameter that carries the formula and the
characters used to split, join and display it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class VisualizerConfig(BaseModel):
    """Formula syntax and display settings."""

    model_config = {"frozen": True}

    param_name: str = Field(default="steps", min_length=1)
    group_delimiter: str = Field(default="_", min_length=1, max_length=1)
    label_delimiter: str = Field(default=",", min_length=1, max_length=1)
    path_separator: str = "-"
    max_formula_length: int = Field(default=1000, ge=1)

    @model_validator(mode="after")
    def _distinct_delimiters(self) -> VisualizerConfig:
        if self.group_delimiter == self.label_delimiter:
            raise ValueError(
                f"group_delimiter and label_delimiter must differ, "
                f"both are {self.group_delimiter!r}"
            )
        return self
