"""Composable codec stages.

A stage converts a value one step closer to its typed form on ``decode`` and
one step back toward its wire form on ``encode``. Both directions raise
StageError on a value they cannot handle. Stages chain with ``pipe``::

    formula = NonEmpty().pipe(MaxLength(1000)).pipe(Split("_")).pipe(Each(Split(",")))

A pipeline decodes left to right and encodes right to left. Encoders reject
any value whose encoding would not decode back to the same value, so a
successful encode is always round-trip stable.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from decision_tree.exceptions import StageError


class Stage:
    """Base class for a bidirectional codec step."""

    def decode(self, value: Any) -> Any:
        raise NotImplementedError

    def encode(self, value: Any) -> Any:
        raise NotImplementedError

    def pipe(self, other: Stage) -> Pipeline:
        """Return a stage that runs ``self`` then ``other`` when decoding."""
        left = self.stages if isinstance(self, Pipeline) else (self,)
        right = other.stages if isinstance(other, Pipeline) else (other,)
        return Pipeline(left + right)


def _require_str(value: Any, stage: str) -> str:
    if not isinstance(value, str):
        raise StageError(f"{stage}: expected a string, got {type(value).__name__}")
    return value


def _require_sequence(value: Any, stage: str) -> Sequence[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise StageError(f"{stage}: expected a sequence, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Pipeline(Stage):
    """Stages applied in order on decode and in reverse on encode."""

    stages: tuple[Stage, ...]

    def decode(self, value: Any) -> Any:
        for stage in self.stages:
            value = stage.decode(value)
        return value

    def encode(self, value: Any) -> Any:
        for stage in reversed(self.stages):
            value = stage.encode(value)
        return value


@dataclass(frozen=True)
class NonEmpty(Stage):
    """A string with at least one character."""

    def _check(self, value: Any) -> str:
        text = _require_str(value, "NonEmpty")
        if not text:
            raise StageError("NonEmpty: empty string")
        return text

    def decode(self, value: Any) -> str:
        return self._check(value)

    def encode(self, value: Any) -> str:
        return self._check(value)


@dataclass(frozen=True)
class MaxLength(Stage):
    """A string of at most ``limit`` characters."""

    limit: int

    def _check(self, value: Any) -> str:
        text = _require_str(value, "MaxLength")
        if len(text) > self.limit:
            raise StageError(f"MaxLength: {len(text)} characters exceeds {self.limit}")
        return text

    def decode(self, value: Any) -> str:
        return self._check(value)

    def encode(self, value: Any) -> str:
        return self._check(value)


@dataclass(frozen=True)
class Split(Stage):
    """Split a string on ``delimiter``; join with it on encode.

    ``str.split`` always yields at least one part, so encode refuses an
    empty sequence, as well as parts that contain the delimiter.
    """

    delimiter: str

    def decode(self, value: Any) -> tuple[str, ...]:
        return tuple(_require_str(value, "Split").split(self.delimiter))

    def encode(self, value: Any) -> str:
        parts = _require_sequence(value, "Split")
        if not parts:
            raise StageError("Split: cannot join an empty sequence")
        for part in parts:
            _require_str(part, "Split")
            if self.delimiter in part:
                raise StageError(f"Split: part {part!r} contains delimiter {self.delimiter!r}")
        return self.delimiter.join(parts)


@dataclass(frozen=True)
class Each(Stage):
    """Apply ``item`` to every element of a sequence."""

    item: Stage

    def decode(self, value: Any) -> tuple[Any, ...]:
        return tuple(self.item.decode(v) for v in _require_sequence(value, "Each"))

    def encode(self, value: Any) -> tuple[Any, ...]:
        return tuple(self.item.encode(v) for v in _require_sequence(value, "Each"))


@dataclass(frozen=True)
class RequiredHead(Stage):
    """Expose a multi-valued parameter as a scalar.

    Decode keeps only the first element of a non-empty sequence and hands it
    to ``item``. Encode wraps the encoded scalar in a one-element list.
    """

    item: Stage

    def decode(self, value: Any) -> Any:
        values = _require_sequence(value, "RequiredHead")
        if not values:
            raise StageError("RequiredHead: no values")
        return self.item.decode(values[0])

    def encode(self, value: Any) -> list[Any]:
        return [self.item.encode(value)]


@dataclass(frozen=True)
class BooleanFromString(Stage):
    """``"true"`` decodes to True and any other string to False."""

    def decode(self, value: Any) -> bool:
        return _require_str(value, "BooleanFromString") == "true"

    def encode(self, value: Any) -> str:
        if not isinstance(value, bool):
            raise StageError(f"BooleanFromString: expected a bool, got {type(value).__name__}")
        return "true" if value else "false"
