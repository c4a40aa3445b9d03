"""Decision tree exception hierarchy.

All package-specific exceptions inherit from DecisionTreeError.
"""

from __future__ import annotations


class DecisionTreeError(Exception):
    """Base exception for all decision tree errors."""


class StageError(DecisionTreeError):
    """Raised when a codec stage rejects a value.

    Never escapes a schema: StructSchema.decode and StructSchema.encode
    turn it into ``None``.
    """


class SchemaEncodeError(DecisionTreeError):
    """Raised by strict encoding when a value does not conform to its schema."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot encode {value!r}: {reason}")


class DefaultValueError(SchemaEncodeError):
    """Raised when a hook's default value cannot be encoded by its schema.

    This is a configuration error. It surfaces when the hook factory is
    built, never during a read or write.
    """


class ChoiceNotFoundError(DecisionTreeError):
    """Raised when a view lookup addresses a level or choice that does not exist."""

    def __init__(self, level: int, index: int) -> None:
        self.level = level
        self.index = index
        super().__init__(f"No choice at level {level}, index {index}")
