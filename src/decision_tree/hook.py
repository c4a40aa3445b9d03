"""Query-string state hook.

SearchParamsHook keeps a typed value in sync with a navigation cell that
holds the current query string. Reads decode the query string (falling back
to a default) and return the previous object when nothing changed by value;
writes re-encode an updated value and skip the navigation update when the
value is unchanged.

The navigation cell is injected, so the hook works the same against a web
framework's request state, the CLI's in-memory cell, or a test double.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar, Union, runtime_checkable

from pydantic import BaseModel

from decision_tree.codec.query import format_query, parse_query
from decision_tree.codec.schema import StructSchema
from decision_tree.exceptions import DefaultValueError, SchemaEncodeError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

Update = Union[Mapping[str, Any], Callable[[ModelT], ModelT]]


@runtime_checkable
class NavigationState(Protocol):
    """Owner of the current query string."""

    def get_query_string(self) -> str: ...

    def set_query_string(self, query_string: str) -> None: ...


class InMemoryNavigation:
    """Navigation cell held in memory.

    Every ``set_query_string`` call is appended to ``history``, so callers can
    tell a write that changed nothing from a write that never happened.
    """

    def __init__(self, initial: str = "") -> None:
        self._query_string = initial.lstrip("?")
        self.history: list[str] = []

    def get_query_string(self) -> str:
        return self._query_string

    def set_query_string(self, query_string: str) -> None:
        self._query_string = query_string
        self.history.append(query_string)

    def __repr__(self) -> str:
        return f"InMemoryNavigation({self._query_string!r})"


def encode_default(schema: StructSchema[ModelT], default: ModelT) -> str:
    """Encode ``default`` to a query string, raising DefaultValueError if it does not conform."""
    try:
        return format_query(schema.encode_strict(default))
    except SchemaEncodeError as exc:
        raise DefaultValueError(default, exc.reason) from exc


class SearchParamsHook(Generic[ModelT]):
    """Typed read/write access to a navigation cell's query string.

    Args:
        schema: Schema between the typed value and the wire mapping.
        default: Value exposed whenever the query string does not decode,
            and written whenever an update produces an invalid value.
        navigation: The cell holding the current query string.

    Raises:
        DefaultValueError: If ``default`` cannot be encoded by ``schema``.
    """

    def __init__(
        self,
        schema: StructSchema[ModelT],
        default: ModelT,
        navigation: NavigationState,
    ) -> None:
        self._schema = schema
        self._default = default
        self._encoded_default = encode_default(schema, default)
        self._navigation = navigation
        # (query string, value) of the last read
        self._memo: Optional[tuple[str, ModelT]] = None
        self._last: Optional[ModelT] = None

    @property
    def default(self) -> ModelT:
        return self._default

    @property
    def encoded_default(self) -> str:
        """Query string written when an update is rejected."""
        return self._encoded_default

    def _decode(self, query_string: str) -> Optional[ModelT]:
        return self._schema.decode(parse_query(query_string))

    def read(self) -> ModelT:
        """Return the current typed value.

        Undecodable query strings yield the default. A decoded value equal to
        the one returned last time is returned as that same object.
        """
        query_string = self._navigation.get_query_string()
        if self._memo is not None and self._memo[0] == query_string:
            logger.debug("Read memo hit: %r", query_string)
            return self._memo[1]

        decoded = self._decode(query_string)
        if decoded is None:
            logger.debug("Query string %r did not decode; using default", query_string)
            value = self._default
        elif self._last is not None and self._last == decoded:
            value = self._last
        else:
            value = decoded

        self._last = value
        self._memo = (query_string, value)
        return value

    def _apply(self, base: ModelT, update: Update) -> Optional[ModelT]:
        if callable(update):
            return update(base)
        return self._schema.coerce({**base.model_dump(), **update})

    def write(self, update: Update) -> None:
        """Apply ``update`` to the current value and store the result.

        ``update`` is either a mapping of field values merged onto the
        current value, or a function from the current value to a new one.
        The current value is the decoded query string, or the default when
        it does not decode.

        An invalid result writes the encoded default instead. A result equal
        to the decoded current value leaves the navigation cell untouched.
        """
        current = self._decode(self._navigation.get_query_string())
        base = current if current is not None else self._default

        candidate = self._apply(base, update)
        if candidate is None or not self._schema.is_valid(candidate):
            logger.debug("Rejected update %r; writing default", update)
            self._navigation.set_query_string(self._encoded_default)
            return

        if current is not None and candidate == current:
            logger.debug("Update left value unchanged; skipping write")
            return

        self._navigation.set_query_string(format_query(self._schema.encode_strict(candidate)))


def make_search_params_hook(
    schema: StructSchema[ModelT], default: ModelT
) -> Callable[[NavigationState], SearchParamsHook[ModelT]]:
    """Check ``default`` once and return a factory binding hooks to navigation cells.

    Raises:
        DefaultValueError: If ``default`` cannot be encoded by ``schema``.
    """
    encode_default(schema, default)

    def bind(navigation: NavigationState) -> SearchParamsHook[ModelT]:
        return SearchParamsHook(schema, default, navigation)

    return bind
