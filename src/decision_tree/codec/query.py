"""Conversion between query strings and wire mappings.

A wire mapping is ``dict[str, list[str]]``: one entry per distinct key, with
that key's values in the order they appeared. Parsing and serialization use
``httpx.QueryParams`` so percent and plus encoding follow the usual
``application/x-www-form-urlencoded`` rules.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Optional

import httpx

WireMapping = dict[str, list[str]]


def mapping_from_entries(entries: Iterable[tuple[str, str]]) -> WireMapping:
    """Group key/value pairs by key, keeping value order."""
    result: WireMapping = {}
    for key, value in entries:
        result.setdefault(key, []).append(value)
    return result


def entries_from_mapping(mapping: Mapping[str, Optional[Sequence[str]]]) -> list[tuple[str, str]]:
    """Flatten a mapping into one pair per value. ``None`` entries are skipped."""
    entries: list[tuple[str, str]] = []
    for key, values in mapping.items():
        if values is None:
            continue
        entries.extend((key, value) for value in values)
    return entries


def parse_query(query_string: str) -> WireMapping:
    """Parse ``a=1&a=2&b=`` into ``{"a": ["1", "2"], "b": [""]}``.

    A leading ``?`` is ignored.
    """
    params = httpx.QueryParams(query_string.lstrip("?"))
    return mapping_from_entries(params.multi_items())


def format_query(mapping: Mapping[str, Optional[Sequence[str]]]) -> str:
    """Serialize a wire mapping, repeating keys that carry several values."""
    return str(httpx.QueryParams(entries_from_mapping(mapping)))
