"""Schema codec: typed values <-> wire mappings <-> query strings."""

from decision_tree.codec.query import (
    WireMapping,
    entries_from_mapping,
    format_query,
    mapping_from_entries,
    parse_query,
)
from decision_tree.codec.schema import StructSchema, formula_stage, steps_schema
from decision_tree.codec.stages import (
    BooleanFromString,
    Each,
    MaxLength,
    NonEmpty,
    Pipeline,
    RequiredHead,
    Split,
    Stage,
)

__all__ = [
    "BooleanFromString",
    "Each",
    "MaxLength",
    "NonEmpty",
    "Pipeline",
    "RequiredHead",
    "Split",
    "Stage",
    "StructSchema",
    "WireMapping",
    "entries_from_mapping",
    "format_query",
    "formula_stage",
    "mapping_from_entries",
    "parse_query",
    "steps_schema",
]
