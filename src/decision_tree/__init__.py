"""Decision tree visualizer.

Turns a steps formula such as ``s1,s2_r1,r2,r3`` into every choice path
reachable at each step, with the formula kept in a query string through a
typed, memoized state hook.
"""

from decision_tree._version import __version__

# Core helpers
from decision_tree.combinations import combine_groups, count_paths

# Codec
from decision_tree.codec import (
    BooleanFromString,
    Each,
    MaxLength,
    NonEmpty,
    Pipeline,
    RequiredHead,
    Split,
    Stage,
    StructSchema,
    WireMapping,
    format_query,
    parse_query,
    steps_schema,
)

# State hook
from decision_tree.hook import (
    InMemoryNavigation,
    NavigationState,
    SearchParamsHook,
    make_search_params_hook,
)

# Models
from decision_tree.models import StepsParams, VisualizerConfig

# View
from decision_tree.view import ClipboardSink, FormView, GridView, Level, build_view, copy_choice

# Exceptions
from decision_tree.exceptions import (
    ChoiceNotFoundError,
    DecisionTreeError,
    DefaultValueError,
    SchemaEncodeError,
    StageError,
)

__all__ = [
    "__version__",
    "combine_groups",
    "count_paths",
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
    "format_query",
    "parse_query",
    "steps_schema",
    "InMemoryNavigation",
    "NavigationState",
    "SearchParamsHook",
    "make_search_params_hook",
    "StepsParams",
    "VisualizerConfig",
    "ClipboardSink",
    "FormView",
    "GridView",
    "Level",
    "build_view",
    "copy_choice",
    "ChoiceNotFoundError",
    "DecisionTreeError",
    "DefaultValueError",
    "SchemaEncodeError",
    "StageError",
]
