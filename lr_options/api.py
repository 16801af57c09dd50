"""Public API surface for lr_options."""

from lr_options.collector import (
    CollectorState,
    OptionCollector,
    OptionPrompter,
    collect_options,
)
from lr_options.evaluator import (
    ClusterView,
    is_satisfied,
    reduce_cluster_selection,
    visible_members,
)
from lr_options.models import (
    Option,
    OptionSet,
    OptionTier,
    OptionType,
    OptionValue,
    UserValues,
    parse_option_set,
    validate_option_set,
)
from lr_options.resolver import resolve_order
from lr_options.segmenter import Cluster, PresentationUnit, Singleton, flatten, segment

__all__ = [
    "Cluster",
    "ClusterView",
    "CollectorState",
    "Option",
    "OptionCollector",
    "OptionPrompter",
    "OptionSet",
    "OptionTier",
    "OptionType",
    "OptionValue",
    "PresentationUnit",
    "Singleton",
    "UserValues",
    "collect_options",
    "flatten",
    "is_satisfied",
    "parse_option_set",
    "reduce_cluster_selection",
    "resolve_order",
    "segment",
    "validate_option_set",
    "visible_members",
]
