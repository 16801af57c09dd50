"""Option dependency resolution and interactive collection."""

from lr_options.api import (
    Option,
    OptionCollector,
    OptionSet,
    OptionType,
    collect_options,
    resolve_order,
    segment,
)

__all__ = [
    "Option",
    "OptionCollector",
    "OptionSet",
    "OptionType",
    "collect_options",
    "resolve_order",
    "segment",
]
