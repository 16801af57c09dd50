"""Presentation order for a set of interdependent options."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from lr_common.errors import ConfigurationError
from lr_options.models import OptionSet, OptionType

logger = logging.getLogger(__name__)


def stable_partition(ids: Iterable[str], predicate: Callable[[str], bool]) -> list[str]:
    """Move ids matching ``predicate`` to the front, keeping relative order."""
    head: list[str] = []
    tail: list[str] = []
    for option_id in ids:
        (head if predicate(option_id) else tail).append(option_id)
    return head + tail


def _require(options: OptionSet, option_id: str, referenced_by: str | None = None) -> None:
    if option_id in options:
        return
    if referenced_by is None:
        raise ConfigurationError(
            f"Unknown option {option_id!r}", context={"option": option_id}
        )
    raise ConfigurationError(
        f"Option {referenced_by!r} depends on unknown option {option_id!r}",
        context={"option": referenced_by, "dependency": option_id},
    )


def linked_ids(options: OptionSet) -> list[str]:
    """Ids of options that declare dependencies, each followed by its dependencies.

    Duplicates are kept; they are removed by the topological pass.
    """
    linked: list[str] = []
    for option_id, option in options.items():
        if not option.dependencies:
            continue
        linked.append(option_id)
        for dep_id in option.dependencies:
            _require(options, dep_id, referenced_by=option_id)
            linked.append(dep_id)
    return linked


def topological_sort(ids: Iterable[str], options: OptionSet) -> list[str]:
    """Depth-first post-order: dependencies are emitted before their dependents.

    Every id is visited at most once, so a dependency cycle terminates; the
    repeated visit is dropped instead of being reported.
    """
    visited: set[str] = set()
    result: list[str] = []

    def visit(option_id: str) -> None:
        if option_id in visited:
            return
        visited.add(option_id)
        _require(options, option_id)
        for dep_id in options[option_id].dependencies:
            _require(options, dep_id, referenced_by=option_id)
            visit(dep_id)
        result.append(option_id)

    for option_id in ids:
        visit(option_id)
    return result


def resolve_order(options: OptionSet) -> list[str]:
    """Return every option id once, in the order options should be asked about."""

    def is_dropdown(option_id: str) -> bool:
        return options[option_id].type is OptionType.DROPDOWN

    def is_checkbox(option_id: str) -> bool:
        return options[option_id].type is OptionType.CHECKBOX

    linked = stable_partition(linked_ids(options), is_dropdown)
    ordered = topological_sort(linked, options)
    ordered.extend(stable_partition(options.keys(), is_checkbox))

    seen: set[str] = set()
    result: list[str] = []
    for option_id in ordered:
        if option_id not in seen:
            seen.add(option_id)
            result.append(option_id)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Resolved option order: %s",
            [f"{option_id} : {options[option_id].type.value}" for option_id in result],
        )
    return result
