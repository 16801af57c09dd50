"""Interactive collection of option values, one presentation unit at a time."""

from __future__ import annotations

import logging
from enum import Enum
from typing import AbstractSet, Callable, Protocol, Sequence

from lr_common.errors import ConfigurationError
from lr_options.evaluator import ClusterView, reduce_cluster_selection
from lr_options.models import Option, OptionSet, OptionType, UserValues, validate_option_set
from lr_options.resolver import resolve_order
from lr_options.segmenter import Cluster, PresentationUnit, Singleton, segment

logger = logging.getLogger(__name__)

ClusterViewFn = Callable[[AbstractSet[str]], ClusterView]


class CollectorState(str, Enum):
    AWAITING_UNIT = "awaiting_unit"
    PRESENTING_DROPDOWN = "presenting_dropdown"
    PRESENTING_TEXT = "presenting_text"
    PRESENTING_CLUSTER = "presenting_cluster"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OptionPrompter(Protocol):
    """The three interactions the collector needs from a display surface.

    Every method returns None when the user dismisses the prompt.
    """

    def choose(self, option: Option, choices: Sequence[str]) -> str | None: ...

    def toggle_cluster(
        self, members: Sequence[Option], view_for: ClusterViewFn
    ) -> frozenset[str] | None: ...

    def ask_text(self, option: Option) -> str | None: ...


class OptionCollector:
    """Walks presentation units in order and records the confirmed values.

    ``run`` returns the full value map, or None when the user cancels at any
    step. Nothing collected before a cancellation is kept.
    """

    def __init__(
        self,
        options: OptionSet,
        prompter: OptionPrompter,
        order: Sequence[str] | None = None,
    ) -> None:
        self.options = options
        self.prompter = prompter
        self._order = list(order) if order is not None else None
        self._values: UserValues = {}
        self.state = CollectorState.AWAITING_UNIT

    @property
    def values(self) -> UserValues:
        """Values confirmed so far (empty after a cancellation)."""
        return dict(self._values)

    def units(self) -> list[PresentationUnit]:
        validate_option_set(self.options)
        if self._order is None:
            self._order = resolve_order(self.options)
        elif len(self._order) != len(set(self._order)) or set(self._order) != set(self.options):
            raise ConfigurationError(
                "Presentation order must list every option exactly once",
                context={
                    "missing": sorted(set(self.options) - set(self._order)),
                    "unknown": sorted(set(self._order) - set(self.options)),
                    "duplicates": sorted({i for i in self._order if self._order.count(i) > 1}),
                },
            )
        return segment(self._order, self.options)

    def run(self) -> UserValues | None:
        if self.state is not CollectorState.AWAITING_UNIT or self._values:
            raise RuntimeError("OptionCollector.run() can only be called once")

        for unit in self.units():
            self._transition(CollectorState.AWAITING_UNIT)
            if isinstance(unit, Cluster):
                accepted = self._present_cluster(unit)
            else:
                accepted = self._present_singleton(unit)
            if not accepted:
                self._cancel()
                return None

        self._transition(CollectorState.COMPLETED)
        return self.values

    def _transition(self, state: CollectorState) -> None:
        logger.debug("Collector state %s -> %s", self.state.value, state.value)
        self.state = state

    def _cancel(self) -> None:
        self._values.clear()
        self._transition(CollectorState.CANCELLED)
        logger.info("Option selection cancelled by user")

    def _confirm(self, option_id: str, value: bool | str) -> None:
        if option_id in self._values:
            raise RuntimeError(f"Option {option_id!r} was already confirmed")
        self._values[option_id] = value

    def _present_singleton(self, unit: Singleton) -> bool:
        option = self.options[unit.option_id]
        if option.type is OptionType.DROPDOWN:
            self._transition(CollectorState.PRESENTING_DROPDOWN)
            picked = self.prompter.choose(option, option.choices)
            if picked is None:
                return False
            if picked not in option.choices:
                raise ConfigurationError(
                    f"{picked!r} is not a valid choice for option {option.id!r}",
                    context={"option": option.id, "value": picked},
                )
            self._confirm(option.id, picked)
            return True

        if option.type is OptionType.TEXT:
            self._transition(CollectorState.PRESENTING_TEXT)
            text = self.prompter.ask_text(option)
            # An empty answer ends the run like a dismissal.
            if not text:
                return False
            self._confirm(option.id, text)
            return True

        raise ConfigurationError(
            f"Received invalid option type: {option.type}",
            context={"option": option.id},
        )

    def _present_cluster(self, unit: Cluster) -> bool:
        self._transition(CollectorState.PRESENTING_CLUSTER)
        members = [self.options[option_id] for option_id in unit.option_ids]
        confirmed = dict(self._values)

        def view_for(selected: AbstractSet[str]) -> ClusterView:
            return reduce_cluster_selection(members, confirmed, selected)

        selected = self.prompter.toggle_cluster(members, view_for)
        if selected is None:
            return False

        final = view_for(selected).selected
        for member in members:
            self._confirm(member.id, member.id in final)
        return True


def collect_options(
    options: OptionSet,
    prompter: OptionPrompter,
    order: Sequence[str] | None = None,
) -> UserValues | None:
    """Run a fresh collector over ``options``."""
    return OptionCollector(options, prompter, order=order).run()
