"""Split a resolved option order into presentation units."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from lr_common.errors import ConfigurationError
from lr_options.models import OptionSet, OptionType


@dataclass(frozen=True)
class Singleton:
    """A single dropdown or text option."""

    option_id: str

    @property
    def ids(self) -> Tuple[str, ...]:
        return (self.option_id,)


@dataclass(frozen=True)
class Cluster:
    """Consecutive checkbox options shown together in one multi-select."""

    option_ids: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.option_ids:
            raise ValueError("A cluster needs at least one option")

    @property
    def ids(self) -> Tuple[str, ...]:
        return self.option_ids


PresentationUnit = Union[Singleton, Cluster]


def segment(order: Sequence[str], options: OptionSet) -> list[PresentationUnit]:
    """Group maximal runs of checkboxes into clusters; everything else stands alone."""
    units: list[PresentationUnit] = []
    cursor = 0
    while cursor < len(order):
        option_id = order[cursor]
        if option_id not in options:
            raise ConfigurationError(
                f"Unknown option {option_id!r} in presentation order",
                context={"option": option_id},
            )
        if options[option_id].type is not OptionType.CHECKBOX:
            units.append(Singleton(option_id))
            cursor += 1
            continue

        start = cursor
        while (
            cursor < len(order)
            and order[cursor] in options
            and options[order[cursor]].type is OptionType.CHECKBOX
        ):
            cursor += 1
        units.append(Cluster(tuple(order[start:cursor])))
    return units


def flatten(units: Sequence[PresentationUnit]) -> list[str]:
    """Concatenate unit ids back into a flat order."""
    return [option_id for unit in units for option_id in unit.ids]
