"""Decide which options are currently relevant given the values collected so far."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable, Mapping, Sequence, Tuple

from lr_options.models import Option, OptionValue


def _accepts(accepted: Iterable[OptionValue], value: OptionValue) -> bool:
    # bool is an int subclass; keep True from matching a stray 1 and vice versa.
    return any(type(candidate) is type(value) and candidate == value for candidate in accepted)


def is_satisfied(
    option: Option,
    confirmed: Mapping[str, OptionValue],
    tentative: Mapping[str, OptionValue],
) -> bool:
    """Return True when every dependency of ``option`` is met.

    A dependency is met when either the confirmed value or the tentative
    (in-progress, unconfirmed) value of the referenced option is acceptable.
    Options that have neither are treated as unmet. Confirmed values are
    final, so a tentative entry for an already confirmed id is ignored.
    """
    for dep_id, accepted in option.dependencies.items():
        if dep_id in confirmed:
            if _accepts(accepted, confirmed[dep_id]):
                continue
            return False
        if dep_id in tentative and _accepts(accepted, tentative[dep_id]):
            continue
        return False
    return True


def tentative_values(
    members: Sequence[Option], selected: AbstractSet[str]
) -> dict[str, OptionValue]:
    """Live checkbox states of a cluster: ticked members are True, the rest False."""
    return {member.id: member.id in selected for member in members}


def visible_members(
    members: Sequence[Option],
    confirmed: Mapping[str, OptionValue],
    selected: AbstractSet[str],
) -> list[Option]:
    tentative = tentative_values(members, selected)
    return [member for member in members if is_satisfied(member, confirmed, tentative)]


@dataclass(frozen=True)
class ClusterView:
    """What a checkbox cluster should display: visible ids and retained selection."""

    visible: Tuple[str, ...]
    selected: frozenset[str]

    def is_visible(self, option_id: str) -> bool:
        return option_id in self.visible


def reduce_cluster_selection(
    members: Sequence[Option],
    confirmed: Mapping[str, OptionValue],
    selected: AbstractSet[str],
) -> ClusterView:
    """Recompute the visible subset and drop selections that became invisible.

    Dropping a selection can hide further members that depended on it, so the
    step repeats until the selection is stable. The selection only shrinks,
    which bounds the loop by the cluster size.
    """
    member_ids = {member.id for member in members}
    current = frozenset(option_id for option_id in selected if option_id in member_ids)
    while True:
        visible = visible_members(members, confirmed, current)
        visible_ids = tuple(member.id for member in visible)
        retained = current.intersection(visible_ids)
        if retained == current:
            return ClusterView(visible=visible_ids, selected=retained)
        current = retained
