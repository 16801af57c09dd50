"""Presentation helpers for options: tier decoration, pick items and tables."""

from __future__ import annotations

from typing import Sequence

from lr_options.models import Option, OptionSet, OptionTier, OptionType, UserValues
from lr_options.segmenter import Cluster, PresentationUnit
from lr_ui.tui.core import theme
from lr_ui.tui.system.models import PickItem, TableModel

TIER_ICONS: dict[OptionTier, str] = {
    OptionTier.CUSTOMER_ONLY: "",
    OptionTier.PREMIUM_ONLY: "★",
    OptionTier.ADMIN_ONLY: "🔒",
}

TIER_TEXT: dict[OptionTier, str] = {
    OptionTier.CUSTOMER_ONLY: "",
    OptionTier.PREMIUM_ONLY: "Premium feature",
    OptionTier.ADMIN_ONLY: "Administrator-only feature",
}


def tier_badge(tier: OptionTier) -> str:
    """Icon plus text, e.g. "★ Premium feature"; empty for customer options."""
    return " ".join(part for part in (TIER_ICONS[tier], TIER_TEXT[tier]) if part)


def tier_suffix(tier: OptionTier) -> str:
    text = TIER_TEXT[tier]
    return f" ({text})" if text else ""


def checkbox_item(option: Option, *, selected: bool = False) -> PickItem:
    badge = tier_badge(option.tier)
    return PickItem(
        id=option.id,
        title=option.label,
        tags=(badge,) if badge else (),
        description=f"{option.id}{tier_suffix(option.tier)}\n\n{option.description}".rstrip(),
        search_blob=f"{option.label} {option.id}",
        payload=option,
        selected=selected,
    )


def choice_items(option: Option, choices: Sequence[str]) -> list[PickItem]:
    """Dropdown choices; the first is the pre-selected default, the others carry the tier badge."""
    badge = tier_badge(option.tier)
    items: list[PickItem] = []
    for index, choice in enumerate(choices):
        is_default = index == 0
        items.append(
            PickItem(
                id=choice,
                title=choice,
                tags=(badge,) if badge and not is_default else (),
                description="(default)" if is_default else TIER_TEXT[option.tier],
                search_blob=choice,
                payload=option,
                selected=is_default,
            )
        )
    return items


def dropdown_title(option: Option) -> str:
    description = f" - {option.description}" if option.description else ""
    return f"Luraph - Select Option: {option.label}{tier_suffix(option.tier)}{description} [{option.id}]"


def text_prompt(option: Option) -> str:
    description = f"\n{option.description}" if option.description else ""
    return f"Luraph - Select Option: {option.label}{tier_suffix(option.tier)} [{option.id}]{description}"


def text_placeholder(option: Option) -> str:
    return f"Value for {option.label} (leave empty to use default value)"


def format_value(value: bool | str) -> str:
    if isinstance(value, bool):
        return theme.bool_mark(value)
    return value if value else '""'


def build_values_table(options: OptionSet, values: UserValues) -> TableModel:
    """Confirmation table listing every collected value."""
    rows = [
        [options[option_id].label, option_id, format_value(value)]
        for option_id, value in values.items()
    ]
    return TableModel(title="Confirm options", columns=["Option", "ID", "Value"], rows=rows)


def _format_dependencies(option: Option) -> str:
    parts = []
    for dep_id, accepted in option.dependencies.items():
        values = ", ".join(format_value(value) for value in accepted)
        parts.append(f"{dep_id} in [{values}]")
    return "; ".join(parts) or "-"


def build_order_table(
    node_id: str, options: OptionSet, units: Sequence[PresentationUnit]
) -> TableModel:
    """Options in presentation order, grouped by unit."""
    rows: list[list[str]] = []
    for index, unit in enumerate(units, start=1):
        kind = "cluster" if isinstance(unit, Cluster) else "single"
        for option_id in unit.ids:
            option = options[option_id]
            detail = ", ".join(option.choices) if option.type is OptionType.DROPDOWN else ""
            rows.append(
                [
                    f"{index} ({kind})",
                    option_id,
                    option.label,
                    option.type.value,
                    TIER_TEXT[option.tier] or "-",
                    _format_dependencies(option),
                    detail or "-",
                ]
            )
    return TableModel(
        title=f"Options for node {node_id}",
        columns=["Unit", "ID", "Name", "Type", "Tier", "Depends on", "Choices"],
        rows=rows,
    )
