from typing import AbstractSet, Sequence

from lr_options.collector import ClusterViewFn, OptionPrompter
from lr_options.models import Option
from lr_ui.presenters.options import (
    checkbox_item,
    choice_items,
    dropdown_title,
    text_placeholder,
    text_prompt,
)
from lr_ui.tui.system.models import PickView
from lr_ui.tui.system.protocols import UI

CHECKBOX_TITLE = "Luraph - Select Options (checkbox)"


class OptionPrompterAdapter(OptionPrompter):
    """Adapts the UI facade to the collector's OptionPrompter protocol."""

    def __init__(self, ui: UI):
        self.ui = ui

    def choose(self, option: Option, choices: Sequence[str]) -> str | None:
        picked = self.ui.picker.pick_one(choice_items(option, choices), title=dropdown_title(option))
        return picked.id if picked is not None else None

    def toggle_cluster(
        self, members: Sequence[Option], view_for: ClusterViewFn
    ) -> frozenset[str] | None:
        by_id = {member.id: member for member in members}

        def to_view(selected: AbstractSet[str]) -> PickView:
            view = view_for(selected)
            return PickView(
                items=[
                    checkbox_item(by_id[option_id], selected=option_id in view.selected)
                    for option_id in view.visible
                ],
                selected_ids=view.selected,
            )

        initial = to_view(frozenset())
        picked = self.ui.picker.pick_many(initial.items, title=CHECKBOX_TITLE, on_change=to_view)
        if picked is None:
            return None
        return frozenset(item.id for item in picked)

    def ask_text(self, option: Option) -> str | None:
        return self.ui.form.ask_text(text_prompt(option), placeholder=text_placeholder(option))
