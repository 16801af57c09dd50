from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import ContextManager, Mapping, Sequence

from lr_ui.tui.system.components.presenter_base import PresenterBase, PresenterSink
from lr_ui.tui.system.models import PickItem, TableModel
from lr_ui.tui.system.protocols import UI, Form, Picker, Progress, SelectionChange, TablePresenter


@dataclass
class RecordedTable:
    model: TableModel


@dataclass
class HeadlessUI(UI):
    """Non-interactive UI driven by scripted responses.

    Scripted queues are consumed in order. A ``None`` entry dismisses the
    prompt. Once a queue is empty the UI accepts the defaults (the pre-selected
    item, the current selection, an empty string) when ``accept_defaults`` is
    set, and dismisses otherwise.
    """

    recorded_tables: list[RecordedTable] = field(default_factory=list)
    recorded_messages: list[str] = field(default_factory=list)
    recorded_titles: list[str] = field(default_factory=list)

    # Ids to pick, one entry per pick_one call.
    pick_one_responses: list[str | None] = field(default_factory=list)
    # Ids to toggle (in order, like key presses), one entry per pick_many call.
    pick_many_responses: list[list[str] | None] = field(default_factory=list)
    # Answers for ask()/ask_text(), one entry per call.
    form_responses: list[str | None] = field(default_factory=list)
    confirm_responses: list[bool] = field(default_factory=list)

    accept_defaults: bool = True
    next_confirm_response: bool = True

    def __post_init__(self):
        self.picker = _HeadlessPicker(self)
        self.tables = _HeadlessTablePresenter(self)
        self.present = _HeadlessPresenter(self)
        self.form = _HeadlessForm(self)
        self.progress = _HeadlessProgress(self)


class _HeadlessPicker(Picker):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def pick_one(self, items: Sequence[PickItem], *, title: str, query_hint: str = "") -> PickItem | None:
        self._ui.recorded_titles.append(title)
        if self._ui.pick_one_responses:
            wanted = self._ui.pick_one_responses.pop(0)
            if wanted is None:
                return None
            return next((item for item in items if item.id == wanted and not item.disabled), None)
        if not self._ui.accept_defaults or not items:
            return None
        return next((item for item in items if item.selected), items[0])

    def pick_many(
        self,
        items: Sequence[PickItem],
        *,
        title: str,
        query_hint: str = "",
        on_change: SelectionChange | None = None,
    ) -> list[PickItem] | None:
        self._ui.recorded_titles.append(title)
        displayed = list(items)
        selected = {item.id for item in displayed if item.selected}
        if self._ui.pick_many_responses:
            toggles = self._ui.pick_many_responses.pop(0)
            if toggles is None:
                return None
        elif self._ui.accept_defaults:
            toggles = []
        else:
            return None

        for item_id in toggles:
            # Items that are not displayed cannot be toggled.
            if item_id not in {item.id for item in displayed if not item.disabled}:
                continue
            selected ^= {item_id}
            if on_change is not None:
                view = on_change(frozenset(selected))
                displayed = list(view.items)
                selected = set(view.selected_ids)
        return [item for item in displayed if item.id in selected]


class _HeadlessTablePresenter(TablePresenter):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def show(self, table: TableModel) -> None:
        self._ui.recorded_tables.append(RecordedTable(table))


class _HeadlessPresenterSink(PresenterSink):
    def __init__(self, ui: HeadlessUI) -> None:
        self._ui = ui

    def emit(self, level: str, message: str) -> None:
        self._ui.recorded_messages.append(f"{level.upper()}: {message}")

    def emit_panel(self, title: str, fields: Mapping[str, str]) -> None:
        lines = ", ".join(f"{label}={value}" for label, value in fields.items())
        self._ui.recorded_messages.append(f"SUMMARY: {title}: {lines}")


class _HeadlessPresenter(PresenterBase):
    def __init__(self, ui: HeadlessUI) -> None:
        super().__init__(_HeadlessPresenterSink(ui))


class _HeadlessForm(Form):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def ask(self, prompt: str, default: str | None = None, password: bool = False) -> str:
        if self._ui.form_responses:
            answer = self._ui.form_responses.pop(0)
            if answer is not None:
                return answer
        return default or ""

    def ask_text(self, prompt: str, *, placeholder: str = "") -> str | None:
        if self._ui.form_responses:
            return self._ui.form_responses.pop(0)
        return "" if self._ui.accept_defaults else None

    def confirm(self, prompt: str, default: bool = True) -> bool:
        if self._ui.confirm_responses:
            return self._ui.confirm_responses.pop(0)
        return self._ui.next_confirm_response


class _HeadlessProgress(Progress):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def status(self, message: str) -> ContextManager[None]:
        self._ui.recorded_messages.append(f"STATUS: {message}")
        return nullcontext()
