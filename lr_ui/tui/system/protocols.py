from typing import Callable, ContextManager, Mapping, Protocol, Sequence

from lr_ui.tui.system.models import PickItem, PickView, TableModel

SelectionChange = Callable[[frozenset[str]], PickView]


class TablePresenter(Protocol):
    def show(self, table: TableModel) -> None: ...


class Picker(Protocol):
    def pick_one(
        self,
        items: Sequence[PickItem],
        *,
        title: str,
        query_hint: str = ""
    ) -> PickItem | None: ...

    def pick_many(
        self,
        items: Sequence[PickItem],
        *,
        title: str,
        query_hint: str = "",
        on_change: SelectionChange | None = None,
    ) -> list[PickItem] | None: ...


class Presenter(Protocol):
    def info(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def success(self, message: str) -> None: ...
    def cancelled(self, message: str) -> None: ...
    def summary(self, title: str, fields: Mapping[str, str]) -> None: ...


class Form(Protocol):
    def ask(self, prompt: str, default: str | None = None, password: bool = False) -> str: ...
    def ask_text(self, prompt: str, *, placeholder: str = "") -> str | None: ...
    def confirm(self, prompt: str, default: bool = True) -> bool: ...


class Progress(Protocol):
    def status(self, message: str) -> ContextManager[None]: ...


class UI(Protocol):
    picker: Picker
    tables: TablePresenter
    present: Presenter
    form: Form
    progress: Progress
