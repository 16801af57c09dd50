from __future__ import annotations

import sys
from typing import Any, Sequence

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from lr_ui.tui.core import theme
from lr_ui.tui.system.components.flat_picker_panel import FlatPickerPanel
from lr_ui.tui.system.models import PickItem
from lr_ui.tui.system.protocols import Picker, SelectionChange


class _PickerApp:
    """Full-screen list picker (single or multi select).

    In multi-select mode an ``on_change`` callback may replace the displayed
    items after every toggle; the selection it returns replaces ours.
    """

    def __init__(
        self,
        items: Sequence[PickItem],
        title: str,
        multi_select: bool = False,
        on_change: SelectionChange | None = None,
    ):
        self.items: list[PickItem] = list(items)
        self.title = title
        self.multi_select = multi_select
        self.on_change = on_change

        self.selected_ids: set[str] = set()
        if multi_select:
            self.selected_ids = {item.id for item in self.items if item.selected}

        self._panel = FlatPickerPanel(self.items, row_renderer=self._render_row)
        self.search = self._panel.search
        self.list_control = self._panel.list_control
        self.preview_control = self._panel.preview_control

        if not multi_select:
            default = next((item for item in self.items if item.selected), None)
            if default is not None:
                self._panel.focus_id(default.id)

        self.kb = self._keybindings()

        inner_layout = HSplit(
            [
                self.search,
                Window(height=1, char="-", style="class:separator"),
                VSplit(
                    [
                        Window(self.list_control, width=Dimension(weight=1)),
                        Window(width=1, char="|", style="class:separator"),
                        Window(self.preview_control, width=Dimension(weight=1)),
                    ],
                    padding=1,
                ),
                Window(height=1, content=FormattedTextControl(self._hint)),
            ]
        )

        self.app: Application = Application(
            layout=Layout(Frame(inner_layout, title=title), focused_element=self.search),
            key_bindings=self.kb,
            style=Style.from_dict(dict(theme.prompt_toolkit_picker_style())),
            full_screen=True,
        )

        self.search.buffer.on_text_changed += lambda _: self._apply_filter()

        if self.on_change is not None:
            self._refresh_view()

    @property
    def filtered(self) -> list[PickItem]:
        return self._panel.filtered

    @property
    def index(self) -> int:
        return self._panel.selected_index

    def _hint(self) -> list[tuple[str, str]]:
        if self.multi_select:
            return [("class:hint", " Space=toggle  Enter=accept  Esc=cancel")]
        return [("class:hint", " Enter=select  Esc=cancel")]

    def _exit(self, app: Application, result: Any) -> None:
        """Exit the prompt safely, ignoring duplicate-exit errors."""
        try:
            app.exit(result=result)
        except Exception as exc:  # pragma: no cover - defensive
            if "Return value already set" in str(exc):
                return
            raise

    def _apply_filter(self) -> None:
        self._panel.apply_filter(reset_index=True)
        self.app.invalidate()

    def _render_row(self, item: PickItem, is_selected: bool) -> tuple[str, str]:
        prefix = "   "
        checked = item.id in self.selected_ids
        if self.multi_select:
            prefix = "[x]" if checked else "[ ]"
        elif item.selected:
            prefix = " * "

        style = ""
        if is_selected:
            style = "class:selected"
        elif item.disabled:
            style = "class:disabled"
        elif checked:
            style = "class:checked"

        suffix = f"  {item.tags[0]}" if item.tags else ""
        return style, f" {prefix} {item.title}{suffix}"

    def _keybindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("down")
        def _(e: Any) -> None:
            self._panel.move(1)
            self.app.invalidate()

        @kb.add("up")
        def _(e: Any) -> None:
            self._panel.move(-1)
            self.app.invalidate()

        @kb.add("enter")
        def _(e: Any) -> None:
            if self.multi_select:
                self._exit(e.app, self._build_multi_result())
                return
            current = self._panel.selected_item
            if current is not None and not current.disabled:
                self._exit(e.app, current)

        @kb.add("space")
        def _(e: Any) -> None:
            if self.multi_select:
                self.toggle(self._panel.selected_item)

        @kb.add("escape")
        @kb.add("c-c")
        def _(e: Any) -> None:
            self._exit(e.app, None)

        return kb

    def toggle(self, item: PickItem | None) -> None:
        if item is None or item.disabled:
            return
        if item.id in self.selected_ids:
            self.selected_ids.discard(item.id)
        else:
            self.selected_ids.add(item.id)
        self._refresh_view(focus_id=item.id)
        self.app.invalidate()

    def _refresh_view(self, focus_id: str | None = None) -> None:
        if self.on_change is None:
            return
        view = self.on_change(frozenset(self.selected_ids))
        self.selected_ids = set(view.selected_ids)
        new_items = list(view.items)
        if [item.id for item in new_items] != [item.id for item in self.items]:
            self.items = new_items
            self._panel.set_items(new_items, keep_filter=True)
            if focus_id is not None:
                self._panel.focus_id(focus_id)

    def _build_multi_result(self) -> list[PickItem]:
        return [item for item in self.items if item.id in self.selected_ids]

    def run(self) -> Any:
        return self.app.run()


class PowerPicker(Picker):
    def pick_one(
        self,
        items: Sequence[PickItem],
        *,
        title: str,
        query_hint: str = ""
    ) -> PickItem | None:
        if not items:
            return None
        if not sys.stdin.isatty() or not sys.stdout.isatty():
            return None
        app = _PickerApp(items, title, multi_select=False)
        if query_hint:
            app.search.text = query_hint
        return app.run()

    def pick_many(
        self,
        items: Sequence[PickItem],
        *,
        title: str,
        query_hint: str = "",
        on_change: SelectionChange | None = None,
    ) -> list[PickItem] | None:
        if not sys.stdin.isatty() or not sys.stdout.isatty():
            return None
        app = _PickerApp(items, title, multi_select=True, on_change=on_change)
        if query_hint:
            app.search.text = query_hint
        return app.run()
