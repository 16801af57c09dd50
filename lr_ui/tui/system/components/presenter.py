from typing import Mapping

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from lr_ui.tui.core import theme
from lr_ui.tui.system.components.presenter_base import PresenterBase, PresenterSink


class _RichPresenterSink(PresenterSink):
    def __init__(self, console: Console) -> None:
        self._console = console

    def emit(self, level: str, message: str) -> None:
        self._console.print(theme.presenter_message(level, message))

    def emit_panel(self, title: str, fields: Mapping[str, str]) -> None:
        grid = Table.grid(padding=(0, 2))
        grid.add_column(style=theme.RICH_ACCENT_BOLD)
        grid.add_column(overflow="fold")
        for label, value in fields.items():
            grid.add_row(escape(label), escape(value))
        self._console.print(Panel(grid, title=title, border_style=theme.RICH_BORDER_STYLE))


class RichPresenter(PresenterBase):
    def __init__(self, console: Console) -> None:
        super().__init__(_RichPresenterSink(console))
