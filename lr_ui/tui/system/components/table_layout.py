from __future__ import annotations

import shutil

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from lr_ui.tui.system.models import TableModel


def _console_width(console: Console) -> int | None:
    width = getattr(console.size, "width", None)
    if isinstance(width, int) and width > 0:
        return width
    columns = shutil.get_terminal_size(fallback=(100, 24)).columns
    return columns if columns > 0 else None


def build_rich_table(
    model: TableModel,
    *,
    console: Console,
    show_lines: bool = True,
    border_style: str = "magenta",
    header_style: str = "bold magenta",
    title_style: str = "bold magenta",
    box_style: box.Box = box.ROUNDED,
) -> Table:
    """
    Build a Rich Table from a TableModel that fits the current terminal width.

    Long cells wrap instead of being cut, option descriptions can be lengthy.
    """
    term_width = _console_width(console)
    max_table_width = max(60, (term_width - 2) if term_width else 100)

    title_text = Text.from_markup(str(model.title))
    title_text.no_wrap = True
    title_text.overflow = "ellipsis"

    rich_table = Table(
        title=title_text,
        show_lines=show_lines,
        width=max_table_width if len(model.columns) > 3 else None,
        box=box_style,
        border_style=border_style,
        header_style=header_style,
        title_style=title_style,
    )
    for col in model.columns:
        rich_table.add_column(col, overflow="fold")
    for row in model.rows:
        rich_table.add_row(*[str(cell) for cell in row])
    return rich_table
