from __future__ import annotations

from typing import Mapping

from rich.markup import escape

RICH_ACCENT = "magenta"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = RICH_ACCENT

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
    "cancelled": "[yellow]⏹ {message}[/yellow]",
}

CHECKED_MARK = "✅"
UNCHECKED_MARK = "❌"


def presenter_message(level: str, message: str) -> str:
    template = PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=escape(message))


def bool_mark(value: bool) -> str:
    return CHECKED_MARK if value else UNCHECKED_MARK


def prompt_toolkit_picker_style() -> Mapping[str, str]:
    return {
        "selected": "bg:#5f005f fg:white bold",
        "checked": "fg:#00ff00 bold",
        "separator": "fg:#5f005f",
        "frame.border": "fg:#5f005f",
        "frame.label": "fg:#5f005f bold",
        "search": "bg:#eeeeee fg:#000000",
        "disabled": "fg:#aa0000",
        "hint": "italic",
    }
