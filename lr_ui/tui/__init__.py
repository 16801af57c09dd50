"""
UI adapter package providing Rich-based and headless renderers.
"""

from lr_ui.tui.system.facade import TUI
from lr_ui.tui.system.headless import HeadlessUI
from lr_ui.tui.system.protocols import UI, Form, Picker, Presenter, Progress, TablePresenter

__all__ = [
    "UI",
    "TUI",
    "HeadlessUI",
    "Picker",
    "TablePresenter",
    "Presenter",
    "Form",
    "Progress",
]
