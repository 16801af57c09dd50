from rich.console import Console

from lr_ui.tui.system.components.form import RichForm
from lr_ui.tui.system.components.picker import PowerPicker
from lr_ui.tui.system.components.presenter import RichPresenter
from lr_ui.tui.system.components.progress import RichProgress
from lr_ui.tui.system.components.table import RichTablePresenter
from lr_ui.tui.system.protocols import UI, Form, Picker, Presenter, Progress, TablePresenter


class TUI(UI):
    def __init__(self, console: Console | None = None):
        self._console = console or Console()
        self.picker: Picker = PowerPicker()
        self.tables: TablePresenter = RichTablePresenter(self._console)
        self.present: Presenter = RichPresenter(self._console)
        self.form: Form = RichForm(self._console)
        self.progress: Progress = RichProgress(self._console)
