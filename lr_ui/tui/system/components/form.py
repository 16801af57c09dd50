from prompt_toolkit import prompt as pt_prompt
from rich.console import Console
from rich.prompt import Confirm, Prompt

from lr_ui.tui.system.protocols import Form


class RichForm(Form):
    def __init__(self, console: Console):
        self._console = console

    def ask(self, prompt: str, default: str | None = None, password: bool = False) -> str:
        kwargs = {}
        if default is not None:
            kwargs["default"] = default
        if password:
            kwargs["password"] = True

        return Prompt.ask(prompt, console=self._console, **kwargs)

    def ask_text(self, prompt: str, *, placeholder: str = "") -> str | None:
        """Free-text input; Ctrl-C / Ctrl-D cancel and return None."""
        self._console.print(prompt)
        try:
            return pt_prompt("> ", placeholder=placeholder or None)
        except (KeyboardInterrupt, EOFError):
            return None

    def confirm(self, prompt: str, default: bool = True) -> bool:
        return Confirm.ask(prompt, console=self._console, default=default)
