import pytest
from rich.console import Console

from lr_ui.tui.system.facade import TUI
from lr_ui.tui.system.models import TableModel

pytestmark = pytest.mark.unit_ui


@pytest.fixture
def console():
    return Console(record=True, width=100, force_terminal=False)


def test_tables_and_messages_render(console):
    ui = TUI(console=console)
    ui.tables.show(
        TableModel(
            title="Confirm options",
            columns=["Option", "ID", "Value"],
            rows=[["Alpha", "A", "✅"], ["Gamma", "C", "y"]],
        )
    )
    ui.present.success("Saved obfuscated script to out.lua")
    ui.present.warning("[luraph-cli] names are kept literally")

    text = console.export_text()
    assert "Confirm options" in text
    assert "Alpha" in text and "Gamma" in text
    assert "✔ Saved obfuscated script to out.lua" in text
    assert "[luraph-cli] names are kept literally" in text


def test_status_is_a_context_manager(console):
    ui = TUI(console=console)
    with ui.progress.status("Fetching Luraph Nodes..."):
        pass


def test_form_prompts_use_rich(monkeypatch, console):
    asked = {}

    def fake_ask(prompt, console=None, **kwargs):
        asked.update(prompt=prompt, **kwargs)
        return "secret"

    monkeypatch.setattr("lr_ui.tui.system.components.form.Prompt.ask", fake_ask)
    monkeypatch.setattr(
        "lr_ui.tui.system.components.form.Confirm.ask",
        lambda prompt, console=None, default=True: default,
    )
    ui = TUI(console=console)

    assert ui.form.ask("API key", password=True) == "secret"
    assert asked == {"prompt": "API key", "password": True}
    assert ui.form.confirm("Obfuscate with these options?", default=False) is False


def test_ask_text_cancel_returns_none(monkeypatch, console):
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr("lr_ui.tui.system.components.form.pt_prompt", interrupted)
    assert TUI(console=console).form.ask_text("Value?") is None


def test_summary_and_cancelled_render(console):
    ui = TUI(console=console)
    ui.present.summary("Obfuscation complete", {"Node": "node-b", "Output": "dist/[x].lua"})
    ui.present.cancelled("Selection cancelled.")

    text = console.export_text()
    assert "Obfuscation complete" in text
    assert "node-b" in text
    assert "dist/[x].lua" in text
    assert "⏹ Selection cancelled." in text
