"""Workflow for making sure an API key is configured."""

from __future__ import annotations

from lr_common.config.settings import CliSettings, SettingsStore
from lr_ui.tui.system.protocols import UI


def prompt_api_key(ui: UI, store: SettingsStore) -> str | None:
    """Ask for a key and persist it. Returns None when the user enters nothing."""
    key = ui.form.ask("Please enter your Luraph API key", password=True).strip()
    if not key:
        ui.present.error("API key must not be empty.")
        return None
    path = store.update_api_key(key)
    ui.present.success(f"API key saved to {path}")
    return key


def ensure_api_key(ui: UI, store: SettingsStore, settings: CliSettings) -> str | None:
    """Return the configured key, offering to set one when it is missing."""
    if settings.api_key:
        return settings.api_key
    ui.present.error("An API key must be configured to use the Luraph API.")
    if not ui.form.confirm("Set API key now?", default=True):
        return None
    return prompt_api_key(ui, store)
