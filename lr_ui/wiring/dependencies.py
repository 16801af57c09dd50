from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from lr_client.client import LuraphClient
from lr_common.api import configure_logging
from lr_common.config.settings import CliSettings, SettingsStore
from lr_ui.tui.system.facade import TUI
from lr_ui.tui.system.protocols import UI

ClientFactory = Callable[[CliSettings, str], LuraphClient]


def _default_client_factory(settings: CliSettings, api_key: str) -> LuraphClient:
    return LuraphClient(
        api_key=api_key,
        base_url=settings.api_url,
        timeout_seconds=settings.timeout_seconds,
    )


@dataclass
class UIContext:
    """Container for UI services and state, initialized lazily."""
    headless: bool = False

    _ui: Optional[UI] = None
    _settings_store: Optional[SettingsStore] = None
    client_factory: ClientFactory = _default_client_factory

    @property
    def ui(self) -> UI:
        if self._ui is None:
            if self.headless:
                from lr_ui.tui.system.headless import HeadlessUI
                self._ui = HeadlessUI()
            else:
                self._ui = TUI()
        return self._ui

    @ui.setter
    def ui(self, value: UI):
        self._ui = value

    @property
    def settings_store(self) -> SettingsStore:
        if self._settings_store is None:
            self._settings_store = SettingsStore.default()
        return self._settings_store

    @settings_store.setter
    def settings_store(self, value: SettingsStore):
        self._settings_store = value

    def load_settings(self) -> CliSettings:
        return self.settings_store.load()

    def build_client(self, settings: CliSettings, api_key: str) -> LuraphClient:
        return self.client_factory(settings, api_key)


__all__ = [
    "ClientFactory",
    "UIContext",
    "configure_logging",
]
