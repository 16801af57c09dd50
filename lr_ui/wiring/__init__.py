"""UI wiring helpers for CLI/TUI setup."""

from lr_ui.wiring.dependencies import UIContext, configure_logging

__all__ = ["UIContext", "configure_logging"]
