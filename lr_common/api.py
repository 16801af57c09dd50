"""Public API surface for lr_common."""

from lr_common.config import CliSettings, SettingsStore, default_config_path
from lr_common.errors import (
    ConfigurationError,
    LRError,
    RemoteApiError,
    error_to_payload,
    wrap_error,
)
from lr_common.logging import configure_logging

__all__ = [
    "CliSettings",
    "ConfigurationError",
    "LRError",
    "RemoteApiError",
    "SettingsStore",
    "configure_logging",
    "default_config_path",
    "error_to_payload",
    "wrap_error",
]
