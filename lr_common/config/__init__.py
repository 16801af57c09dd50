"""Configuration helpers for luraph-cli."""

from lr_common.config.env import parse_bool_env, parse_float_env, parse_str_env
from lr_common.config.settings import (
    CliSettings,
    DEFAULT_API_URL,
    SettingsStore,
    default_config_path,
)

__all__ = [
    "CliSettings",
    "DEFAULT_API_URL",
    "SettingsStore",
    "default_config_path",
    "parse_bool_env",
    "parse_float_env",
    "parse_str_env",
]
