"""Persistent CLI settings (API key, endpoint) with environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from lr_common.config.env import parse_float_env, parse_str_env
from lr_common.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.lura.ph/v1"
CONFIG_DIR_NAME = "luraph"
CONFIG_FILE_NAME = "config.json"


class CliSettings(BaseModel):
    """Settings shared by every command."""

    api_key: str | None = None
    api_url: str = DEFAULT_API_URL
    timeout_seconds: float = Field(default=60.0, gt=0)

    model_config = ConfigDict(extra="ignore")

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def masked_api_key(self) -> str:
        if not self.api_key:
            return "(not set)"
        if len(self.api_key) <= 8:
            return "*" * len(self.api_key)
        return f"{self.api_key[:4]}{'*' * (len(self.api_key) - 8)}{self.api_key[-4:]}"


def default_config_path() -> Path:
    """Return `$XDG_CONFIG_HOME/luraph/config.json` (or the ~/.config fallback)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base).expanduser() if base else Path.home() / ".config"
    return root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _apply_env_overrides(data: dict[str, object]) -> dict[str, object]:
    merged = dict(data)
    api_key = parse_str_env(os.environ.get("LURAPH_API_KEY"))
    if api_key:
        merged["api_key"] = api_key
    api_url = parse_str_env(os.environ.get("LURAPH_API_URL"))
    if api_url:
        merged["api_url"] = api_url
    timeout = parse_float_env(os.environ.get("LURAPH_TIMEOUT"))
    if timeout is not None:
        merged["timeout_seconds"] = timeout
    return merged


@dataclass
class SettingsStore:
    """Reads and writes the JSON settings file."""

    path: Path

    @classmethod
    def default(cls) -> "SettingsStore":
        return cls(default_config_path())

    def _read_file(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as exc:
            raise ConfigurationError(
                f"Settings file is not valid JSON: {self.path}",
                context={"path": self.path},
                cause=exc,
            ) from exc
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file must contain a JSON object: {self.path}",
                context={"path": self.path},
            )
        return data

    def load(self, *, apply_env: bool = True) -> CliSettings:
        """Load settings from disk, with environment variables taking precedence."""
        data = self._read_file()
        if apply_env:
            data = _apply_env_overrides(data)
        try:
            return CliSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid settings in {self.path}: {exc.errors()[0]['msg']}",
                context={"path": self.path},
                cause=exc,
            ) from exc

    def save(self, settings: CliSettings) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = settings.model_dump(exclude_none=True)
        self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        logger.debug("Saved settings to %s", self.path)
        return self.path

    def update_api_key(self, api_key: str) -> Path:
        """Persist a new API key without baking environment overrides into the file."""
        if not api_key.strip():
            raise ConfigurationError("API key must not be empty.")
        current = self.load(apply_env=False)
        return self.save(current.model_copy(update={"api_key": api_key.strip()}))
