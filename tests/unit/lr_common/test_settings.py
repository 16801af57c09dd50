import json

import pytest

from lr_common.config.env import parse_bool_env, parse_float_env, parse_str_env
from lr_common.config.settings import (
    DEFAULT_API_URL,
    CliSettings,
    SettingsStore,
    default_config_path,
)
from lr_common.errors import ConfigurationError

pytestmark = pytest.mark.unit_common


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("LURAPH_API_KEY", "LURAPH_API_URL", "LURAPH_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store(tmp_path):
    return SettingsStore(tmp_path / "luraph" / "config.json")


def test_env_parsers():
    assert parse_bool_env("Yes") is True
    assert parse_bool_env("0") is False
    assert parse_bool_env(None) is None
    assert parse_float_env("2.5") == 2.5
    assert parse_float_env("soon") is None
    assert parse_str_env("  ") is None
    assert parse_str_env(" key ") == "key"


def test_default_config_path_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_config_path() == tmp_path / "luraph" / "config.json"


def test_missing_file_gives_defaults(store):
    settings = store.load()
    assert settings.api_key is None
    assert settings.api_url == DEFAULT_API_URL
    assert settings.timeout_seconds == 60.0
    assert not settings.has_api_key


def test_update_api_key_round_trip(store):
    path = store.update_api_key("  abcd1234efgh  ")
    assert json.loads(path.read_text())["api_key"] == "abcd1234efgh"
    assert store.load().api_key == "abcd1234efgh"


def test_empty_api_key_is_refused(store):
    with pytest.raises(ConfigurationError):
        store.update_api_key("   ")


def test_environment_overrides_file(store, monkeypatch):
    store.update_api_key("from-file")
    monkeypatch.setenv("LURAPH_API_KEY", "from-env")
    monkeypatch.setenv("LURAPH_API_URL", "https://example.test/v1/")
    monkeypatch.setenv("LURAPH_TIMEOUT", "5")

    settings = store.load()

    assert settings.api_key == "from-env"
    assert settings.api_url == "https://example.test/v1"
    assert settings.timeout_seconds == 5.0
    assert store.load(apply_env=False).api_key == "from-file"


def test_env_key_is_not_written_back(store, monkeypatch):
    monkeypatch.setenv("LURAPH_API_KEY", "from-env")
    store.update_api_key("from-prompt")
    assert json.loads(store.path.read_text())["api_key"] == "from-prompt"


def test_invalid_json_is_a_configuration_error(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json")
    with pytest.raises(ConfigurationError, match="not valid JSON"):
        store.load()


def test_invalid_timeout_is_a_configuration_error(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text(json.dumps({"timeout_seconds": 0}))
    with pytest.raises(ConfigurationError):
        store.load()


def test_masked_api_key():
    assert CliSettings().masked_api_key() == "(not set)"
    assert CliSettings(api_key="short").masked_api_key() == "*****"
    assert CliSettings(api_key="abcd1234efgh").masked_api_key() == "abcd****efgh"
