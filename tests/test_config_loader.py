"""Tests for decoder configuration loading and caching."""

import json
from pathlib import Path

import pytest

from devicerpc.config import DecoderConfig, clear_config_cache, get_config, get_config_path, load_config
from devicerpc.config.loader import camel_to_snake, convert_keys


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "missing.json")
    assert cfg == DecoderConfig()
    assert cfg.strict is True
    assert cfg.log_decode_failures is True
    assert cfg.max_message_bytes == 4 * 1024 * 1024


def test_camel_case_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"strict": False, "logDecodeFailures": False, "maxMessageBytes": 1024}))
    cfg = load_config(path)
    assert cfg.strict is False
    assert cfg.log_decode_failures is False
    assert cfg.max_message_bytes == 1024


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", json.dumps({"maxMessageBytes": 0})])
def test_invalid_file_raises_value_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "config.json"
    path.write_text(content)
    with pytest.raises(ValueError, match="Failed to load config"):
        load_config(path)


def test_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEVICERPC_STRICT", "false")
    monkeypatch.setenv("DEVICERPC_LOG_LEVEL", "DEBUG")
    cfg = DecoderConfig()
    assert cfg.strict is False
    assert cfg.log_level == "DEBUG"


def test_default_path_under_home() -> None:
    assert get_config_path() == Path.home() / ".devicerpc" / "config.json"


def test_get_config_caches_until_cleared() -> None:
    path = get_config_path()
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"strict": True}))
    first = get_config()
    path.write_text(json.dumps({"strict": False}))
    assert get_config() is first
    assert get_config(force_reload=True).strict is False
    clear_config_cache()
    assert get_config() is not first


def test_key_conversion() -> None:
    assert camel_to_snake("maxMessageBytes") == "max_message_bytes"
    assert convert_keys({"logLevel": "INFO", "nested": [{"fooBar": 1}]}) == {
        "log_level": "INFO",
        "nested": [{"foo_bar": 1}],
    }
