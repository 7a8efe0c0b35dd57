from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

import reltime.config as cfgmod
from reltime.config import FormatterConfig, load_config, save_config


@pytest.fixture
def conf_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    conf_dir = tmp_path / ".config" / "reltime"
    path = conf_dir / "config.json"
    monkeypatch.setattr(cfgmod, "CONFIG_DIR", conf_dir)
    monkeypatch.setattr(cfgmod, "CONFIG_PATH", path)
    return path


def test_save_and_load_config_uses_json(conf_path: Path) -> None:
    save_config(FormatterConfig(abbreviate_unit=True, refresh_interval=5.0))

    assert conf_path.exists()
    data = json.loads(conf_path.read_text())
    assert data == {"abbreviate_unit": True, "refresh_interval": 5.0}

    loaded = load_config()
    assert loaded.abbreviate_unit is True
    assert loaded.refresh_interval == 5.0


def test_load_config_creates_default_when_missing(conf_path: Path) -> None:
    # No file exists; load should create a default config
    loaded = load_config()
    assert loaded.abbreviate_unit is False
    assert loaded.refresh_interval == 1.0
    assert conf_path.exists()


def test_load_config_rejects_invalid_json(conf_path: Path) -> None:
    conf_path.parent.mkdir(parents=True)
    conf_path.write_text("{not json")

    with pytest.raises(json.JSONDecodeError):
        load_config()


def test_from_dict_defaults_for_missing_keys() -> None:
    cfg = FormatterConfig.from_dict({})
    assert cfg == FormatterConfig()


def test_from_dict_ignores_wrong_types(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="reltime.config")

    cfg = FormatterConfig.from_dict({"abbreviate_unit": "yes", "refresh_interval": True})

    assert cfg.abbreviate_unit is False
    assert cfg.refresh_interval == 1.0
    assert "abbreviate_unit" in caplog.text
    assert "refresh_interval" in caplog.text


def test_from_dict_clamps_refresh_interval() -> None:
    assert FormatterConfig.from_dict({"refresh_interval": 0}).refresh_interval == 0.1
    assert FormatterConfig.from_dict({"refresh_interval": 2}).refresh_interval == 2.0


def test_load_config_non_object_json_uses_defaults(
    conf_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING, logger="reltime.config")
    conf_path.parent.mkdir(parents=True)
    conf_path.write_text("[]")

    assert load_config() == FormatterConfig()
    assert "not a JSON object" in caplog.text
