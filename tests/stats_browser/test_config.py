from __future__ import annotations

import json

import pytest

from stats_browser.config import CONFIG_ENV, AppSettings, load_settings
from stats_browser.core.exceptions import ConfigError


def _write(tmp_path, payload) -> str:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(payload))
    return str(path)


def test_defaults_without_file(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV, raising=False)

    assert load_settings() == AppSettings()


def test_load_from_file(tmp_path):
    settings = load_settings(_write(tmp_path, {"ui_title": "Lab", "default_zoom": 150, "extra": 1}))

    assert settings.ui_title == "Lab"
    assert settings.default_zoom == 150
    assert settings.export_filename == "standard_deviation_data.csv"


def test_env_var_names_file(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, _write(tmp_path, {"zoom_step": 5}))

    assert load_settings().zoom_step == 5


@pytest.mark.parametrize(
    "payload",
    [
        {"default_zoom": 0},
        {"default_zoom": 250},
        {"default_zoom": "100"},
        {"zoom_step": 0},
        {"ui_title": 42},
        [1, 2, 3],
    ],
)
def test_invalid_settings(tmp_path, payload):
    with pytest.raises(ConfigError):
        load_settings(_write(tmp_path, payload))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "absent.json")
