import json
import sys, pathlib
sys.path.insert(0, str(pathlib.Path(__file__).parent.parent))

import pytest

from SciCalc import config_manager


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "config_json", path)
    return path


def test_missing_config_reads_as_empty(config_file):
    assert config_manager.load_setting_value("all") == {}
    assert config_manager.load_setting_value("darkmode") == 0


def test_invalid_json_reads_as_empty(config_file):
    config_file.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("all") == {}


def test_save_and_load(config_file):
    settings = {"darkmode": True, "start_in_radians": False}
    assert config_manager.save_setting(settings) == settings
    assert json.loads(config_file.read_text(encoding="utf-8")) == settings
    assert config_manager.load_setting_value("darkmode") is True
    assert config_manager.load_setting_value("all") == settings


def test_load_settings_fills_in_defaults(config_file):
    config_file.write_text(json.dumps({"start_in_radians": True}), encoding="utf-8")
    settings = config_manager.load_settings()
    assert settings["start_in_radians"] is True
    assert settings["auto_close_parentheses"] is False
    assert settings["darkmode"] is False


def test_save_failure_returns_empty(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "missing_dir" / "config.json")
    assert config_manager.save_setting({"darkmode": True}) == {}


def test_descriptions_cover_every_setting():
    # The shipped config.json and ui_strings.json have to stay in sync for the settings dialog
    values = config_manager.load_setting_value("all")
    descriptions = config_manager.load_setting_description("all")
    assert set(values) == set(descriptions) == set(config_manager.DEFAULT_SETTINGS)
