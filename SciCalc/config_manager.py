# config_manager.py
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

config_json = Path(__file__).resolve().parent.parent / "config.json"
ui_strings = Path(__file__).resolve().parent.parent / "ui_strings.json"

# Used when config.json is missing or lacks a key
DEFAULT_SETTINGS = {
    "darkmode": False,
    "start_in_radians": False,
    "auto_close_parentheses": False,
    "shift_to_copy": True,
    "debug": False,
}


def _load_json(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s: %s", path.name, e)
        return {}


def load_setting_value(key_value):
    settings_dict = _load_json(config_json)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    settings_dict = _load_json(ui_strings)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_settings():
    """All settings, with defaults filled in for anything config.json does not set."""
    settings = dict(DEFAULT_SETTINGS)
    settings.update(load_setting_value("all"))
    return settings


def save_setting(settings_dict):
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (OSError, TypeError) as e:
        logger.warning("Error 5001: Not all Settings could be saved: %s", e)
        return {}
