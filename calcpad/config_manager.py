# config_manager.py
from pathlib import Path
import json


def _locate(file_name):
    """Next to main.py in a source checkout, else the working directory (installed package)."""
    project_file = Path(__file__).resolve().parent.parent / file_name
    if project_file.exists():
        return project_file
    return Path.cwd() / file_name


config_json = _locate("config.json")
ui_strings = _locate("ui_strings.json")


# Used when config.json is missing, unreadable or lacks a key
DEFAULT_SETTINGS = {
    "decimal_places": 10,
    "locale_glyphs": False,
    "debug": False
}

MIN_DECIMAL_PLACES = 2


def _validated(settings_dict):
    """Drop values of the wrong type so the defaults take over."""
    checked = {}
    for key_value, default in DEFAULT_SETTINGS.items():
        value = settings_dict.get(key_value, default)
        if type(value) is not type(default):
            value = default
        checked[key_value] = value

    if checked["decimal_places"] < MIN_DECIMAL_PLACES:
        checked["decimal_places"] = MIN_DECIMAL_PLACES
    return checked


def load_setting_value(key_value):
    try:
        with open(config_json, 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        settings_dict = {}

    if not isinstance(settings_dict, dict):
        settings_dict = {}

    settings_dict = _validated(settings_dict)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    try:
        with open(ui_strings, 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        settings_dict = {}


    if key_value == "all":
        return settings_dict

    else:
        # A setting without description is labelled by its key
        return settings_dict.get(key_value, key_value)
