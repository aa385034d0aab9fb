import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pathlib import Path

from notepad.app_settings import SettingsKeys, get_str, resolve_data_root
from notepad.settings import DEFAULT_DATA_ROOT


class FakeSettings:
    def __init__(self, values=None, *, broken=False):
        self._values = values or {}
        self._broken = broken

    def value(self, key, default=None):
        if self._broken:
            raise RuntimeError("settings backend unavailable")
        return self._values.get(key, default)


def test_default_data_root():
    assert resolve_data_root(FakeSettings()) == DEFAULT_DATA_ROOT


def test_configured_data_root(tmp_path):
    settings = FakeSettings({SettingsKeys.DATA_ROOT: str(tmp_path)})
    assert resolve_data_root(settings) == Path(tmp_path)


def test_blank_data_root_falls_back():
    settings = FakeSettings({SettingsKeys.DATA_ROOT: "   "})
    assert resolve_data_root(settings) == DEFAULT_DATA_ROOT


def test_get_str_tolerates_errors():
    assert get_str(FakeSettings(broken=True), SettingsKeys.LAST_NOTE, "x") == "x"


def test_get_str_ignores_non_text():
    settings = FakeSettings({SettingsKeys.LAST_NOTE: 42})
    assert get_str(settings, SettingsKeys.LAST_NOTE) == ""


def test_get_str_keeps_surrounding_spaces():
    settings = FakeSettings({SettingsKeys.LAST_NOTE: "note "})
    assert get_str(settings, SettingsKeys.LAST_NOTE) == "note "
