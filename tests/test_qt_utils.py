import sys
import os
import logging

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PySide6.QtCore import QObject

from notepad.qt_utils import blocked_signals, safe_set_setting


def test_blocked_signals_restores_each_object():
    a = QObject()
    b = QObject()
    b.blockSignals(True)

    with blocked_signals(a, b, None):
        assert a.signalsBlocked()
        assert b.signalsBlocked()

    assert not a.signalsBlocked()
    assert b.signalsBlocked()


def test_blocked_signals_nested():
    a = QObject()
    with blocked_signals(a):
        with blocked_signals(a):
            pass
        assert a.signalsBlocked()
    assert not a.signalsBlocked()


class FakeSettings:
    def __init__(self, *, broken=False):
        self.values = {}
        self._broken = broken

    def setValue(self, key, value):
        if self._broken:
            raise RuntimeError("settings backend unavailable")
        self.values[key] = value


def test_safe_set_setting_stores_value():
    settings = FakeSettings()
    assert safe_set_setting(settings, "nav/last_note", "a")
    assert settings.values == {"nav/last_note": "a"}


def test_safe_set_setting_logs_failure(caplog):
    with caplog.at_level(logging.ERROR, logger="notepad.ui"):
        assert not safe_set_setting(FakeSettings(broken=True), "ui/geometry", b"")

    assert "Failed to store setting ui/geometry" in caplog.text
