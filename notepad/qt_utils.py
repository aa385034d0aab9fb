from __future__ import annotations

import logging
from contextlib import contextmanager

from PySide6.QtCore import QObject, QSettings

from notepad.settings import APP_NAME


log = logging.getLogger(f"{APP_NAME}.ui")


@contextmanager
def blocked_signals(*objs: QObject | None):
    """
    Mute the given widgets while the panel fills them programmatically
    (list refresh, loading a note into the editor).

    Each object gets back the blocked state it had before, so nesting is safe.
    """
    previous = [(obj, obj.blockSignals(True)) for obj in objs if obj is not None]
    try:
        yield
    finally:
        for obj, was_blocked in reversed(previous):
            try:
                obj.blockSignals(was_blocked)
            except RuntimeError:
                # widget deleted on the C++ side while blocked
                log.debug("Widget gone before signals were restored: %r", obj)


def safe_set_setting(settings: QSettings, key: str, value) -> bool:
    """Persist a UI preference; failures are logged, never raised into the UI."""
    try:
        settings.setValue(key, value)
    except Exception:
        log.exception("Failed to store setting %s", key)
        return False
    return True
