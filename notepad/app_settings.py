from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSettings

from notepad.settings import APP_NAME, DEFAULT_DATA_ROOT


log = logging.getLogger(f"{APP_NAME}.settings")


@dataclass(frozen=True)
class SettingsKeys:
    DATA_ROOT: str = "store/data_root"
    LAST_NOTE: str = "nav/last_note"
    UI_GEOMETRY: str = "ui/geometry"
    UI_STATE: str = "ui/windowState"


def get_str(settings: QSettings, key: str, default: str = "") -> str:
    """
    Stored text value. Missing, non-text or unreadable values give default.
    """
    try:
        val = settings.value(key, default)
    except Exception:
        log.exception("Failed to read setting %s", key)
        return default
    if not isinstance(val, str):
        return default
    return val


def resolve_data_root(settings: QSettings) -> Path:
    """Data root chosen by the host, or the per-user default."""
    raw = get_str(settings, SettingsKeys.DATA_ROOT).strip()
    return Path(raw).expanduser() if raw else DEFAULT_DATA_ROOT
