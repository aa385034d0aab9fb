from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QSettings
from PySide6.QtWidgets import QMainWindow, QDockWidget, QLabel

from notepad.app_settings import SettingsKeys, get_str
from notepad.core.errors import NoteStoreError
from notepad.qt_utils import safe_set_setting
from notepad.settings import APP_NAME
from notepad.store.repo import NoteStore
from notepad.ui.notepad_widget import NotepadWidget


log = logging.getLogger(f"{APP_NAME}.ui")


class MainWindow(QMainWindow):
    def __init__(self, *, store: NoteStore, settings: QSettings):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self._settings = settings

        hint = QLabel("Notes live in the Notepad dock.")
        hint.setAlignment(Qt.AlignCenter)
        self.setCentralWidget(hint)

        self.notepad = NotepadWidget(store)
        self.dock = QDockWidget("Notepad", self)
        self.dock.setObjectName("notes")
        self.dock.setWidget(self.notepad)
        self.addDockWidget(Qt.LeftDockWidgetArea, self.dock)

        self.notepad.selectionChanged.connect(
            lambda title: safe_set_setting(self._settings, SettingsKeys.LAST_NOTE, title)
        )

        self._restore_ui_state()
        self._reopen_last_note()

    def _restore_ui_state(self) -> None:
        try:
            geo = self._settings.value(SettingsKeys.UI_GEOMETRY)
            if geo:
                self.restoreGeometry(geo)
            else:
                self.resize(900, 600)
            st = self._settings.value(SettingsKeys.UI_STATE)
            if st:
                self.restoreState(st)
        except Exception:
            log.exception("Failed to restore UI state from QSettings")

    def _reopen_last_note(self) -> None:
        last = get_str(self._settings, SettingsKeys.LAST_NOTE)
        if not last:
            return
        try:
            exists = last in self.notepad.store.list_titles()
        except NoteStoreError:
            log.exception("Failed to check last note on startup")
            return
        if exists:
            self.notepad.open_note(last)
            self.notepad.refresh_list()

    def closeEvent(self, event):  # type: ignore[override]
        safe_set_setting(self._settings, SettingsKeys.UI_GEOMETRY, self.saveGeometry())
        safe_set_setting(self._settings, SettingsKeys.UI_STATE, self.saveState())
        super().closeEvent(event)
