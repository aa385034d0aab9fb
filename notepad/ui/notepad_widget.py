from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QListWidget, QListWidgetItem,
    QTextEdit, QLabel, QPushButton, QMessageBox,
)

from notepad.core.errors import NoteIOError, NoteStoreError
from notepad.core.titles import find_title
from notepad.qt_utils import blocked_signals
from notepad.settings import APP_NAME
from notepad.store.repo import NoteStore
from notepad.ui.dialogs import build_create_note_dialog
from notepad.ui.selection import NoteSelection


log = logging.getLogger(f"{APP_NAME}.ui")

LIST_MAX_WIDTH = 180


class NotepadWidget(QWidget):
    """
    Notes panel: list + create/remove on the left, title label + editor +
    save on the right. All persistence goes through NoteStore.
    """

    # working title, "" when nothing is selected
    selectionChanged = Signal(str)

    def __init__(self, store: NoteStore, parent: QWidget | None = None):
        super().__init__(parent)
        self.store = store
        self.selection = NoteSelection()

        # UI

        self.listw = QListWidget()
        self.listw.setMaximumWidth(LIST_MAX_WIDTH)

        self.btn_create = QPushButton("Create Note")
        self.btn_create.setToolTip("Create new note.")
        self.btn_remove = QPushButton("Remove Note")
        self.btn_remove.setToolTip("Remove selected note.")

        left = QVBoxLayout()
        left.setContentsMargins(4, 4, 4, 4)
        left.setSpacing(4)
        left.addWidget(self.listw)
        left.addWidget(self.btn_create)
        left.addWidget(self.btn_remove)

        self.title_label = QLabel("Select Note")
        self.editor = QTextEdit()
        self.editor.setAcceptRichText(False)
        self.btn_save = QPushButton("Save")

        right = QVBoxLayout()
        right.setContentsMargins(4, 4, 4, 4)
        right.setSpacing(4)
        right.addWidget(self.title_label)
        right.addWidget(self.editor)
        right.addWidget(self.btn_save)

        root = QHBoxLayout(self)
        root.setContentsMargins(4, 4, 4, 4)
        root.setSpacing(4)
        root.addLayout(left)
        root.addLayout(right, 1)

        # Signals
        self.listw.itemClicked.connect(self._on_item_clicked)
        self.btn_create.clicked.connect(self.open_create_dialog)
        self.btn_remove.clicked.connect(self.remove_current)
        self.btn_save.clicked.connect(self.save_current)

        self._save_shortcut = QShortcut(QKeySequence(QKeySequence.StandardKey.Save), self)
        self._save_shortcut.setContext(Qt.WidgetWithChildrenShortcut)
        self._save_shortcut.activated.connect(self.save_current)

        self._prepare_store()
        self._apply_selection_state()
        self.refresh_list()

    # ───────────────────────── public API ─────────────────────────

    def refresh_list(self) -> None:
        try:
            titles = sorted(self.store.list_titles(), key=str.lower)
        except NoteStoreError as e:
            self._report("Notes", e)
            titles = []

        current = self.selection.working_title
        with blocked_signals(self.listw):
            self.listw.clear()
            for t in titles:
                item = QListWidgetItem(t)
                self.listw.addItem(item)
                if t == current:
                    self.listw.setCurrentItem(item)

    def open_note(self, title: str) -> bool:
        try:
            text = self.store.read(title)
        except NoteStoreError as e:
            self._report("Open note", e)
            self.deselect()
            self.refresh_list()
            return False

        self.selection.select(title)
        with blocked_signals(self.editor):
            self.editor.setPlainText(text)
        self._apply_selection_state()
        log.debug("Opened note: %s", title)
        return True

    def deselect(self) -> None:
        self.selection.clear()
        with blocked_signals(self.editor, self.listw):
            self.editor.clear()
            self.listw.clearSelection()
        self._apply_selection_state()

    def open_create_dialog(self) -> None:
        dlg = build_create_note_dialog(self, on_create=self.create_note)
        dlg.exec()

    def create_note(self, title: str) -> bool:
        if not self.store.validate_title(title):
            log.error("Invalid file name! title=%r", title)
            QMessageBox.warning(
                self,
                "Create Note",
                "Invalid file name!\nUse letters, digits, spaces, '_', '-' and '.'.",
            )
            return False

        try:
            existing = find_title(self.store.list_titles(), title)
            if existing is not None:
                QMessageBox.information(self, "Create Note", f"Note already exists:\n{existing}")
                return False
            self.store.write(title, "")
        except NoteStoreError as e:
            self._report("Create Note", e)
            return False

        log.info("Created note: %s", title)
        self.refresh_list()
        self.deselect()
        return True

    def save_current(self) -> bool:
        title = self.selection.working_title
        if title is None:
            return False
        try:
            self.store.write(title, self.editor.toPlainText())
        except NoteStoreError as e:
            self._report("Save", e)
            return False
        self.refresh_list()
        return True

    def remove_current(self) -> bool:
        title = self.selection.working_title
        if title is None:
            return False
        try:
            self.store.remove(title)
        except NoteStoreError as e:
            self._report("Remove Note", e)
            return False
        self.selection.forget(title)
        self.refresh_list()
        self.deselect()
        return True

    # ───────────────────────── internal ─────────────────────────

    def _prepare_store(self) -> None:
        try:
            self.store.ensure_ready()
        except NoteStoreError as e:
            self._report("Notes", e)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        title = item.text() if item is not None else ""
        if not title:
            self.deselect()
            return
        if title == self.selection.working_title:
            return
        self.open_note(title)

    def _apply_selection_state(self) -> None:
        title = self.selection.working_title
        selected = title is not None
        self.title_label.setText(title if selected else "Select Note")
        self.editor.setReadOnly(not selected)
        self.btn_save.setEnabled(selected)
        self.btn_remove.setEnabled(selected)
        self.selectionChanged.emit(title or "")

    def _report(self, caption: str, err: NoteStoreError) -> None:
        if isinstance(err, NoteIOError):
            log.exception("%s failed: %s", caption, err)
            QMessageBox.critical(self, caption, str(err))
        else:
            log.warning("%s: %s", caption, err)
            QMessageBox.warning(self, caption, str(err))
