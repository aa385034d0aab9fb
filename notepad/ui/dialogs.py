from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QWidget,
    QDialog,
    QVBoxLayout,
    QLineEdit,
    QPushButton,
)

CREATE_DIALOG_MAX_SIZE = (355, 120)


def build_create_note_dialog(
    parent: QWidget,
    *,
    on_create: Callable[[str], bool],
) -> QDialog:
    """
    Small factory for the "Create Note" dialog.

    on_create(title) returns True when the note was created; the dialog
    closes only then.
    """
    dlg = QDialog(parent)
    dlg.setWindowTitle("Create Note")
    dlg.setModal(True)
    dlg.setMaximumSize(*CREATE_DIALOG_MAX_SIZE)

    layout = QVBoxLayout(dlg)

    inp = QLineEdit()
    inp.setAlignment(Qt.AlignCenter)
    inp.setPlaceholderText("My New Note")
    layout.addWidget(inp)

    def do_accept() -> None:
        if on_create(inp.text()):
            dlg.accept()

    inp.returnPressed.connect(do_accept)

    btn_create = QPushButton("Create")
    btn_create.setDefault(True)
    btn_create.clicked.connect(do_accept)
    layout.addWidget(btn_create)

    inp.setFocus()
    return dlg
