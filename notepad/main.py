from __future__ import annotations

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from notepad.app_settings import resolve_data_root
from notepad.logging_setup import SESSION_ID, install_global_exception_hooks, setup_logging
from notepad.settings import APP_NAME
from notepad.store.repo import NoteStore
from notepad.ui.main_window import MainWindow


def main() -> int:
    log = setup_logging()
    install_global_exception_hooks(log)
    app = QApplication([])

    settings = QSettings(APP_NAME, APP_NAME)
    data_root = resolve_data_root(settings)
    log.info("Data root: %s", data_root)

    win = MainWindow(store=NoteStore.under(data_root), settings=settings)
    win.show()
    log.info("Application started, SID=%s", SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
