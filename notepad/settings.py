from __future__ import annotations
from pathlib import Path

APP_NAME = "notepad"
APP_DIR = Path.home() / f".{APP_NAME}"
LOG_DIR = APP_DIR / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"
DEFAULT_DATA_ROOT = APP_DIR / "data"
