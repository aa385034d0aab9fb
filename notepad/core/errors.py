# notepad/core/errors.py

from __future__ import annotations

from pathlib import Path


class NoteStoreError(Exception):
    """Base class for every failure reported by the note store."""


class NoteIOError(NoteStoreError):
    """
    Storage-layer failure: permission denied, disk full, the notes path
    being occupied by something that is not a directory, etc.

    The original OSError is kept as __cause__.
    """

    def __init__(self, message: str, *, path: Path | None = None):
        super().__init__(message)
        self.path = path


class InvalidTitleError(NoteStoreError, ValueError):
    def __init__(self, title: str):
        super().__init__(f"Invalid note title: {title!r}")
        self.title = title


class NoteNotFoundError(NoteStoreError, LookupError):
    def __init__(self, title: str):
        super().__init__(f"Note not found: {title!r}")
        self.title = title
