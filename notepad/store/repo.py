# notepad/store/repo.py

from __future__ import annotations

import errno
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from notepad.core.errors import InvalidTitleError, NoteIOError, NoteNotFoundError
from notepad.core.titles import NOTES_DIR_NAME, NOTE_SUFFIX, note_filename, title_from_filename, validate_title
from notepad.infrastructure.filesystem import atomic_write_text, read_text_exact
from notepad.settings import APP_NAME


log = logging.getLogger(f"{APP_NAME}.store")


@dataclass(frozen=True)
class NoteStore:
    """
    Directory of plain-text notes, one "<title>.txt" file per note.

    The directory listing is the only index. Single process, single user:
    the store assumes nobody else touches notes_dir.
    """

    notes_dir: Path

    @classmethod
    def under(cls, data_root: Path) -> "NoteStore":
        return cls(Path(data_root) / NOTES_DIR_NAME)

    # ───────────────────────── paths ─────────────────────────

    def note_path(self, title: str) -> Path:
        """
        The only place a title turns into a path.

        Raises InvalidTitleError if the title is not valid or would somehow
        resolve outside notes_dir.
        """
        path = self.notes_dir / note_filename(title)
        if Path(os.path.abspath(path)).parent != Path(os.path.abspath(self.notes_dir)):
            raise InvalidTitleError(title)
        return path

    # ───────────────────────── public API ─────────────────────────

    def ensure_ready(self) -> None:
        try:
            if self.notes_dir.is_dir():
                return
            self.notes_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise NoteIOError(f"Cannot create notes directory: {e}", path=self.notes_dir) from e
        log.info("Created notes directory: %s", self.notes_dir)

    def list_titles(self) -> list[str]:
        """Titles of all stored notes, in directory enumeration order."""
        try:
            if not self.notes_dir.exists():
                return []
            titles = []
            for p in self.notes_dir.glob(f"*{NOTE_SUFFIX}"):
                title = title_from_filename(p.name)
                if title is not None and p.is_file():
                    titles.append(title)
        except OSError as e:
            raise NoteIOError(f"Cannot list notes: {e}", path=self.notes_dir) from e
        return titles

    @staticmethod
    def validate_title(raw: str) -> bool:
        return validate_title(raw)

    def read(self, title: str) -> str:
        path = self._existing_path(title)
        try:
            return read_text_exact(path, encoding="utf-8")
        except FileNotFoundError as e:
            raise NoteNotFoundError(title) from e
        except (OSError, UnicodeError) as e:
            raise NoteIOError(f"Cannot read note {title!r}: {e}", path=path) from e

    def write(self, title: str, content: str) -> None:
        path = self.note_path(title)
        self.ensure_ready()
        try:
            atomic_write_text(path, content, encoding="utf-8")
        except (OSError, UnicodeError) as e:
            raise NoteIOError(f"Cannot save note {title!r}: {e}", path=path) from e
        log.info("Saved to %s", path.resolve())

    def remove(self, title: str) -> None:
        path = self._existing_path(title)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise NoteNotFoundError(title) from e
        except OSError as e:
            raise NoteIOError(f"Cannot remove note {title!r}: {e}", path=path) from e
        log.info("Removed note: %s", path)

    # ───────────────────────── internal ─────────────────────────

    def _existing_path(self, title: str) -> Path:
        # An invalid title can never name a stored note.
        try:
            path = self.note_path(title)
        except InvalidTitleError as e:
            log.warning("Rejected note title on lookup: %r", title)
            raise NoteNotFoundError(title) from e
        try:
            found = path.is_file()
        except OSError as e:
            # a name the filesystem cannot hold cannot be a stored note
            if e.errno == errno.ENAMETOOLONG:
                raise NoteNotFoundError(title) from e
            raise NoteIOError(f"Cannot look up note {title!r}: {e}", path=path) from e
        if not found:
            raise NoteNotFoundError(title)
        return path
