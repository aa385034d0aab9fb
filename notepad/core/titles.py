# notepad/core/titles.py

from __future__ import annotations

import re

from notepad.core.errors import InvalidTitleError


NOTES_DIR_NAME = "notes"
NOTE_SUFFIX = ".txt"

# letters, digits, underscore, hyphen, period, space
TITLE_RE = re.compile(r"[\w\-. ]+")
DOTS_ONLY_RE = re.compile(r"\.+")


def validate_title(raw: str | None) -> bool:
    """
    Check whether a user-supplied title can be used as a note filename stem.

    Rules:
    - non-empty string
    - every character is a letter, digit, "_", "-", "." or " "
    - not made only of periods ("." and ".." name the directory itself
      and its parent)

    There is no path separator in the allowed set, so a valid title is
    always a single path component.
    """
    if not isinstance(raw, str) or not raw:
        return False

    # fullmatch: "$" would also accept a trailing "\n"
    if TITLE_RE.fullmatch(raw) is None:
        return False

    if DOTS_ONLY_RE.fullmatch(raw) is not None:
        return False

    return True


def note_filename(title: str) -> str:
    """Map a note title to its file name: "<title>.txt"."""
    if not validate_title(title):
        raise InvalidTitleError(title)
    return f"{title}{NOTE_SUFFIX}"


def title_from_filename(name: str) -> str | None:
    """Inverse of note_filename(); None for names that are not notes."""
    if not name.endswith(NOTE_SUFFIX):
        return None
    stem = name[: -len(NOTE_SUFFIX)]
    return stem if validate_title(stem) else None


def find_title(titles, title: str) -> str | None:
    """
    Stored title that would share a file with title, if any.

    Compared case-insensitively: on case-insensitive filesystems "Note"
    and "note" are the same file.
    """
    key = title.casefold()
    for t in titles:
        if t.casefold() == key:
            return t
    return None
