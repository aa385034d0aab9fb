import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notepad.core.errors import InvalidTitleError
from notepad.core.titles import find_title, note_filename, title_from_filename, validate_title


@pytest.mark.parametrize("title", [
    "My New Note",
    "a",
    "todo_2024-01.v2",
    "Заметка",
    "...a",
    "a..b",
    "   ",
])
def test_valid_titles(title):
    assert validate_title(title)


@pytest.mark.parametrize("title", [
    "",
    None,
    "a/b",
    "a\\b",
    "../evil",
    "..",
    ".",
    "...",
    "line\n",
    "tab\there",
    "what?",
    "colon:",
])
def test_invalid_titles(title):
    assert not validate_title(title)


def test_note_filename():
    assert note_filename("My New Note") == "My New Note.txt"


def test_note_filename_rejects_traversal():
    with pytest.raises(InvalidTitleError):
        note_filename("../evil")


def test_title_from_filename():
    assert title_from_filename("hello.txt") == "hello"
    assert title_from_filename("hello.md") is None
    assert title_from_filename(".txt") is None
    assert title_from_filename("..txt") is None


def test_find_title_ignores_case():
    titles = ["note", "Other"]

    assert find_title(titles, "Note") == "note"
    assert find_title(titles, "OTHER") == "Other"
    assert find_title(titles, "new") is None
    assert find_title([], "x") is None
