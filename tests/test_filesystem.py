import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notepad.infrastructure.filesystem import atomic_write_text, read_text_exact


def test_atomic_write_creates_parent(tmp_path):
    target = tmp_path / "deep" / "note.txt"
    atomic_write_text(target, "hello")

    assert target.read_text(encoding="utf-8") == "hello"


def test_atomic_write_replaces_and_leaves_no_temp(tmp_path):
    target = tmp_path / "note.txt"
    atomic_write_text(target, "first")
    atomic_write_text(target, "second")

    assert read_text_exact(target) == "second"
    assert [p.name for p in tmp_path.iterdir()] == ["note.txt"]


def test_newlines_preserved(tmp_path):
    target = tmp_path / "note.txt"
    atomic_write_text(target, "a\r\nb\rc\n")

    assert read_text_exact(target) == "a\r\nb\rc\n"


def test_failed_write_keeps_old_content(tmp_path):
    target = tmp_path / "note.txt"
    atomic_write_text(target, "keep me")

    with pytest.raises(UnicodeEncodeError):
        atomic_write_text(target, "\udcff broken surrogate")

    assert read_text_exact(target) == "keep me"
    assert [p.name for p in tmp_path.iterdir()] == ["note.txt"]
