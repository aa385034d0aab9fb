from .selection import NoteSelection

__all__ = ["NoteSelection"]
