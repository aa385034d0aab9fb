from .core.errors import InvalidTitleError, NoteIOError, NoteNotFoundError, NoteStoreError
from .store.repo import NoteStore

__all__ = ["NoteStore",
           "NoteStoreError",
           "NoteIOError",
           "InvalidTitleError",
           "NoteNotFoundError"
           ]
