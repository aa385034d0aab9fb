from .errors import InvalidTitleError, NoteIOError, NoteNotFoundError, NoteStoreError
from .titles import NOTE_SUFFIX, NOTES_DIR_NAME, find_title, note_filename, title_from_filename, validate_title

__all__ = ["NoteStoreError",
           "NoteIOError",
           "InvalidTitleError",
           "NoteNotFoundError",
           "NOTE_SUFFIX",
           "NOTES_DIR_NAME",
           "find_title",
           "note_filename",
           "title_from_filename",
           "validate_title"
           ]
