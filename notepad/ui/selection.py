from __future__ import annotations


class NoteSelection:
    """
    Which note is open in the editor, if any.

    working_title is None when nothing is selected; the panel disables
    save/remove in that case. Changed only via select()/clear()/forget().
    """

    def __init__(self) -> None:
        self._working_title: str | None = None

    @property
    def working_title(self) -> str | None:
        return self._working_title

    @property
    def is_selected(self) -> bool:
        return self._working_title is not None

    def select(self, title: str) -> None:
        if not isinstance(title, str) or not title:
            raise ValueError("select(): title must be a non-empty string")
        self._working_title = title

    def clear(self) -> None:
        self._working_title = None

    def forget(self, title: str) -> bool:
        """Clear the selection if it points at title (e.g. after a remove)."""
        if self._working_title == title:
            self._working_title = None
            return True
        return False
