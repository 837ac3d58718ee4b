"""Status-row modes of the pager.

The bottom row of the screen is in exactly one mode at a time. Each mode is
its own small type; only :class:`Search` carries editable state, so the
text-editing operations exist only on a :class:`Search` instance and can't
be reached while another mode is active.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


class InvalidModeError(RuntimeError):
    """Raised when a Search handle is requested outside Search mode."""


@dataclass(frozen=True)
class Normal:
    """Default mode; the status row shows the ``:`` prompt."""


@dataclass(frozen=True)
class Filename:
    """Banner with the name of the file being paged, shown at startup."""
    name: str


@dataclass(frozen=True)
class End:
    """Banner shown while the last screen of an exhausted source is visible."""


@dataclass
class Search:
    """Search text being typed, with an editable cursor.

    ``cursor`` always stays within ``0 <= cursor <= len(text)``. Every
    editing method returns True when the text or cursor changed.
    """
    text: str = ""
    cursor: int = 0

    def push_char(self, char: str) -> bool:
        self.text = self.text[:self.cursor] + char + self.text[self.cursor:]
        self.cursor += len(char)
        return True

    def erase_char(self) -> bool:
        """Backspace: remove the character before the cursor."""
        if self.cursor == 0:
            return False
        self.text = self.text[:self.cursor - 1] + self.text[self.cursor:]
        self.cursor -= 1
        return True

    def delete_char(self) -> bool:
        """Delete: remove the character under the cursor."""
        if self.cursor >= len(self.text):
            return False
        self.text = self.text[:self.cursor] + self.text[self.cursor + 1:]
        return True

    def cursor_left(self) -> bool:
        if self.cursor == 0:
            return False
        self.cursor -= 1
        return True

    def cursor_right(self) -> bool:
        if self.cursor >= len(self.text):
            return False
        self.cursor += 1
        return True


Mode = Union[Normal, Filename, End, Search]


class CommandLine:
    """Holds the active status-row mode and its transitions."""

    PROMPT = ":"
    END_MARKER = "(END)"
    SEARCH_PREFIX = "/"

    def __init__(self, filename: Optional[str] = None):
        self.mode: Mode = Filename(filename) if filename else Normal()

    @property
    def is_searching(self) -> bool:
        return isinstance(self.mode, Search)

    @property
    def search(self) -> Search:
        """The active Search handle.

        Raises:
            InvalidModeError: when not in Search mode
        """
        if not isinstance(self.mode, Search):
            raise InvalidModeError(f"Not in search mode: {self.mode!r}")
        return self.mode

    def switch_to_search(self) -> Search:
        self.mode = Search()
        return self.mode

    def switch_to_normal(self) -> None:
        self.mode = Normal()

    def show_end(self) -> None:
        """Pin the End banner, unless the user is typing a search."""
        if not self.is_searching:
            self.mode = End()

    def collapse_banner(self) -> None:
        """Drop a Filename or End banner back to the plain prompt."""
        if isinstance(self.mode, (Filename, End)):
            self.mode = Normal()

    def status_text(self) -> str:
        """Text for the status row in the current mode."""
        mode = self.mode
        if isinstance(mode, Search):
            return self.SEARCH_PREFIX + mode.text
        if isinstance(mode, Filename):
            return mode.name
        if isinstance(mode, End):
            return self.END_MARKER
        return self.PROMPT

    def cursor_column(self) -> int:
        """0-based column of the terminal cursor on the status row."""
        if isinstance(self.mode, Search):
            return len(self.SEARCH_PREFIX) + self.mode.cursor
        return len(self.status_text())

    @property
    def is_banner(self) -> bool:
        return isinstance(self.mode, (Filename, End))
