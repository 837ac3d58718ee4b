"""Terminal interface using Blessed for display and input."""

import contextlib
import logging
import blessed
from typing import Optional

from .constants import PagerConstants

logger = logging.getLogger(__name__)

# C0 controls and DEL become their Unicode control pictures, C1 controls a
# replacement character; tab is shown as a single space
_CONTROL_PICTURES = {code: 0x2400 + code for code in range(0x20)}
_CONTROL_PICTURES[0x09] = ord(" ")
_CONTROL_PICTURES[0x7f] = 0x2421
_CONTROL_PICTURES.update({code: 0xfffd for code in range(0x80, 0xa0)})


def printable(text: str) -> str:
    """Replace control characters so that text cannot move the cursor or
    start an escape sequence."""
    return text.translate(_CONTROL_PICTURES)


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        # Geometry is read once; resizing is not followed
        self._width = self.term.width
        self._height = self.term.height

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.normal_cursor, end='')
            print(self.term.exit_fullscreen, end='', flush=True)
            self.is_fullscreen = False

    @contextlib.contextmanager
    def session(self, mouse: bool = True,
                mouse_query_timeout: float = PagerConstants.MOUSE_QUERY_TIMEOUT):
        """Fullscreen, raw input and (optionally) mouse wheel reporting.

        The terminal is restored on exit even if the body raises.
        """
        self.setup()
        try:
            with self.term.raw():
                if mouse:
                    with self.term.mouse_enabled(timeout=mouse_query_timeout):
                        yield self
                else:
                    yield self
        finally:
            self.cleanup()

    def move_cursor(self, y: int, x: int):
        """Move the cursor to a position without redrawing the screen."""
        print(self.term.move_yx(y, x), end='')

    def clear_row(self, y: int):
        """Blank a whole row."""
        print(self.term.move_yx(y, 0) + self.term.clear_eol, end='')

    def write_row(self, y: int, text: str):
        """Replace row y with text."""
        print(self.term.move_yx(y, 0) + self.term.clear_eol + text, end='')

    def draw_screen(self, rows: list[str], status: str, cursor_x: int,
                    highlight: bool = False):
        """Draw the content rows and the status row, then place the cursor.

        Args:
            rows: Wrapped rows to show from the top of the screen
            status: Text for the bottom row
            cursor_x: Cursor column on the status row (0-based)
            highlight: Draw the status text in reverse video (banners)
        """
        content_rows = self.height - 1
        print(self.term.home, end='')
        for y in range(content_rows):
            if y < len(rows):
                self.write_row(y, self.term.truncate(printable(rows[y]), self.width))
            else:
                self.clear_row(y)

        status_y = self.height - 1
        status_text = self.term.truncate(printable(status), self.width)
        if highlight:
            status_text = self.term.reverse + status_text + self.term.normal
        self.write_row(status_y, status_text)
        cursor_x = min(cursor_x, self.width - 1)
        print(self.term.move_yx(status_y, cursor_x) + self.term.normal_cursor, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress (or mouse report) from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            A blessed Keystroke; empty when the timeout expired
        """
        return self.term.inkey(timeout=timeout, esc_delay=PagerConstants.ESCAPE_DELAY)

    @property
    def width(self):
        """Terminal width in columns."""
        return self._width

    @property
    def height(self):
        """Terminal height in rows, status row included."""
        return self._height
