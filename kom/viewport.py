"""Scroll engine: which wrapped rows are on screen, and reading ahead."""

from __future__ import annotations

import logging
from itertools import islice

from .buffer import LineBuffer, wrapped_row_count
from .command_line import CommandLine

logger = logging.getLogger(__name__)


class ViewportError(ValueError):
    """Raised for a terminal geometry that cannot show any content."""


class Viewport:
    """A window of ``height - 1`` content rows over the wrapped buffer.

    ``offset`` counts wrapped rows, not logical lines, so one step always
    moves the view by exactly one terminal row. The last terminal row is the
    status row and is not part of the window.
    """

    def __init__(self, buffer: LineBuffer, width: int, height: int,
                 command_line: CommandLine):
        if width < 1:
            raise ViewportError(f"Terminal width must be at least 1 column, got {width}")
        if height < 2:
            raise ViewportError(f"Terminal height must be at least 2 rows, got {height}")
        self.buffer = buffer
        self.width = width
        self.height = height
        self.command_line = command_line
        self.offset = 0

    @property
    def page_size(self) -> int:
        """Content rows per screen (the status row excluded)."""
        return self.height - 1

    def total_rows(self) -> int:
        return self.buffer.wrapped_len(self.width)

    def fill(self) -> None:
        """Read until one screen of rows is buffered or the input ends."""
        total = self.total_rows()
        while total < self.page_size:
            line = self.buffer.append_line()
            if line is None:
                break
            total += wrapped_row_count(line, self.width)

    def visible_rows(self) -> list[str]:
        rows = self.buffer.wrapped_lines(self.width, self.offset)
        return list(islice(rows, self.page_size))

    def scroll_down(self, n: int) -> bool:
        """Move the window ``n`` rows down, reading more input as needed.

        If the input runs out before a full screen is available the offset
        is clamped so the last screen is shown in full, and the End banner
        is pinned.

        Returns:
            True if the offset or the status mode changed
        """
        old_offset = self.offset
        old_mode = self.command_line.mode
        self.offset += n
        total = self.total_rows()
        while total - self.offset < self.page_size:
            line = self.buffer.append_line()
            if line is None:
                self.offset = max(0, total - self.page_size)
                self.command_line.show_end()
                break
            total += wrapped_row_count(line, self.width)
        else:
            if self.offset != old_offset:
                self.command_line.collapse_banner()
        return self.offset != old_offset or self.command_line.mode != old_mode

    def scroll_up(self, n: int) -> bool:
        """Move the window ``n`` rows up, stopping at the top.

        Returns:
            True if the offset or the status mode changed
        """
        old_offset = self.offset
        old_mode = self.command_line.mode
        self.offset = max(0, self.offset - n)
        self.command_line.collapse_banner()
        return self.offset != old_offset or self.command_line.mode != old_mode

    def scroll_down_line(self) -> bool:
        return self.scroll_down(1)

    def scroll_up_line(self) -> bool:
        return self.scroll_up(1)

    def scroll_down_screen(self) -> bool:
        return self.scroll_down(self.page_size)

    def scroll_up_screen(self) -> bool:
        return self.scroll_up(self.page_size)
