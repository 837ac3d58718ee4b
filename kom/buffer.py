"""Line source and append-only line buffer for the pager.

The buffer only ever grows: lines are pulled from the source when the
viewport needs more rows, and are kept for the rest of the session so that
scrolling back never has to re-read the input.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from itertools import accumulate, islice
from typing import BinaryIO, Iterator, Optional

logger = logging.getLogger(__name__)


class SourceError(OSError):
    """Raised when the input stream cannot be read or decoded."""


class LineSource:
    """Reads logical lines from a binary stream.

    A logical line is the text up to, and excluding, a ``\\n`` terminator.
    A ``\\r`` immediately before the terminator is dropped as well, and a
    final line without a terminator still counts as a line.
    """

    ENCODING = 'utf-8'

    def __init__(self, stream: BinaryIO, name: Optional[str] = None):
        self.stream = stream
        self.name = name
        self.lines_read = 0

    def read_line(self) -> Optional[str]:
        """Return the next logical line, or None at end of stream.

        Raises:
            SourceError: if the stream fails or the bytes are not valid UTF-8
        """
        try:
            raw = self.stream.readline()
        except OSError as e:
            raise SourceError(f"Cannot read {self._describe()}: {e}") from e
        if not raw:
            return None
        if raw.endswith(b'\n'):
            raw = raw[:-1]
            if raw.endswith(b'\r'):
                raw = raw[:-1]
        try:
            line = raw.decode(self.ENCODING)
        except UnicodeDecodeError as e:
            raise SourceError(
                f"Line {self.lines_read + 1} of {self._describe()} is not valid UTF-8"
            ) from e
        self.lines_read += 1
        return line

    def _describe(self) -> str:
        return self.name or "standard input"


def wrapped_row_count(line: str, width: int) -> int:
    """Number of terminal rows a logical line occupies at ``width`` columns.

    An empty line still takes one row. A line whose length is an exact
    multiple of the width does not get an extra blank row.
    """
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    if not line:
        return 1
    return (len(line) + width - 1) // width


class LineBuffer:
    """Append-only log of the lines read so far from a :class:`LineSource`."""

    def __init__(self, source: LineSource):
        self.source = source
        self.lines: list[str] = []
        self.exhausted = False
        # width -> running row totals, entry i covering lines[0..i]
        self._row_ends: dict[int, list[int]] = {}

    def append_line(self) -> Optional[str]:
        """Read one more line from the source and keep it.

        Returns:
            The line without its terminator, or None once the source is
            exhausted. Later calls keep returning None without touching the
            source again.
        """
        if self.exhausted:
            return None
        line = self.source.read_line()
        if line is None:
            self.exhausted = True
            logger.info("End of input after %d lines", len(self.lines))
            return None
        self.lines.append(line)
        for width, ends in self._row_ends.items():
            ends.append((ends[-1] if ends else 0) + wrapped_row_count(line, width))
        return line

    def row_ends(self, width: int) -> list[int]:
        """Running wrapped-row totals per logical line at ``width`` columns.

        Built once per width, then extended by :meth:`append_line`.
        """
        ends = self._row_ends.get(width)
        if ends is None:
            if width < 1:
                raise ValueError(f"width must be positive, got {width}")
            ends = list(accumulate(wrapped_row_count(line, width) for line in self.lines))
            self._row_ends[width] = ends
        return ends

    def wrapped_lines(self, width: int, start: int = 0) -> Iterator[str]:
        """Yield the buffered lines cut into rows of at most ``width`` characters.

        Rows restart at every logical line; there is no word wrap. The
        sequence is derived from the current buffer on every call, beginning
        at wrapped row ``start``.
        """
        ends = self.row_ends(width)
        index = bisect_right(ends, start)
        skip = start - (ends[index - 1] if index else 0)
        for line in islice(self.lines, index, None):
            if not line:
                yield ""
                continue
            for pos in range(skip * width, len(line), width):
                yield line[pos:pos + width]
            skip = 0

    def wrapped_len(self, width: int) -> int:
        """Total number of wrapped rows across all buffered lines."""
        ends = self.row_ends(width)
        return ends[-1] if ends else 0

    def __len__(self) -> int:
        return len(self.lines)
