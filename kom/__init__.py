"""kom - a small terminal pager."""

from .buffer import LineBuffer, LineSource, SourceError, wrapped_row_count
from .command_line import CommandLine, End, Filename, InvalidModeError, Normal, Search
from .viewport import Viewport, ViewportError

__all__ = [
    'LineBuffer',
    'LineSource',
    'SourceError',
    'wrapped_row_count',
    'CommandLine',
    'Normal',
    'Filename',
    'End',
    'Search',
    'InvalidModeError',
    'Viewport',
    'ViewportError',
]
