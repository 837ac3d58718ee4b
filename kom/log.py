"""Log file setup.

The terminal is taken over by the pager, so log records go to a file. By
default that is a new private ``kom.log.*`` file in the temporary directory.
"""

from __future__ import annotations

import logging
import os
import tempfile
from typing import Optional

from .constants import PagerConstants

# Names accepted in KOM_LOG_LEVEL; None disables logging
LOG_LEVELS = {
    'off': None,
    'error': logging.ERROR,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'info': logging.INFO,
    'debug': logging.DEBUG,
    'trace': logging.DEBUG,
}


def parse_level(name: Optional[str]) -> Optional[int]:
    """Map a level name to a logging level; unknown names mean INFO."""
    if not name:
        return logging.INFO
    key = name.strip().lower()
    if key not in LOG_LEVELS:
        return logging.INFO
    return LOG_LEVELS[key]


def default_log_path() -> str:
    """Create a fresh, private log file in the temp dir and return its path."""
    fd, path = tempfile.mkstemp(prefix=PagerConstants.LOG_FILE_PREFIX)
    os.close(fd)
    return path


def init_logging(level_name: Optional[str] = None,
                 log_file: Optional[str] = None) -> Optional[str]:
    """Attach a file handler to the ``kom`` logger.

    Returns:
        Path of the log file, or None when logging is off
    """
    root = logging.getLogger(PagerConstants.APP_NAME)
    level = parse_level(level_name)
    if level is None:
        root.addHandler(logging.NullHandler())
        root.propagate = False
        return None

    path = log_file or default_log_path()
    handler = logging.FileHandler(path, encoding='utf-8')
    handler.setFormatter(logging.Formatter(PagerConstants.LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    # Keep records away from any handler writing to the terminal
    root.propagate = False
    root.debug("Initialized logger")
    return path
