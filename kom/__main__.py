"""kom CLI entry point.

Allows running via `python -m kom` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import BinaryIO, Optional

from .constants import PagerConstants
from .version import get_version_string

logger = logging.getLogger("kom")


def open_source(filename: Optional[str]) -> BinaryIO:
    """Open the stream to page.

    With no filename, standard input is the data and the keyboard is read
    from the controlling terminal instead: the original stdin is duplicated
    for reading and file descriptor 0 is pointed at ``/dev/tty``.

    Raises:
        OSError: if the file or the controlling terminal can't be opened
    """
    if filename is not None:
        return open(filename, 'rb')
    data = os.fdopen(os.dup(0), 'rb')
    try:
        tty_fd = os.open('/dev/tty', os.O_RDONLY)
    except OSError:
        data.close()
        raise
    os.dup2(tty_fd, 0)
    os.close(tty_fd)
    return data


def run_pager(stream: BinaryIO, filename: Optional[str], config) -> None:
    """Page ``stream`` until the user quits or input events stop."""
    # Lazy import to avoid importing UI deps for --version
    from .buffer import LineBuffer, LineSource
    from .command_line import CommandLine
    from .dispatcher import CommandDispatcher
    from .terminal import TerminalInterface
    from .viewport import Viewport

    terminal = TerminalInterface()
    logger.info("Terminal size: %dx%d", terminal.width, terminal.height)
    command_line = CommandLine(filename)
    buffer = LineBuffer(LineSource(stream, filename))
    viewport = Viewport(buffer, terminal.width, terminal.height, command_line)
    dispatcher = CommandDispatcher(viewport, terminal)

    with terminal.session(mouse=config.mouse,
                          mouse_query_timeout=config.mouse_query_timeout):
        viewport.fill()
        dispatcher.render()
        dispatcher.handle_events()


def _fail(message: str) -> int:
    print(f"kom: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing: version, help and an optional filename
    args = sys.argv[1:] if argv is None else list(argv)
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ("--help", "-h"):
        print(PagerConstants.USAGE)
        return 0
    if len(args) > 1 or (args and args[0].startswith('-') and args[0] != '-'):
        print(PagerConstants.USAGE, file=sys.stderr)
        return 2
    filename = args[0] if args and args[0] != '-' else None

    from .config import load_config
    from .log import init_logging
    from .viewport import ViewportError

    if not sys.stdout.isatty():
        print(PagerConstants.NOT_A_TTY_MESSAGE, file=sys.stderr)
        return 1
    if filename is None and sys.stdin.isatty():
        return _fail("missing filename (standard input is a terminal)")

    config = load_config()
    try:
        log_path = init_logging(config.log_level, config.log_file)
    except OSError as e:
        return _fail(f"cannot open log file: {e}")

    try:
        stream = open_source(filename)
    except OSError as e:
        logger.error("Cannot open input: %s", e)
        return _fail(f"{filename or 'standard input'}: {e.strerror or e}")

    logger.info("Paging %s (log: %s)", filename or "standard input", log_path)
    try:
        run_pager(stream, filename, config)
    except KeyboardInterrupt:
        pass
    except (OSError, ViewportError) as e:
        logger.exception("Fatal error")
        return _fail(str(e))
    finally:
        stream.close()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
