#!/usr/bin/env python3
"""kom - a terminal pager.

Usage:
    python main.py [filename]
    some-command | python main.py

Controls:
    j / Down, k / Up: Scroll one line
    Space, f, Ctrl-F, Ctrl-V, PgDn: Scroll one screen down
    PgUp: Scroll one screen up
    /: Type a search, Esc to leave it
    q: Quit
"""

import sys
from kom.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
