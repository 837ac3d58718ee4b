"""Input event parsing on top of blessed keystrokes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

logger = logging.getLogger(__name__)


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'page_down', 'backspace')
    raw: str  # The raw key string from blessed
    is_ctrl: bool = False
    is_sequence: bool = False


class MouseButton(Enum):
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"
    OTHER = "other"


@dataclass
class MouseEvent:
    """A mouse report; only the wheel is acted upon."""
    button: MouseButton
    name: str
    x: int = -1
    y: int = -1


InputEvent = Union[KeyEvent, MouseEvent]


class KeyboardHandler:
    """Turns blessed keystrokes into :class:`KeyEvent` / :class:`MouseEvent`."""

    # blessed key names -> our special key values
    SPECIAL_KEYS = {
        'KEY_PGUP': 'page_up',
        'KEY_PGDOWN': 'page_down',
        'KEY_UP': 'up',
        'KEY_DOWN': 'down',
        'KEY_LEFT': 'left',
        'KEY_RIGHT': 'right',
        'KEY_BACKSPACE': 'backspace',
        'KEY_DELETE': 'delete',
        'KEY_ENTER': 'enter',
        'KEY_ESCAPE': 'escape',
    }

    MOUSE_BUTTONS = {
        'MOUSE_SCROLL_UP': MouseButton.WHEEL_UP,
        'MOUSE_SCROLL_DOWN': MouseButton.WHEEL_DOWN,
    }

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_event(self, timeout: Optional[float] = None) -> Optional[InputEvent]:
        """Read the next keystroke and parse it."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def events(self) -> Iterator[InputEvent]:
        """Yield events until the keystroke source runs dry."""
        while True:
            key = self.terminal.get_key(None)
            if not key:
                logger.info("Input event source ended")
                return
            event = self.parse_key(key)
            if event is not None:
                yield event

    def parse_key(self, key) -> Optional[InputEvent]:
        """Parse a blessed keystroke.

        Args:
            key: blessed.keyboard.Keystroke (a str subclass with ``name``)

        Returns:
            KeyEvent or MouseEvent, or None for an empty keystroke
        """
        key_str = str(key)
        name = getattr(key, 'name', None)
        if not key_str and not name:
            return None

        if name and name.startswith('MOUSE_'):
            x, y = getattr(key, 'mouse_xy', (-1, -1))
            button = self.MOUSE_BUTTONS.get(name, MouseButton.OTHER)
            return MouseEvent(button=button, name=name, x=x, y=y)

        # Single-byte ASCII control chars (Ctrl-<letter>), checked before the
        # name so that Backspace sent as ^H/DEL still maps below
        if len(key_str) == 1:
            o = ord(key_str)
            if o in (8, 127):
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if o in (10, 13):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if 1 <= o <= 26:
                ch = chr(ord('a') + o - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

        # Bare ESC
        if key_str == '\x1b':
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

        if name in self.SPECIAL_KEYS:
            return KeyEvent(key_type=KeyType.SPECIAL, value=self.SPECIAL_KEYS[name],
                            raw=key_str, is_sequence=True)

        if name:
            # Unbound named key (function keys, modified keys, ...)
            return KeyEvent(key_type=KeyType.SPECIAL, value=name.lower(), raw=key_str,
                            is_sequence=True)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)
