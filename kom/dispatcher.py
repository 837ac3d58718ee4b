"""Event loop: routes input events to the viewport and the command line."""

from __future__ import annotations

import logging
from typing import Optional

from .command_line import CommandLine
from .commands import CommandRegistry
from .keyboard import KeyboardHandler, KeyEvent, KeyType, MouseButton, MouseEvent
from .viewport import Viewport

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """Owns the pager state for the duration of the event loop.

    All mutation happens here, one event at a time, and the screen is
    redrawn only when a handler reports a visible change.
    """

    def __init__(self, viewport: Viewport, terminal,
                 keyboard: Optional[KeyboardHandler] = None,
                 command_registry: Optional[CommandRegistry] = None):
        self.viewport = viewport
        self.command_line: CommandLine = viewport.command_line
        self.terminal = terminal
        self.keyboard = keyboard or KeyboardHandler(terminal)
        self.command_registry = command_registry or CommandRegistry()
        self.running = False

    def render(self) -> None:
        self.terminal.draw_screen(
            self.viewport.visible_rows(),
            self.command_line.status_text(),
            self.command_line.cursor_column(),
            highlight=self.command_line.is_banner,
        )

    def handle_events(self) -> None:
        """Process events until quit or until the event source ends."""
        self.running = True
        for event in self.keyboard.events():
            if isinstance(event, MouseEvent):
                self.handle_mouse(event)
            else:
                self.handle_key(event)
            if not self.running:
                logger.debug("Quit requested")
                break
        self.running = False

    def handle_key(self, key_event: KeyEvent) -> bool:
        """Handle a keyboard event.

        Returns:
            True if the screen was redrawn
        """
        if self.command_line.is_searching:
            changed = self._handle_search_key(key_event)
        else:
            changed = self.command_registry.execute(self, key_event)
            if not changed and self.command_registry.get_command(
                    key_event.key_type, key_event.value) is None:
                logger.debug("Unbound key: %r", key_event)
        if changed:
            self.render()
        return changed

    def _handle_search_key(self, key_event: KeyEvent) -> bool:
        """Edit the search text; Escape leaves Search mode."""
        search = self.command_line.search
        if key_event.key_type == KeyType.SPECIAL:
            if key_event.value == 'escape':
                self.command_line.switch_to_normal()
                return True
            if key_event.value == 'backspace':
                return search.erase_char()
            if key_event.value == 'delete':
                return search.delete_char()
            if key_event.value == 'left':
                return search.cursor_left()
            if key_event.value == 'right':
                return search.cursor_right()
            # Enter and the rest: running a search is not supported
            return False
        if key_event.key_type == KeyType.REGULAR and key_event.value.isprintable():
            return search.push_char(key_event.value)
        return False

    def handle_mouse(self, mouse_event: MouseEvent) -> bool:
        """Scroll a line per wheel notch, in any mode.

        Returns:
            True if the screen was redrawn
        """
        logger.debug("Mouse event: %r", mouse_event)
        if mouse_event.button == MouseButton.WHEEL_UP:
            changed = self.viewport.scroll_up_line()
        elif mouse_event.button == MouseButton.WHEEL_DOWN:
            changed = self.viewport.scroll_down_line()
        else:
            return False
        if changed:
            self.render()
        return changed
