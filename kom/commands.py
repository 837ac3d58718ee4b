"""Command pattern implementation for pager key bindings."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType

if TYPE_CHECKING:
    from .dispatcher import CommandDispatcher
    from .keyboard import KeyEvent


class PagerCommand(ABC):
    """Base class for Normal-mode commands."""

    @abstractmethod
    def execute(self, dispatcher: 'CommandDispatcher', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            dispatcher: CommandDispatcher instance
            key_event: The key event that triggered this command

        Returns:
            True if the screen needs to be redrawn
        """
        pass


class ScrollDownLineCommand(PagerCommand):
    def execute(self, dispatcher, key_event):
        return dispatcher.viewport.scroll_down_line()


class ScrollUpLineCommand(PagerCommand):
    def execute(self, dispatcher, key_event):
        return dispatcher.viewport.scroll_up_line()


class ScrollDownScreenCommand(PagerCommand):
    def execute(self, dispatcher, key_event):
        return dispatcher.viewport.scroll_down_screen()


class ScrollUpScreenCommand(PagerCommand):
    def execute(self, dispatcher, key_event):
        return dispatcher.viewport.scroll_up_screen()


class StartSearchCommand(PagerCommand):
    def execute(self, dispatcher, key_event):
        dispatcher.command_line.switch_to_search()
        return True


class QuitCommand(PagerCommand):
    def execute(self, dispatcher, key_event):
        dispatcher.running = False
        return False


class CommandRegistry:
    """Maps Normal-mode keys to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], PagerCommand] = {}
        self._register_default_commands()

    def _register_default_commands(self):
        self.register((KeyType.REGULAR, 'q'), QuitCommand())

        # Line scrolling
        self.register((KeyType.REGULAR, 'j'), ScrollDownLineCommand())
        self.register((KeyType.SPECIAL, 'down'), ScrollDownLineCommand())
        self.register((KeyType.REGULAR, 'k'), ScrollUpLineCommand())
        self.register((KeyType.SPECIAL, 'up'), ScrollUpLineCommand())

        # Screen scrolling
        for key in [(KeyType.REGULAR, ' '), (KeyType.REGULAR, 'f'),
                    (KeyType.CTRL, 'v'), (KeyType.CTRL, 'f'),
                    (KeyType.SPECIAL, 'page_down')]:
            self.register(key, ScrollDownScreenCommand())
        self.register((KeyType.SPECIAL, 'page_up'), ScrollUpScreenCommand())

        self.register((KeyType.REGULAR, '/'), StartSearchCommand())

    def register(self, key: Tuple[KeyType, str], command: PagerCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[PagerCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, dispatcher: 'CommandDispatcher', key_event: 'KeyEvent') -> bool:
        """Execute the command bound to the given key event.

        Returns:
            True if the screen needs to be redrawn; unbound keys return False
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(dispatcher, key_event)
        return False
