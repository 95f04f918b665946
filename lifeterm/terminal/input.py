"""Non-blocking keyboard input and key-to-command translation."""

import curses
import logging
from typing import Dict, Optional, Protocol

from ..playback import Command

logger = logging.getLogger(__name__)

NO_KEY = -1

DEFAULT_KEYMAP: Dict[int, Command] = {
    ord("q"): Command.QUIT,
    ord("a"): Command.INCREASE_TIMEOUT,
    ord("s"): Command.DECREASE_TIMEOUT,
}

DEMO_KEYMAP: Dict[int, Command] = {
    **DEFAULT_KEYMAP,
    ord("j"): Command.NEXT_SEED,
    curses.KEY_DOWN: Command.NEXT_SEED,
    ord("k"): Command.PREVIOUS_SEED,
    curses.KEY_UP: Command.PREVIOUS_SEED,
}


class InputSource(Protocol):
    """Anything that can report a pending key press without blocking."""

    def poll(self) -> Optional[int]:
        """Return a pending key code, or None when nothing is pending."""
        ...


class CursesInputSource:
    """Reads keys from a curses window in no-delay mode."""

    def __init__(self, window):
        self.window = window
        self.window.nodelay(True)

    def poll(self) -> Optional[int]:
        try:
            key = self.window.getch()
        except curses.error:
            return None
        return None if key == NO_KEY else key


class InputController:
    """Translates key presses into playback commands.

    Keys missing from the keymap are ignored and produce Command.NONE.
    """

    def __init__(self, source: InputSource, keymap: Optional[Dict[int, Command]] = None):
        """Initialize input controller.

        Args:
            source: Non-blocking key source
            keymap: Key code to command mapping (DEFAULT_KEYMAP if None)
        """
        self.source = source
        self.keymap = keymap if keymap is not None else DEFAULT_KEYMAP

    def poll(self) -> Command:
        """Check once for a key press and return the matching command."""
        key = self.source.poll()
        if key is None:
            return Command.NONE

        command = self.keymap.get(key, Command.NONE)
        if command is Command.NONE:
            logger.debug(f"Ignoring key {key}")
        return command
