"""Terminal I/O: curses session, frame rendering and keyboard input."""

from .input import DEFAULT_KEYMAP, DEMO_KEYMAP, CursesInputSource, InputController, InputSource
from .renderer import Renderer, format_rows, format_status
from .session import TerminalSession, held_console_logs

__all__ = [
    'DEFAULT_KEYMAP',
    'DEMO_KEYMAP',
    'CursesInputSource',
    'InputController',
    'InputSource',
    'Renderer',
    'format_rows',
    'format_status',
    'TerminalSession',
    'held_console_logs',
]
