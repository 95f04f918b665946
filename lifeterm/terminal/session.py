"""Curses terminal session: raw-mode setup, board dimensions and teardown."""

import curses
import locale
import logging
import logging.handlers
from contextlib import contextmanager

from ..errors import TerminalError
from .input import CursesInputSource

logger = logging.getLogger(__name__)

STATUS_LINES = 1


class TerminalSession:
    """Context manager owning the curses screen.

    On enter the terminal is switched to cbreak/no-echo mode with a hidden
    cursor and non-blocking reads. On exit, normal or not, it is restored.

    Attributes:
        window: The curses standard screen
        lines: Terminal height
        columns: Terminal width
        rows: Board rows that fit above the status line
        cols: Board columns that fit without touching the last column
    """

    def __init__(self):
        self.window = None
        self.lines = 0
        self.columns = 0
        self.rows = 0
        self.cols = 0

    def __enter__(self) -> 'TerminalSession':
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error:
            logger.debug("Environment locale not available, keeping the default")
        try:
            self.window = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self.window.keypad(True)
            self.window.nodelay(True)
            try:
                curses.curs_set(0)
            except curses.error:
                logger.debug("Terminal can't hide the cursor")
        except curses.error as e:
            self.restore()
            raise TerminalError(f"Failed to initialize terminal: {e}") from e

        lines, columns = self.window.getmaxyx()
        self.lines = lines
        self.columns = columns
        self.rows = lines - STATUS_LINES
        self.cols = columns - 1
        if self.rows < 1 or self.cols < 1:
            self.restore()
            raise TerminalError(f"Terminal too small ({columns}x{lines})")

        logger.info(f"Terminal session started, board area {self.rows}x{self.cols}")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def input_source(self) -> CursesInputSource:
        """Non-blocking key source reading from the session window."""
        return CursesInputSource(self.window)

    def restore(self) -> None:
        """Put the terminal back into normal mode. Safe to call twice."""
        if self.window is None or curses.isendwin():
            return
        try:
            self.window.keypad(False)
            curses.nocbreak()
            curses.echo()
        except curses.error:
            logger.warning("Failed to reset terminal modes")
        curses.endwin()
        logger.info("Terminal session restored")


def _is_console_handler(handler: logging.Handler) -> bool:
    # FileHandler subclasses StreamHandler; only plain stream handlers hit the screen
    return type(handler) is logging.StreamHandler


@contextmanager
def held_console_logs():
    """Hold console log output back until the block exits.

    While curses owns the screen, any text written to stderr lands on top of
    the board and stays there. Root console handlers, or the module's last
    resort handler when the root has none, are swapped for a memory buffer.
    On exit the buffered records are replayed to them in order.
    """
    root = logging.getLogger()
    held = [h for h in root.handlers if _is_console_handler(h)]
    targets = held if held or root.handlers else [logging.lastResort]
    buffer = logging.handlers.MemoryHandler(capacity=1000, flushLevel=logging.CRITICAL + 1)

    for handler in held:
        root.removeHandler(handler)
    root.addHandler(buffer)
    try:
        yield buffer
    finally:
        root.removeHandler(buffer)
        for handler in held:
            root.addHandler(handler)
        records = list(buffer.buffer)
        buffer.close()
        for record in records:
            for handler in targets:
                if handler is not None and record.levelno >= handler.level:
                    handler.handle(record)
