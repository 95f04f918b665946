"""Demo mode: browse the seed files in a directory while they run.

A sidebar on the left lists the seed files; j/k or the arrow keys move the
selection and restart the board from the newly selected seed.
"""

import curses
import logging
from pathlib import Path
from typing import Callable, List, Union

import numpy as np

from .core.board import Board
from .core.patterns import DEFAULT_ALIVE_CHARS, load_pattern_file
from .errors import ConfigError, TerminalError
from .loop import LoopContext, LoopDriver
from .playback import Command, PlaybackState
from .terminal.input import DEMO_KEYMAP, CursesInputSource, InputController
from .terminal.renderer import Renderer
from .terminal.session import STATUS_LINES, TerminalSession

logger = logging.getLogger(__name__)

SIDEBAR_WIDTH = 20


class SeedBrowser:
    """Sorted list of seed files with a wrap-around selection."""

    def __init__(self, seeds_dir: Union[str, Path], alive_chars: str = DEFAULT_ALIVE_CHARS):
        """Collect the seed files in ``seeds_dir``.

        Raises:
            ConfigError: If the directory is unreadable or holds no files
        """
        self.seeds_dir = Path(seeds_dir)
        self.alive_chars = alive_chars
        try:
            self.paths: List[Path] = sorted(p for p in self.seeds_dir.iterdir() if p.is_file())
        except OSError as e:
            raise ConfigError(f"Cannot list seeds directory {self.seeds_dir}: {e}") from e

        if not self.paths:
            raise ConfigError(f"No seed files found in {self.seeds_dir}")

        self.index = 0
        logger.info(f"Found {len(self.paths)} seeds in {self.seeds_dir}")

    def __len__(self) -> int:
        return len(self.paths)

    @property
    def current(self) -> Path:
        return self.paths[self.index]

    def next(self) -> Path:
        self.index = (self.index + 1) % len(self.paths)
        return self.current

    def previous(self) -> Path:
        self.index = (self.index - 1) % len(self.paths)
        return self.current

    def current_pattern(self) -> np.ndarray:
        return load_pattern_file(self.current, self.alive_chars)

    def names(self, width: int = SIDEBAR_WIDTH) -> List[str]:
        """Seed file names, shortened with '...' to fit a sidebar of ``width``."""
        names = []
        for path in self.paths:
            name = path.name
            if len(name) > width - 4:
                name = f"{name[:width - 7]}..."
            names.append(name)
        return names


def draw_sidebar(window, browser: SeedBrowser) -> None:
    """Draw the seed list with a border on its right edge.

    Raises:
        TerminalError: If curses fails to write the sidebar
    """
    try:
        rows, cols = window.getmaxyx()
        window.erase()
        window.vline(0, cols - 1, ord("|"), rows)
        for i, name in enumerate(browser.names(cols)):
            if i + 1 >= rows:
                break
            attr = curses.A_REVERSE if i == browser.index else curses.A_NORMAL
            window.addstr(i + 1, 2, name, attr)
        window.refresh()
    except curses.error as e:
        raise TerminalError(f"Failed to draw seed list: {e}") from e


class DemoDriver(LoopDriver):
    """Loop driver that also draws the seed list and switches seeds."""

    def __init__(self, context: LoopContext, browser: SeedBrowser, sidebar, **kwargs):
        super().__init__(context, **kwargs)
        self.browser = browser
        self.sidebar = sidebar

    def tick(self) -> Command:
        draw_sidebar(self.sidebar, self.browser)
        command = super().tick()

        if command is Command.NEXT_SEED:
            self.browser.next()
            self.reload()
        elif command is Command.PREVIOUS_SEED:
            self.browser.previous()
            self.reload()
        return command

    def reload(self) -> None:
        """Restart the board from the selected seed."""
        board = self.context.board
        self.context.board = Board.initialize_from_pattern(
            board.rows, board.cols, self.browser.current_pattern())
        logger.info(f"Switched to seed {self.browser.current.name}")


def build_demo_driver(session: TerminalSession, playback: PlaybackState, browser: SeedBrowser,
                      new_window: Callable = curses.newwin) -> DemoDriver:
    """Split the terminal into sidebar and display windows and wire a DemoDriver.

    Raises:
        TerminalError: If the terminal is too narrow for the sidebar
    """
    display_width = session.columns - SIDEBAR_WIDTH - 1
    rows = session.lines - STATUS_LINES
    cols = display_width - 1
    if rows < 1 or cols < 1:
        raise TerminalError(f"Terminal too small for demo mode ({session.columns}x{session.lines})")

    try:
        sidebar = new_window(session.lines, SIDEBAR_WIDTH, 0, 0)
        display = new_window(session.lines, display_width, 0, SIDEBAR_WIDTH + 1)
        display.keypad(True)
    except curses.error as e:
        raise TerminalError(f"Failed to create demo windows: {e}") from e

    board = Board.initialize_from_pattern(rows, cols, browser.current_pattern())
    context = LoopContext(
        board=board,
        playback=playback,
        renderer=Renderer(display),
        controller=InputController(CursesInputSource(display), DEMO_KEYMAP),
    )
    return DemoDriver(context, browser, sidebar)
