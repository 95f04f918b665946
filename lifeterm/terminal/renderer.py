"""Text rendering of a board snapshot into a curses window.

Every frame is a full redraw: the window is erased, every board row is
written, then the status line, then the window is refreshed.
"""

import curses
import logging
from typing import List, Optional

import numpy as np

from ..errors import TerminalError

logger = logging.getLogger(__name__)

DEAD_CHAR = " "
HELP_TEXT = "q: Quit, a: increase timeout, s: decrease timeout"


def format_rows(snapshot: np.ndarray, glyph: str) -> List[str]:
    """One string per board row, one character per cell.

    Args:
        snapshot: 2D boolean board state
        glyph: Character drawn for live cells

    Returns:
        List of row strings, live cells as ``glyph`` and dead cells as spaces
    """
    chars = np.where(snapshot, glyph, DEAD_CHAR)
    return ["".join(row) for row in chars.tolist()]


def format_status(live: int, timeout_ms: int, help_text: str = HELP_TEXT) -> str:
    """Status bar text shown under the board."""
    return f"Alive: {live}, Timeout: {timeout_ms} | {help_text}"


class Renderer:
    """Draws board snapshots into a curses window.

    The window only needs ``erase``, ``addstr``, ``refresh`` and
    ``getmaxyx``, so tests can pass a recording fake.
    """

    def __init__(self, window):
        """Initialize renderer.

        Args:
            window: curses window (or compatible object) to draw into
        """
        self.window = window
        self.frames = 0

    def render(self, snapshot: np.ndarray, glyph: str, status: Optional[str] = None) -> None:
        """Erase the window and draw one full frame.

        Args:
            snapshot: 2D boolean board state
            glyph: Character drawn for live cells
            status: Optional status line drawn below the board

        Raises:
            TerminalError: If curses fails to write the frame
        """
        try:
            self.window.erase()
            for row, line in enumerate(format_rows(snapshot, glyph)):
                self.window.addstr(row, 0, line)

            if status is not None:
                _, max_x = self.window.getmaxyx()
                # The bottom-right corner can't be written without a curses error
                self.window.addstr(snapshot.shape[0], 0, status[:max(0, max_x - 1)])

            self.window.refresh()
        except curses.error as e:
            raise TerminalError(f"Failed to draw frame {self.frames}: {e}") from e

        self.frames += 1
