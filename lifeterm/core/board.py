"""Board state for Conway's Game of Life on a torus.

The board is a fixed-size numpy boolean grid. Row and column indices wrap
modulo the board dimensions, so no edge is special-cased. Each generation is
computed from a snapshot of the previous one and then swapped in.
"""

import logging
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .conway_rules import count_live_neighbors, neighbor_counts, next_generation
from .patterns import parse_pattern, pattern_to_text

logger = logging.getLogger(__name__)


class Board:
    """2D toroidal Game of Life board.

    Attributes:
        rows: Number of rows (fixed)
        cols: Number of columns (fixed)
        state: 2D numpy boolean array (True=alive, False=dead)
        generation: Number of steps taken since initialization
    """

    def __init__(self, rows: int, cols: int, initial_state: Optional[np.ndarray] = None):
        """Initialize an all-dead board, or one holding ``initial_state``.

        Args:
            rows: Board height in cells
            cols: Board width in cells
            initial_state: Optional (rows, cols) array to copy in

        Raises:
            ValueError: If dimensions are not positive or initial_state shape doesn't match
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self.generation = 0

        if initial_state is not None:
            if initial_state.shape != (rows, cols):
                raise ValueError(f"Initial state shape {initial_state.shape} doesn't match board size {(rows, cols)}")
            self.state = initial_state.astype(bool, copy=True)
        else:
            self.state = np.zeros((rows, cols), dtype=bool)

        logger.debug(f"Created board {rows}x{cols}")

    @classmethod
    def initialize_random(cls, rows: int, cols: int, alive_count: int,
                          rng: Optional[np.random.Generator] = None) -> 'Board':
        """Create a board with ``alive_count`` distinct random live cells.

        Cells are drawn uniformly without replacement. A count above the
        number of cells fills the whole board.

        Args:
            rows: Board height in cells
            cols: Board width in cells
            alive_count: Target number of live cells
            rng: Random generator (a fresh default_rng() when omitted)

        Returns:
            Board: New randomly populated board

        Raises:
            ValueError: If alive_count is negative
        """
        if alive_count < 0:
            raise ValueError(f"alive_count must be non-negative, got {alive_count}")

        board = cls(rows, cols)
        total = rows * cols
        if alive_count > total:
            logger.warning(f"alive_count {alive_count} exceeds {total} cells, filling the board")
            alive_count = total

        if rng is None:
            rng = np.random.default_rng()

        chosen = rng.choice(total, size=alive_count, replace=False)
        board.state.flat[chosen] = True

        logger.info(f"Random board {rows}x{cols} with {alive_count} alive cells")
        return board

    @classmethod
    def initialize_from_pattern(cls, rows: int, cols: int,
                                pattern: Union[np.ndarray, Sequence[str]]) -> 'Board':
        """Create a board from a seed pattern aligned to the top-left corner.

        Pattern cells beyond the board are discarded; board cells the
        pattern doesn't cover are dead.

        Args:
            rows: Board height in cells
            cols: Board width in cells
            pattern: 2D boolean array, or rows of characters ('*' = alive)

        Returns:
            Board: New board holding the truncated pattern
        """
        if not isinstance(pattern, np.ndarray):
            pattern = parse_pattern(pattern)

        board = cls(rows, cols)
        if pattern.ndim != 2 or pattern.size == 0:
            logger.warning("Empty seed pattern, starting with a dead board")
            return board

        height = min(rows, pattern.shape[0])
        width = min(cols, pattern.shape[1])
        board.state[:height, :width] = pattern[:height, :width].astype(bool)

        if pattern.shape[0] > rows or pattern.shape[1] > cols:
            logger.info(f"Seed {pattern.shape[0]}x{pattern.shape[1]} truncated to {rows}x{cols}")

        return board

    @property
    def shape(self) -> Tuple[int, int]:
        """Board dimensions as (rows, cols)."""
        return (self.rows, self.cols)

    def step(self) -> int:
        """Advance one generation.

        The next state is built from the current one as a whole and then
        replaces it, so no cell sees a half-updated neighborhood.

        Returns:
            Number of live cells after the step
        """
        self.state = next_generation(self.state)
        self.generation += 1
        return self.live_count()

    def snapshot(self) -> np.ndarray:
        """Read-only view of the current generation."""
        view = self.state.view()
        view.flags.writeable = False
        return view

    def count_neighbors(self, row: int, col: int) -> int:
        """Live neighbors of one cell, wrapping around the edges."""
        return count_live_neighbors(self.state, row, col)

    def neighbor_counts(self) -> np.ndarray:
        """Live neighbor counts for every cell."""
        return neighbor_counts(self.state)

    def live_count(self) -> int:
        """Count total number of alive cells."""
        return int(np.count_nonzero(self.state))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.state)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.shape == other.shape and np.array_equal(self.state, other.state)

    def __str__(self) -> str:
        return pattern_to_text(self.state)

    def __repr__(self) -> str:
        return f"Board({self.rows}x{self.cols}, alive={self.live_count()}, generation={self.generation})"
