"""
Conway's Game of Life Rules

Standard B3/S23 rules and toroidal neighbor counting. Only the classic
rule set is supported.
"""

from typing import Set

import numpy as np


# Standard Conway rules
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors

# Moore neighborhood offsets (row, col), center excluded
NEIGHBOR_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        return live_neighbors in SURVIVAL_SET
    else:
        return live_neighbors in BIRTH_SET


# Next state indexed by [alive, live_neighbors]
RULE_TABLE = np.array(
    [[update_cell(alive, n) for n in range(9)] for alive in (False, True)],
    dtype=bool,
)


def count_live_neighbors(state: np.ndarray, row: int, col: int) -> int:
    """Count live neighbors of one cell, wrapping at the edges.

    Args:
        state: 2D boolean numpy array
        row: Cell row
        col: Cell column

    Returns:
        Number of live neighbors (0-8)
    """
    rows, cols = state.shape
    count = 0

    for dr, dc in NEIGHBOR_OFFSETS:
        if state[(row + dr) % rows, (col + dc) % cols]:
            count += 1

    return count


def neighbor_counts(state: np.ndarray) -> np.ndarray:
    """Live neighbor count for every cell at once (toroidal wrap).

    Sums the eight rolled copies of the grid, so each count reads only
    from ``state``.

    Args:
        state: 2D boolean numpy array

    Returns:
        int8 array of the same shape with values 0-8
    """
    counts = np.zeros(state.shape, dtype=np.int8)
    cells = state.astype(np.int8)

    for dr, dc in NEIGHBOR_OFFSETS:
        counts += np.roll(cells, (-dr, -dc), axis=(0, 1))

    return counts


def next_generation(state: np.ndarray) -> np.ndarray:
    """Compute the generation after ``state`` as a new array.

    Every cell goes through the same rule as ``update_cell``, looked up
    from ``RULE_TABLE``.

    Args:
        state: Current 2D boolean grid (left untouched)

    Returns:
        New boolean grid holding the next generation
    """
    return RULE_TABLE[state.astype(np.intp), neighbor_counts(state)]
