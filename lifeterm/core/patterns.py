"""Seed patterns for the board.

A seed file is a character grid: each line is a row, each character a cell.
Characters listed in ``alive_chars`` mark live cells, anything else is dead.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

import numpy as np

from ..errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_ALIVE_CHARS = "*"


def parse_pattern(lines: Iterable[str], alive_chars: str = DEFAULT_ALIVE_CHARS) -> np.ndarray:
    """Convert a character grid into a boolean array.

    Ragged lines are padded with dead cells up to the widest line.

    Args:
        lines: Rows of the pattern, with or without trailing newlines
        alive_chars: Characters that mark a live cell

    Returns:
        2D boolean array, shape (0, 0) when there are no lines
    """
    rows = [line.rstrip("\r\n") for line in lines]
    if not rows:
        return np.zeros((0, 0), dtype=bool)

    width = max(len(row) for row in rows)
    pattern = np.zeros((len(rows), width), dtype=bool)

    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            if char in alive_chars:
                pattern[r, c] = True

    return pattern


def load_pattern_file(path: Union[str, Path], alive_chars: str = DEFAULT_ALIVE_CHARS) -> np.ndarray:
    """Read and parse a seed pattern file.

    Args:
        path: Seed file location
        alive_chars: Characters that mark a live cell

    Returns:
        2D boolean array

    Raises:
        ConfigError: If the file cannot be read
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read seed file {path}: {e}") from e

    pattern = parse_pattern(text.splitlines(), alive_chars)
    logger.info(f"Loaded seed {path} ({pattern.shape[0]}x{pattern.shape[1]}, "
                f"{int(pattern.sum())} alive)")
    return pattern


def pattern_to_text(pattern: np.ndarray, alive_char: str = "*", dead_char: str = ".") -> str:
    """Render a boolean pattern back to the seed file format."""
    return "\n".join(
        "".join(alive_char if cell else dead_char for cell in row)
        for row in pattern
    )


# Classic patterns
GLIDER = np.array([
    [False, True, False],
    [False, False, True],
    [True, True, True]
], dtype=bool)

BLINKER = np.array([[True, True, True]], dtype=bool)

BLOCK = np.array([
    [True, True],
    [True, True]
], dtype=bool)
