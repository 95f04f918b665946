"""Command-line configuration.

All validation happens here, before the terminal is touched, so a bad
option is reported on a normal screen and the loop is never entered.
"""

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import numpy as np

from .core.patterns import load_pattern_file
from .errors import ConfigError
from .playback import (DEFAULT_GLYPH, DEFAULT_TIMEOUT_MS, MAX_TIMEOUT_MS,
                       MIN_TIMEOUT_MS, TIMEOUT_STEP_MS)

logger = logging.getLogger(__name__)

DEFAULT_ALIVE_COUNT = 1000
DEFAULT_SEEDS_DIR = "seeds"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class LifeConfig:
    """Validated startup configuration."""
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    alive_count: int = DEFAULT_ALIVE_COUNT
    seed_path: Optional[Path] = None
    seed_pattern: Optional[np.ndarray] = None
    glyph: str = DEFAULT_GLYPH
    demo: bool = False
    seeds_dir: Path = Path(DEFAULT_SEEDS_DIR)
    random_seed: Optional[int] = None
    log_file: Optional[Path] = None
    log_level: str = "WARNING"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lifeterm",
        description="Conway's Game of Life in the terminal. "
                    "Keys: q quit, a increase timeout, s decrease timeout.",
    )
    parser.add_argument("-t", "--timeout", type=int, default=DEFAULT_TIMEOUT_MS,
                        help=f"Frame timeout in ms, {MIN_TIMEOUT_MS}-{MAX_TIMEOUT_MS} "
                             f"in steps of {TIMEOUT_STEP_MS} (default: %(default)s)")
    parser.add_argument("-a", "--alive", type=int, default=DEFAULT_ALIVE_COUNT,
                        help="Number of alive cells to start with, ignored with --seed (default: %(default)s)")
    parser.add_argument("-s", "--seed", type=Path, default=None,
                        help="Seed file to start with ('*' marks a live cell)")
    parser.add_argument("-c", "--character", default=DEFAULT_GLYPH,
                        help="Character used to draw live cells (default: %(default)s)")
    parser.add_argument("-d", "--demo", action="store_true",
                        help="Browse the seed files in --seeds-dir")
    parser.add_argument("--seeds-dir", type=Path, default=Path(DEFAULT_SEEDS_DIR),
                        help="Directory of seed files for demo mode (default: %(default)s)")
    parser.add_argument("--random-seed", type=int, default=None,
                        help="Seed for the random board, for reproducible runs")
    parser.add_argument("--log-file", type=Path, default=None,
                        help="Write log messages to this file")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS,
                        help="Log level (default: %(default)s)")
    return parser


def normalize_timeout(timeout_ms: int) -> int:
    """Check the timeout range and round it down to a multiple of the step.

    Raises:
        ConfigError: If the timeout is outside [MIN_TIMEOUT_MS, MAX_TIMEOUT_MS]
    """
    if not MIN_TIMEOUT_MS <= timeout_ms <= MAX_TIMEOUT_MS:
        raise ConfigError(f"Timeout must be between {MIN_TIMEOUT_MS} and {MAX_TIMEOUT_MS} ms, got {timeout_ms}")

    rounded = (timeout_ms // TIMEOUT_STEP_MS) * TIMEOUT_STEP_MS
    if rounded != timeout_ms:
        logger.warning(f"Timeout {timeout_ms} ms rounded down to {rounded} ms")
    return rounded


def parse_config(argv: Optional[List[str]] = None) -> LifeConfig:
    """Parse and validate command-line arguments.

    Args:
        argv: Argument list (sys.argv[1:] if None)

    Returns:
        Validated LifeConfig; with --seed, the pattern is already loaded

    Raises:
        ConfigError: On any invalid option or unreadable seed file
    """
    args = build_parser().parse_args(argv)

    timeout_ms = normalize_timeout(args.timeout)

    if args.alive < 0:
        raise ConfigError(f"Alive cell count must be non-negative, got {args.alive}")

    if len(args.character) != 1:
        raise ConfigError(f"Character must be a single character, got {args.character!r}")

    seed_pattern = None
    if args.seed is not None and not args.demo:
        seed_pattern = load_pattern_file(args.seed)

    return LifeConfig(
        timeout_ms=timeout_ms,
        alive_count=args.alive,
        seed_path=args.seed,
        seed_pattern=seed_pattern,
        glyph=args.character,
        demo=args.demo,
        seeds_dir=args.seeds_dir,
        random_seed=args.random_seed,
        log_file=args.log_file,
        log_level=args.log_level,
    )
