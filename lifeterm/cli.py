#!/usr/bin/env python3
"""
lifeterm entry point

Parses the command line, opens the curses session, builds the board and
runs the loop until the user quits.

Exit status: 0 after a normal quit, 1 on a terminal error, 2 on a
configuration error.
"""

import logging
import sys
from typing import List, Optional

import numpy as np

from .config import LifeConfig, parse_config
from .core.board import Board
from .demo import SeedBrowser, build_demo_driver
from .errors import ConfigError, TerminalError
from .loop import LoopContext, LoopDriver, LoopState
from .playback import PlaybackState
from .terminal.input import InputController
from .terminal.renderer import Renderer
from .terminal.session import TerminalSession, held_console_logs

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TERMINAL_ERROR = 1
EXIT_CONFIG_ERROR = 2

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def configure_logging(config: LifeConfig) -> None:
    """Send logs to the configured file, or to stderr when there is none.

    curses owns the screen while the loop runs, so stderr logging is left
    at WARNING unless a file is given.
    """
    if config.log_file is not None:
        logging.basicConfig(filename=str(config.log_file), level=config.log_level,
                            format=LOG_FORMAT, force=True)
    else:
        level = max(logging.WARNING, logging.getLevelName(config.log_level))
        logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def build_board(config: LifeConfig, rows: int, cols: int) -> Board:
    """Initial board from the seed pattern, or a random one."""
    if config.seed_pattern is not None:
        return Board.initialize_from_pattern(rows, cols, config.seed_pattern)

    rng = np.random.default_rng(config.random_seed)
    return Board.initialize_random(rows, cols, config.alive_count, rng)


def build_driver(config: LifeConfig, session: TerminalSession) -> LoopDriver:
    playback = PlaybackState(config.timeout_ms, config.glyph)

    if config.demo:
        browser = SeedBrowser(config.seeds_dir)
        return build_demo_driver(session, playback, browser)

    context = LoopContext(
        board=build_board(config, session.rows, session.cols),
        playback=playback,
        renderer=Renderer(session.window),
        controller=InputController(session.input_source()),
    )
    return LoopDriver(context)


def run(config: LifeConfig) -> LoopState:
    """Run the simulation inside a terminal session.

    Raises:
        TerminalError: If the terminal can't be set up or drawn to
        ConfigError: If demo mode finds no usable seeds
    """
    # Fail on an empty seeds directory before curses takes the screen
    if config.demo:
        SeedBrowser(config.seeds_dir)

    # Console log output waits until the screen is restored
    with held_console_logs(), TerminalSession() as session:
        driver = build_driver(config, session)
        return driver.run()


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point.

    Args:
        argv: Argument list (sys.argv[1:] if None)

    Returns:
        Process exit status
    """
    try:
        config = parse_config(argv)
    except ConfigError as e:
        print(f"lifeterm: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(config)
    logger.info(f"Starting: timeout={config.timeout_ms} ms, seed={config.seed_path}, demo={config.demo}")

    try:
        run(config)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        print(f"lifeterm: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except TerminalError as e:
        logger.error(f"Terminal error: {e}")
        print(f"lifeterm: {e}", file=sys.stderr)
        return EXIT_TERMINAL_ERROR
    except KeyboardInterrupt:
        logger.info("Interrupted")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
