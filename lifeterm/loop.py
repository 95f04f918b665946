"""Fixed-cadence simulation loop.

Each tick advances the board, renders it, polls the keyboard once and applies
the resulting command. Whatever is left of the frame timeout is then slept
away, so a tick takes roughly the configured timeout rather than the timeout
plus the work.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .core.board import Board
from .playback import Command, PlaybackState
from .terminal.input import InputController
from .terminal.renderer import Renderer, format_status

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """Loop driver states. STOPPED is terminal."""
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass
class LoopContext:
    """Everything a tick reads or mutates, owned by the driver."""
    board: Board
    playback: PlaybackState
    renderer: Renderer
    controller: InputController
    state: LoopState = LoopState.RUNNING


def apply_command(context: LoopContext, command: Command) -> None:
    """Apply one command to the loop context."""
    if command is Command.QUIT:
        logger.info(f"Quit requested at generation {context.board.generation}")
        context.state = LoopState.STOPPED
    else:
        context.playback.apply(command)


def run_tick(context: LoopContext) -> Command:
    """Run one step-render-poll cycle.

    Args:
        context: Loop context (mutated in place)

    Returns:
        The command polled during this tick

    Raises:
        TerminalError: If the frame could not be drawn
    """
    board = context.board
    playback = context.playback

    live = board.step()
    status = format_status(live, playback.timeout_ms)
    context.renderer.render(board.snapshot(), playback.glyph, status)

    command = context.controller.poll()
    apply_command(context, command)
    return command


class LoopDriver:
    """Runs ticks until a quit command stops the loop.

    The clock and sleep functions are injectable so tests can run the loop
    without real waiting.
    """

    def __init__(self, context: LoopContext,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        self.context = context
        self.clock = clock
        self.sleep = sleep
        self.ticks = 0

    @property
    def state(self) -> LoopState:
        return self.context.state

    def tick(self) -> Command:
        """Run a single tick."""
        command = run_tick(self.context)
        self.ticks += 1
        return command

    def run(self) -> LoopState:
        """Loop until STOPPED.

        Returns:
            Final loop state (always LoopState.STOPPED)
        """
        logger.info(f"Loop started: {self.context.board!r}, {self.context.playback!r}")

        while self.context.state is LoopState.RUNNING:
            started = self.clock()
            self.tick()
            if self.context.state is LoopState.STOPPED:
                break

            remaining = self.context.playback.timeout_seconds - (self.clock() - started)
            if remaining > 0:
                self.sleep(remaining)
            else:
                logger.debug(f"Tick {self.ticks} overran the {self.context.playback.timeout_ms} ms timeout")

        logger.info(f"Loop stopped after {self.ticks} ticks")
        return self.context.state
