"""
lifeterm: Conway's Game of Life in a text terminal

Toroidal board simulation with a curses renderer and live keyboard control
of the frame timeout.
"""

from .core.board import Board
from .errors import ConfigError, LifeTermError, TerminalError
from .loop import LoopContext, LoopDriver, LoopState, run_tick
from .playback import Command, PlaybackState

__version__ = "0.1.0"

__all__ = [
    'Board',
    'Command',
    'ConfigError',
    'LifeTermError',
    'LoopContext',
    'LoopDriver',
    'LoopState',
    'PlaybackState',
    'TerminalError',
    'run_tick',
]
