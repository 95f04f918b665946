"""Simulation core: board state, Conway rules and seed patterns."""

from .board import Board
from .conway_rules import BIRTH_SET, SURVIVAL_SET, next_generation
from .patterns import load_pattern_file, parse_pattern

__all__ = [
    'Board',
    'BIRTH_SET',
    'SURVIVAL_SET',
    'next_generation',
    'load_pattern_file',
    'parse_pattern',
]
