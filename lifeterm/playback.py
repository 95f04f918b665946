"""Playback controls: commands from the keyboard and the frame timeout they adjust."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)

MIN_TIMEOUT_MS = 10
MAX_TIMEOUT_MS = 1000
TIMEOUT_STEP_MS = 10
DEFAULT_TIMEOUT_MS = 100
DEFAULT_GLYPH = "*"


class Command(Enum):
    """Control commands produced by the input controller, one per tick."""
    NONE = "none"
    QUIT = "quit"
    INCREASE_TIMEOUT = "increase_timeout"
    DECREASE_TIMEOUT = "decrease_timeout"
    NEXT_SEED = "next_seed"          # demo mode only
    PREVIOUS_SEED = "previous_seed"  # demo mode only


class PlaybackState:
    """Frame timeout and live-cell glyph owned by the loop driver.

    The timeout always stays within [MIN_TIMEOUT_MS, MAX_TIMEOUT_MS].
    """

    def __init__(self, timeout_ms: int = DEFAULT_TIMEOUT_MS, glyph: str = DEFAULT_GLYPH):
        """Initialize playback state.

        Args:
            timeout_ms: Frame timeout in milliseconds
            glyph: Single character drawn for live cells

        Raises:
            ValueError: If timeout_ms is out of range or glyph is not one character
        """
        if not MIN_TIMEOUT_MS <= timeout_ms <= MAX_TIMEOUT_MS:
            raise ValueError(f"Timeout must be between {MIN_TIMEOUT_MS} and {MAX_TIMEOUT_MS} ms, got {timeout_ms}")
        if len(glyph) != 1:
            raise ValueError(f"Glyph must be a single character, got {glyph!r}")

        self.timeout_ms = timeout_ms
        self.glyph = glyph

    @property
    def timeout_seconds(self) -> float:
        """Frame timeout in seconds, for sleeping."""
        return self.timeout_ms / 1000.0

    def increase_timeout(self) -> int:
        """Slow playback down by one step, capped at MAX_TIMEOUT_MS."""
        self.timeout_ms = min(MAX_TIMEOUT_MS, self.timeout_ms + TIMEOUT_STEP_MS)
        return self.timeout_ms

    def decrease_timeout(self) -> int:
        """Speed playback up by one step, floored at MIN_TIMEOUT_MS."""
        self.timeout_ms = max(MIN_TIMEOUT_MS, self.timeout_ms - TIMEOUT_STEP_MS)
        return self.timeout_ms

    def apply(self, command: Command) -> None:
        """Apply a timeout command; other commands leave the state untouched."""
        if command is Command.INCREASE_TIMEOUT:
            self.increase_timeout()
            logger.debug(f"Timeout increased to {self.timeout_ms} ms")
        elif command is Command.DECREASE_TIMEOUT:
            self.decrease_timeout()
            logger.debug(f"Timeout decreased to {self.timeout_ms} ms")

    def __repr__(self) -> str:
        return f"PlaybackState(timeout_ms={self.timeout_ms}, glyph={self.glyph!r})"
