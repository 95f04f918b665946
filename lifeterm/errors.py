"""Exception hierarchy for lifeterm.

Core precondition violations (bad board dimensions, negative counts) raise
plain ValueError. The classes here cover failures that end the program.
"""


class LifeTermError(Exception):
    """Base class for fatal lifeterm errors."""


class ConfigError(LifeTermError):
    """Invalid command-line configuration or unreadable seed file."""


class TerminalError(LifeTermError):
    """Terminal setup failed or a frame could not be written."""
