"""
Log level enumeration

ALL < DEBUG < TRACE < INFO < WARN < ERROR < FATAL < OFF
"""

from enum import IntEnum
from typing import Dict, Optional


class LogLevel(IntEnum):
    """
    Log level enumeration.

    A log request of level p in a logger with level q is enabled if p >= q.
    ALL is the most permissive threshold and OFF the most restrictive.
    """

    ALL = 0     # All levels
    DEBUG = 1   # Fine-grained events useful to debug an application
    TRACE = 2   # Finer-grained informational events than DEBUG
    INFO = 3    # Progress of the application at coarse-grained level
    WARN = 4    # Potentially harmful situations
    ERROR = 5   # Errors that might still allow the application to continue
    FATAL = 6   # Severe errors that will presumably abort the application
    OFF = 7     # Logging disabled

    @property
    def description(self) -> str:
        """Capitalized level name, e.g. ``"Warn"``."""
        return LEVEL_NAMES[self]

    def __str__(self) -> str:
        """String representation of log level."""
        return self.description

    def permits(self, threshold: "LogLevel") -> bool:
        """Check whether a message at this level passes ``threshold``."""
        return self >= threshold

    @classmethod
    def from_rank(cls, rank: int) -> Optional["LogLevel"]:
        """
        Convert an integer rank to LogLevel.

        Args:
            rank: Level rank (0 for ALL through 7 for OFF)

        Returns:
            LogLevel enum value, or None if rank is out of range
        """
        try:
            return cls(rank)
        except ValueError:
            return None

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = LEVEL_FROM_NAME.get(level_str.strip().capitalize())
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.ALL: "All",
    LogLevel.DEBUG: "Debug",
    LogLevel.TRACE: "Trace",
    LogLevel.INFO: "Info",
    LogLevel.WARN: "Warn",
    LogLevel.ERROR: "Error",
    LogLevel.FATAL: "Fatal",
    LogLevel.OFF: "Off",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}
