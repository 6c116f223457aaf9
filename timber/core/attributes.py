"""
Log format attributes

Each attribute is one placeholder of a LogFormat template and contributes
exactly one substituted value to the rendered log line.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Attribute:
    """Base class for all log format attributes."""


@dataclass(frozen=True)
class Level(Attribute):
    """The log level of the message, upper-cased."""


@dataclass(frozen=True)
class FileName(Attribute):
    """
    The file that triggered the log.

    Attributes:
        full_path: Keep the directory components of the path
        include_extension: Keep the file extension
    """

    full_path: bool = False
    include_extension: bool = True


@dataclass(frozen=True)
class Line(Attribute):
    """The line in the source code of the caller."""


@dataclass(frozen=True)
class Column(Attribute):
    """The column in the source code of the caller."""


@dataclass(frozen=True)
class Function(Attribute):
    """The function that triggered the call."""


@dataclass(frozen=True)
class Message(Attribute):
    """The log message as a string."""


@dataclass(frozen=True)
class Date(Attribute):
    """
    The date and time the log was triggered at.

    Attributes:
        pattern: Date pattern passed to the date formatter, e.g. "HH:mm:ss"
    """

    pattern: str = "HH:mm:ss"
