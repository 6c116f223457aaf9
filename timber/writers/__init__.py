"""Writers module - Log output handlers"""

from timber.writers.console_writer import ConsoleWriter
from timber.writers.sink_writer import SinkWriter

__all__ = ["ConsoleWriter", "SinkWriter"]
