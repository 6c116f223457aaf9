"""
Template formatter driven by LogFormat attributes

Renders one log line from a LogFormat and a LogEntry.
"""

import os
from datetime import datetime
from typing import List, Optional

from timber.core.attributes import (
    Attribute,
    Column,
    Date,
    FileName,
    Function,
    Level,
    Line,
    Message,
)
from timber.core.log_entry import LogEntry
from timber.core.log_format import LogFormat
from timber.core.log_level import LogLevel
from timber.formatters.date_format import DateFormatter, format_date


class LogFormatter:
    """
    Generate a log line formatted in accordance with a LogFormat.

    Every attribute is rendered by its own ``readable_*`` method so
    subclasses can change how a single value appears.
    """

    def __init__(
        self,
        log_format: LogFormat,
        terminator: str = "\n",
        date_formatter: Optional[DateFormatter] = None,
    ):
        """
        Initialize log formatter.

        Args:
            log_format: Template and attributes to render
            terminator: Appended to the template of every rendered line
            date_formatter: Callable(pattern, timestamp) used for Date
                            attributes (default: format_date)

        Example:
            formatter = LogFormatter(LogFormat("%s - %s", [Level(), Message()]))
            formatter.format(LogEntry(level=LogLevel.INFO, message="up"))
            # 'INFO - up\\n'
        """
        self.log_format = log_format
        self.terminator = terminator
        self.date_formatter = date_formatter or format_date

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry using the template.

        Args:
            entry: Log entry to format

        Returns:
            The final log line. Without attributes this is the bare message
            and neither template nor terminator is applied.

        Raises:
            TypeError: If the template placeholders do not match the
                       attributes; the mismatch is left to the caller.
        """
        if self.log_format.is_raw:
            return entry.message

        values = self.render_attributes(self.log_format.attributes, entry)
        return (self.log_format.template + self.terminator) % tuple(values)

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)

    def render_attributes(self, attributes, entry: LogEntry) -> List[str]:
        """Render every attribute of the format, in order."""
        return [self.render_attribute(attribute, entry) for attribute in attributes]

    def render_attribute(self, attribute: Attribute, entry: LogEntry) -> str:
        """Render a single attribute for entry."""
        if isinstance(attribute, Level):
            return self.readable_level(entry.level)
        if isinstance(attribute, FileName):
            return self.readable_file_name(
                entry.file_path, attribute.full_path, attribute.include_extension
            )
        if isinstance(attribute, Line):
            return self.readable_line(entry.line)
        if isinstance(attribute, Column):
            return self.readable_column(entry.column)
        if isinstance(attribute, Function):
            return self.readable_function(entry.function)
        if isinstance(attribute, Message):
            return self.readable_message(entry.message)
        if isinstance(attribute, Date):
            return self.readable_date(entry.timestamp, attribute.pattern)
        raise TypeError(f"Unsupported attribute: {attribute!r}")

    def readable_level(self, level: LogLevel) -> str:
        return level.description.upper()

    def readable_file_name(self, file_path: str, full_path: bool, include_extension: bool) -> str:
        """
        Readable file path or name.

        Args:
            file_path: The full file path
            full_path: Keep directory components
            include_extension: Keep the final extension
        """
        file_name = file_path
        if not full_path:
            file_name = os.path.basename(file_name)
        if not include_extension:
            file_name = os.path.splitext(file_name)[0]
        return file_name

    def readable_line(self, line: int) -> str:
        return str(line)

    def readable_column(self, column: int) -> str:
        return str(column)

    def readable_function(self, function: str) -> str:
        return function

    def readable_message(self, message: str) -> str:
        return message

    def readable_date(self, timestamp: datetime, pattern: str) -> str:
        return self.date_formatter(pattern, timestamp)

    def __repr__(self) -> str:
        """String representation."""
        return f"LogFormatter(template={self.log_format.template!r})"
