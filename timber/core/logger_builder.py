"""Logger builder pattern"""

from typing import Any, List, Optional, Tuple

from timber.core.log_format import LogFormat
from timber.core.log_level import LogLevel
from timber.core.logger import ErrorHandler, Logger
from timber.core.logger_config import LoggerConfig
from timber.formatters.date_format import DateFormatter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._sink: Any = None
        self._file_levels: List[Tuple[LogLevel, str]] = []
        self._error_handler: Optional[ErrorHandler] = None
        self._date_formatter: Optional[DateFormatter] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level."""
        self._config.min_level = level
        return self

    def with_format(self, log_format: LogFormat) -> "LoggerBuilder":
        """Set log format."""
        self._config.log_format = log_format
        return self

    def with_separator(self, separator: str) -> "LoggerBuilder":
        """Set separator placed between message parts."""
        self._config.separator = separator
        return self

    def with_terminator(self, terminator: str) -> "LoggerBuilder":
        """Set terminator appended to each log line."""
        self._config.terminator = terminator
        return self

    def with_enabled(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable the logger."""
        self._config.enabled = enabled
        return self

    def with_current_thread(self, enabled: bool = True) -> "LoggerBuilder":
        """Format and write on the calling thread."""
        self._config.use_current_thread = enabled
        return self

    def with_sink(self, sink: Any) -> "LoggerBuilder":
        """
        Write to a byte sink instead of the console.

        Args:
            sink: Object with write(bytes) or an integer file descriptor

        Returns:
            Self for method chaining

        Example:
            read_fd, write_fd = os.pipe()
            logger = LoggerBuilder().with_sink(write_fd).build()
        """
        self._sink = sink
        return self

    def with_file_level(self, level: LogLevel, file_path: str) -> "LoggerBuilder":
        """
        Register a minimum level for a file.

        Args:
            level: Minimum level for calls made from file_path
            file_path: Path or name of the file

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_level(LogLevel.INFO)
                .with_file_level(LogLevel.ALL, "payments.py")
                .build())
        """
        self._file_levels.append((level, file_path))
        return self

    def with_error_handler(self, handler: ErrorHandler) -> "LoggerBuilder":
        """Set callback receiving (exception, entry) for failed writes."""
        self._error_handler = handler
        return self

    def with_date_formatter(self, formatter: DateFormatter) -> "LoggerBuilder":
        """Set callable(pattern, timestamp) used for Date attributes."""
        self._date_formatter = formatter
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        # Re-run validation on values set through the builder
        self._config.__post_init__()
        logger = Logger(self._config)

        if self._sink is not None:
            logger.sink = self._sink
        if self._error_handler is not None:
            logger.error_handler = self._error_handler
        if self._date_formatter is not None:
            logger.date_formatter = self._date_formatter

        for level, file_path in self._file_levels:
            logger.register_file(level, file_path)

        return logger
