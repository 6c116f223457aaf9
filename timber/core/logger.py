"""
Main Logger class - level-gated logger with an ordered background writer
"""

from __future__ import annotations
from functools import partial
from typing import Any, Callable, Dict, Optional
import atexit
import queue
import sys
import threading

from timber.core.log_entry import LogEntry, bare_file_name, find_caller
from timber.core.log_format import LogFormat
from timber.core.log_level import LogLevel
from timber.core.logger_config import LoggerConfig
from timber.formatters.date_format import DateFormatter, format_date
from timber.formatters.log_formatter import LogFormatter
from timber.writers.console_writer import ConsoleWriter
from timber.writers.sink_writer import SinkWriter

ErrorHandler = Callable[[Exception, LogEntry], None]

# Queue marker that stops the worker thread
_STOP = object()


class Logger:
    """
    Logger with per-file level overrides and a serial write queue.

    Calls are gated on the calling thread. Permitted calls are rendered
    and written by a single worker thread in the order they were made,
    or right away when ``use_current_thread`` is set.

    Example:
        logger = Logger(min_level=LogLevel.INFO)
        logger.info("Application started", "pid", os.getpid())
        logger.register_file(LogLevel.ERROR)  # quiet this module
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        *,
        min_level: Optional[LogLevel] = None,
        log_format: Optional[LogFormat] = None,
    ):
        config = config or LoggerConfig.default()
        self._lock = threading.RLock()
        self._name = config.name
        self._enabled = config.enabled
        self._min_level = config.min_level
        self._separator = config.separator
        self._terminator = config.terminator
        self._log_format = config.log_format
        self._use_current_thread = config.use_current_thread
        self._file_levels: Dict[str, LogLevel] = {}
        self._console = ConsoleWriter()
        self._writer: Any = self._console
        self._sink: Any = None
        self._error_handler: Optional[ErrorHandler] = None
        self._date_formatter: DateFormatter = format_date
        self._log_queue: queue.Queue = queue.Queue()
        self._worker_thread: Optional[threading.Thread] = None
        self._stopping_worker: Optional[threading.Thread] = None
        self._exit_hook_registered = False
        self._metrics = {"logged": 0, "processed": 0, "failed": 0}

        if min_level is not None:
            self.min_level = min_level
        if log_format is not None:
            self.log_format = log_format

    # Configuration

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        with self._lock:
            return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        with self._lock:
            self._enabled = bool(value)

    @property
    def min_level(self) -> LogLevel:
        with self._lock:
            return self._min_level

    @min_level.setter
    def min_level(self, level: LogLevel) -> None:
        if not isinstance(level, LogLevel):
            raise TypeError("min_level must be LogLevel enum")
        with self._lock:
            self._min_level = level

    @property
    def separator(self) -> str:
        """Placed between the parts of one log call, e.g. ", "."""
        with self._lock:
            return self._separator

    @separator.setter
    def separator(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("separator must be a string")
        with self._lock:
            self._separator = value

    @property
    def terminator(self) -> str:
        """Appended to every formatted log line, typically "\\n"."""
        with self._lock:
            return self._terminator

    @terminator.setter
    def terminator(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("terminator must be a string")
        with self._lock:
            self._terminator = value

    @property
    def log_format(self) -> LogFormat:
        with self._lock:
            return self._log_format

    @log_format.setter
    def log_format(self, value: LogFormat) -> None:
        if not isinstance(value, LogFormat):
            raise TypeError("log_format must be a LogFormat")
        with self._lock:
            self._log_format = value

    @property
    def use_current_thread(self) -> bool:
        """Format and write on the calling thread instead of the worker."""
        with self._lock:
            return self._use_current_thread

    @use_current_thread.setter
    def use_current_thread(self, value: bool) -> None:
        with self._lock:
            self._use_current_thread = bool(value)

    @property
    def sink(self) -> Any:
        """Byte sink for output. None writes to the console."""
        with self._lock:
            return self._sink

    @sink.setter
    def sink(self, sink: Any) -> None:
        writer = SinkWriter(sink) if sink is not None else self._console
        with self._lock:
            self._sink = sink
            self._writer = writer

    # Alias kept for code written against the pipe name
    pipe = sink

    @property
    def error_handler(self) -> Optional[ErrorHandler]:
        """Called with (exception, entry) when rendering or writing fails."""
        with self._lock:
            return self._error_handler

    @error_handler.setter
    def error_handler(self, handler: Optional[ErrorHandler]) -> None:
        if handler is not None and not callable(handler):
            raise TypeError("error_handler must be callable")
        with self._lock:
            self._error_handler = handler

    @property
    def date_formatter(self) -> DateFormatter:
        with self._lock:
            return self._date_formatter

    @date_formatter.setter
    def date_formatter(self, formatter: DateFormatter) -> None:
        if not callable(formatter):
            raise TypeError("date_formatter must be callable")
        with self._lock:
            self._date_formatter = formatter

    # Per-file levels

    @property
    def file_levels(self) -> Dict[str, LogLevel]:
        """Copy of the registered per-file minimum levels."""
        with self._lock:
            return dict(self._file_levels)

    def register_file(self, level: LogLevel, file_path: Optional[str] = None) -> None:
        """
        Register a minimum log level for a file.

        The file level replaces the logger's min_level for every call made
        from that file. Registering the same file again overwrites it.

        Args:
            level: Minimum level for the file
            file_path: Path of the file (default: the caller's file)
        """
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if file_path is None:
            file_path = find_caller(1)[0]
        with self._lock:
            self._file_levels[bare_file_name(file_path)] = level

    def unregister_file(self, file_path: Optional[str] = None) -> None:
        """Remove the level registered for a file, if any."""
        if file_path is None:
            file_path = find_caller(1)[0]
        with self._lock:
            self._file_levels.pop(bare_file_name(file_path), None)

    def clear_file_levels(self) -> None:
        """Remove every per-file level."""
        with self._lock:
            self._file_levels.clear()

    def is_enabled_for(self, level: LogLevel, file_path: str) -> bool:
        """Check whether a call at level from file_path would be logged."""
        with self._lock:
            return self._is_permitted(level, file_path)

    def _is_permitted(self, level: LogLevel, file_path: str) -> bool:
        """Level gate. Caller must hold lock."""
        if not self._enabled:
            return False
        file_level = self._file_levels.get(bare_file_name(file_path))
        if file_level is not None:
            return level.permits(file_level)
        return level.permits(self._min_level)

    # Logging

    def log(
        self,
        level: LogLevel,
        *parts: Any,
        file_path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        function: Optional[str] = None,
        stacklevel: int = 1,
    ) -> None:
        """
        Log a message.

        Args:
            level: Level of the message
            *parts: Objects joined with the separator to form the message
            file_path: Path of the calling file (default: captured)
            line: Line of the call (default: captured)
            column: Column of the call (default: captured)
            function: Function making the call (default: captured)
            stacklevel: Frames above log() that hold the call expression
        """
        with self._lock:
            if not self._enabled:
                return
        level = LogLevel(level)

        if None in (file_path, line, column, function):
            site = find_caller(stacklevel)
            file_path = site[0] if file_path is None else file_path
            line = site[1] if line is None else line
            column = site[2] if column is None else column
            function = site[3] if function is None else function

        # Gate and enqueue share one critical section so the queue holds
        # calls in the order they passed the gate.
        with self._lock:
            if not self._is_permitted(level, file_path):
                return
            self._metrics["logged"] += 1
            entry = LogEntry(
                level=level,
                message=self._separator.join(str(part) for part in parts),
                file_path=file_path,
                line=line,
                column=column,
                function=function,
            )
            formatter = LogFormatter(self._log_format, self._terminator, self._date_formatter)
            task = partial(self._write_entry, entry, formatter, self._writer)
            if not self._use_current_thread:
                self._enqueue(task)
                return

        task()

    def debug(self, *parts: Any, stacklevel: int = 1, **kwargs) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, *parts, stacklevel=stacklevel + 1, **kwargs)

    def trace(self, *parts: Any, stacklevel: int = 1, **kwargs) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, *parts, stacklevel=stacklevel + 1, **kwargs)

    def info(self, *parts: Any, stacklevel: int = 1, **kwargs) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, *parts, stacklevel=stacklevel + 1, **kwargs)

    def warn(self, *parts: Any, stacklevel: int = 1, **kwargs) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, *parts, stacklevel=stacklevel + 1, **kwargs)

    def error(self, *parts: Any, stacklevel: int = 1, **kwargs) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, *parts, stacklevel=stacklevel + 1, **kwargs)

    def fatal(self, *parts: Any, stacklevel: int = 1, **kwargs) -> None:
        """Log fatal message."""
        self.log(LogLevel.FATAL, *parts, stacklevel=stacklevel + 1, **kwargs)

    # Output

    def _write_entry(self, entry: LogEntry, formatter: LogFormatter, writer: Any) -> None:
        """Render entry and write it. Never raises."""
        try:
            writer.write(formatter.format(entry))
        except Exception as e:
            with self._lock:
                self._metrics["failed"] += 1
                handler = self._error_handler
            if handler is not None:
                handler(e, entry)
            else:
                print(f"Writer error: {e}", file=sys.stderr)
        else:
            with self._lock:
                self._metrics["processed"] += 1

    def _enqueue(self, task: Callable[[], None]) -> None:
        """Queue task for the worker. Caller must hold lock."""
        self._log_queue.put(task)
        if self._worker_thread is None:
            self._start_async_worker()

    def _start_async_worker(self):
        """Start async worker thread. Caller must hold lock."""
        self._worker_thread = threading.Thread(
            target=self._process_queue,
            args=(self._stopping_worker,),
            name=f"{self._name}-worker",
            daemon=True,
        )
        self._worker_thread.start()

        if not self._exit_hook_registered:
            atexit.register(self.shutdown)
            self._exit_hook_registered = True

    def _process_queue(self, previous: Optional[threading.Thread]):
        """Run queued tasks one at a time (worker thread)."""
        # A worker stopped by shutdown() may still be draining; the queue
        # must only ever have one consumer.
        if previous is not None:
            previous.join()

        while True:
            task = self._log_queue.get()
            try:
                if task is _STOP:
                    break
                task()
            except Exception as e:
                # An error handler that raises must not stop the worker
                print(f"Logger worker error: {e}", file=sys.stderr)
            finally:
                # Always mark task as done to prevent queue.join() deadlock
                self._log_queue.task_done()

    def flush(self) -> None:
        """Block until every queued entry has been written."""
        self._log_queue.join()

    def shutdown(self) -> None:
        """Write pending entries and stop the worker thread."""
        with self._lock:
            worker = self._worker_thread
            if worker is None:
                return
            self._log_queue.put(_STOP)
            self._worker_thread = None
            self._stopping_worker = worker

        worker.join(timeout=5.0)

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"Logger(name={self._name!r}, enabled={self.enabled}, "
            f"min_level={self.min_level.name})"
        )
