"""
Shared logger registry

One default Logger reachable without plumbing, plus module-level functions
that delegate to it. The default is created lazily and can be swapped
wholesale, e.g. for a test double:

    with use_logger(StubLogger()):
        timber.info("captured")
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional
import threading

from timber.core.log_entry import find_caller
from timber.core.log_format import LogFormat
from timber.core.log_level import LogLevel
from timber.core.logger import Logger

_shared: Optional[Logger] = None
_init_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the shared logger, creating it on first use."""
    global _shared
    logger = _shared
    if logger is None:
        with _init_lock:
            if _shared is None:
                _shared = Logger()
            logger = _shared
    return logger


def set_logger(logger: Logger) -> None:
    """
    Replace the shared logger.

    Takes effect for the next module-level call. Calls already running on
    the previous logger are not waited for.
    """
    global _shared
    if not isinstance(logger, Logger):
        raise TypeError("logger must be a Logger")
    _shared = logger


def reset_logger() -> None:
    """Drop the shared logger; the next call creates a fresh default."""
    global _shared
    _shared = None


@contextmanager
def use_logger(logger: Logger) -> Iterator[Logger]:
    """Temporarily replace the shared logger."""
    global _shared
    previous = _shared
    set_logger(logger)
    try:
        yield logger
    finally:
        _shared = previous


def set_format(log_format: Optional[LogFormat] = None) -> None:
    """Set the format of the shared logger (default: LogFormat.default())."""
    get_logger().log_format = log_format if log_format is not None else LogFormat.default()


def set_enabled(enabled: bool) -> None:
    get_logger().enabled = enabled


def set_min_level(min_level: LogLevel) -> None:
    get_logger().min_level = min_level


def set_terminator(terminator: str) -> None:
    get_logger().terminator = terminator


def set_separator(separator: str) -> None:
    get_logger().separator = separator


def register_file(level: LogLevel, file_path: Optional[str] = None) -> None:
    """Register a minimum level for a file (default: the caller's file)."""
    if file_path is None:
        file_path = find_caller(1)[0]
    get_logger().register_file(level, file_path)


# Each delegate calls log() directly so a double that overrides only log()
# sees every call; stacklevel + 1 points past this module to the caller.

def debug(*parts: Any, stacklevel: int = 1, **kwargs) -> None:
    get_logger().log(LogLevel.DEBUG, *parts, stacklevel=stacklevel + 1, **kwargs)


def trace(*parts: Any, stacklevel: int = 1, **kwargs) -> None:
    get_logger().log(LogLevel.TRACE, *parts, stacklevel=stacklevel + 1, **kwargs)


def info(*parts: Any, stacklevel: int = 1, **kwargs) -> None:
    get_logger().log(LogLevel.INFO, *parts, stacklevel=stacklevel + 1, **kwargs)


def warn(*parts: Any, stacklevel: int = 1, **kwargs) -> None:
    get_logger().log(LogLevel.WARN, *parts, stacklevel=stacklevel + 1, **kwargs)


def error(*parts: Any, stacklevel: int = 1, **kwargs) -> None:
    get_logger().log(LogLevel.ERROR, *parts, stacklevel=stacklevel + 1, **kwargs)


def fatal(*parts: Any, stacklevel: int = 1, **kwargs) -> None:
    get_logger().log(LogLevel.FATAL, *parts, stacklevel=stacklevel + 1, **kwargs)
