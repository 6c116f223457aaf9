"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Timber - A small configurable logging library
Level-gated, template-formatted logging with per-file level overrides
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from timber.core.log_level import LogLevel
from timber.core.log_format import LogFormat
from timber.core.log_entry import LogEntry
from timber.core.logger import Logger
from timber.core.logger_builder import LoggerBuilder
from timber.core.logger_config import LoggerConfig
from timber.core import attributes
from timber.core.shared import (
    get_logger,
    set_logger,
    reset_logger,
    use_logger,
    set_format,
    set_enabled,
    set_min_level,
    set_terminator,
    set_separator,
    register_file,
    debug,
    trace,
    info,
    warn,
    error,
    fatal,
)

# Import submodules (not all classes by default)
from timber import formatters
from timber import writers

__all__ = [
    "LogLevel",
    "LogFormat",
    "LogEntry",
    "Logger",
    "LoggerBuilder",
    "LoggerConfig",
    "attributes",
    "formatters",
    "writers",
    "get_logger",
    "set_logger",
    "reset_logger",
    "use_logger",
    "set_format",
    "set_enabled",
    "set_min_level",
    "set_terminator",
    "set_separator",
    "register_file",
    "debug",
    "trace",
    "info",
    "warn",
    "error",
    "fatal",
]
