"""
Core module for timber

This module contains the fundamental classes:
- LogLevel: Log level enumeration
- Attribute variants: placeholders of a log format
- LogFormat: Template and attributes
- LogEntry: Call-site record
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LoggerConfig: Configuration management
"""

from timber.core.log_level import LogLevel
from timber.core.attributes import (
    Attribute,
    Level,
    FileName,
    Line,
    Column,
    Function,
    Message,
    Date,
)
from timber.core.log_format import LogFormat, DEFAULT_LOG_FORMAT
from timber.core.log_entry import LogEntry
from timber.core.logger_config import LoggerConfig
from timber.core.logger import Logger
from timber.core.logger_builder import LoggerBuilder

__all__ = [
    "LogLevel",
    "Attribute",
    "Level",
    "FileName",
    "Line",
    "Column",
    "Function",
    "Message",
    "Date",
    "LogFormat",
    "DEFAULT_LOG_FORMAT",
    "LogEntry",
    "LoggerConfig",
    "Logger",
    "LoggerBuilder",
]
