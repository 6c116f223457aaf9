"""
Log formatters module

Renders log entries according to a LogFormat.
"""

from timber.formatters.date_format import format_date
from timber.formatters.log_formatter import LogFormatter

__all__ = [
    "format_date",
    "LogFormatter",
]
