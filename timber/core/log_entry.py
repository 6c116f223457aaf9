"""
Log entry data structure and call-site helpers
"""

import os
import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple

from timber.core.log_level import LogLevel


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Captured when a log call passes the level gate and discarded once it
    has been rendered and written. The timestamp is taken at capture time
    so every read during one render sees the same instant.
    """

    level: LogLevel
    message: str
    file_path: str = ""
    line: int = 0
    column: int = 0
    function: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)


def bare_file_name(file_path: str) -> str:
    """
    Reduce a path to its last segment without extension.

    Used as the key for per-file level overrides.
    """
    return os.path.splitext(os.path.basename(file_path))[0]


def _frame_column(frame) -> int:
    """1-based column of the instruction being executed in frame, or 0."""
    positions = getattr(frame.f_code, "co_positions", None)
    if positions is None:
        return 0
    for index, position in enumerate(positions()):
        if index == frame.f_lasti // 2:
            col_offset = position[2]
            return col_offset + 1 if col_offset is not None else 0
    return 0


def find_caller(stacklevel: int = 1) -> Tuple[str, int, int, str]:
    """
    Find the source location of a caller.

    Args:
        stacklevel: How many frames above the function calling find_caller
                    to look. 1 is that function's own caller.

    Returns:
        (file_path, line, column, function) tuple. Unknown values are
        reported as ("", 0, 0, "") when the stack is shallower than asked.
    """
    frame = sys._getframe(1)
    for _ in range(stacklevel):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return "", 0, 0, ""
    code = frame.f_code
    return code.co_filename, frame.f_lineno, _frame_column(frame), code.co_name
