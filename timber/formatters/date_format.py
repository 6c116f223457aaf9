"""
Date pattern rendering

Renders LDML-style date patterns ("HH:mm:ss", "yyyy-MM-dd") from datetime
fields and strftime. A pattern is read as runs of one letter; the letter
picks the field and the run length picks the width or style:

    y       year; "yy" is the two-digit year, other lengths zero-pad
    M       month; 1-2 numeric, 3 abbreviated name, 4+ full name
    d       day of month
    E       weekday; 1-3 abbreviated name, 4+ full name
    H       hour 0-23
    h       hour 1-12
    m       minute
    s       second
    S       fraction of a second, truncated to the run length
    a       AM/PM marker
    Z       zone offset; 1-3 "+0200", 4 "GMT+02:00", 5 "+02:00"
    z       zone name

Numeric fields are zero-padded to the run length. Other letters and
characters are copied through, text between single quotes is copied
literally, and '' yields a single quote. Zone letters on a naive datetime
use the local zone.

Any callable taking (pattern, timestamp) and returning a string can replace
format_date on a logger.
"""

import re
from datetime import datetime, timedelta
from typing import Callable

DateFormatter = Callable[[str, datetime], str]

_TOKEN_RE = re.compile(r"'(?:[^']|'')*'|y+|M+|d+|E+|H+|h+|m+|s+|S+|a+|Z+|z+")


def _zone_offset(timestamp: datetime, colon: bool) -> str:
    offset = timestamp.utcoffset()
    if offset is None:
        offset = timestamp.astimezone().utcoffset()
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(offset) // timedelta(minutes=1)
    hours, minutes = divmod(minutes, 60)
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _render_token(token: str, timestamp: datetime) -> str:
    letter, width = token[0], len(token)

    if letter == "y":
        if width == 2:
            return f"{timestamp.year % 100:02d}"
        return f"{timestamp.year:0{width}d}"
    if letter == "M":
        if width == 3:
            return timestamp.strftime("%b")
        if width >= 4:
            return timestamp.strftime("%B")
        return f"{timestamp.month:0{width}d}"
    if letter == "E":
        return timestamp.strftime("%A" if width >= 4 else "%a")
    if letter == "S":
        digits = f"{timestamp.microsecond:06d}"
        return digits[:width].ljust(width, "0")
    if letter == "a":
        return timestamp.strftime("%p")
    if letter == "Z":
        if width == 4:
            return "GMT" + _zone_offset(timestamp, colon=True)
        return _zone_offset(timestamp, colon=width == 5)
    if letter == "z":
        if timestamp.tzinfo is None:
            timestamp = timestamp.astimezone()
        return timestamp.strftime("%Z")

    value = {
        "d": timestamp.day,
        "H": timestamp.hour,
        "h": (timestamp.hour % 12) or 12,
        "m": timestamp.minute,
        "s": timestamp.second,
    }[letter]
    return f"{value:0{width}d}"


def format_date(pattern: str, timestamp: datetime) -> str:
    """
    Format timestamp according to an LDML-style pattern.

    Args:
        pattern: Date pattern, e.g. "HH:mm:ss" or "yyyy-MM-dd'T'HH:mm"
        timestamp: Moment to render

    Returns:
        Formatted date string.

    Example:
        format_date("HH:mm:ss", datetime(2016, 6, 9, 16, 12, 24))
        # '16:12:24'
    """

    def _render(match: "re.Match") -> str:
        token = match.group(0)
        if token.startswith("'"):
            if token == "''":
                return "'"
            return token[1:-1].replace("''", "'")
        return _render_token(token, timestamp)

    return _TOKEN_RE.sub(_render, pattern)
