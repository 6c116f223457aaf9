"""Byte sink writer"""

import os
from typing import Any


class SinkWriter:
    """
    Write rendered log lines to a byte sink.

    The sink is anything with a ``write(bytes)`` method (a pipe, a file
    opened in binary mode, io.BytesIO) or an integer file descriptor.
    Writes are raw: no flushing, buffering or retry.

    Example:
        read_fd, write_fd = os.pipe()
        writer = SinkWriter(write_fd)
        writer.write("hello\\n")
    """

    def __init__(self, sink: Any, encoding: str = "utf-8"):
        """
        Initialize sink writer.

        Args:
            sink: Binary stream or file descriptor
            encoding: Text encoding of rendered lines (default: 'utf-8')
        """
        if not isinstance(sink, int) and not callable(getattr(sink, "write", None)):
            raise TypeError("sink must be a file descriptor or have a write(bytes) method")
        self.sink = sink
        self.encoding = encoding

    def write(self, message: str) -> None:
        """Encode message and write it to the sink."""
        data = message.encode(self.encoding)
        if isinstance(self.sink, int):
            # os.write may accept only part of the buffer on pipes
            while data:
                written = os.write(self.sink, data)
                data = data[written:]
        else:
            self.sink.write(data)

    def __repr__(self) -> str:
        """String representation."""
        return f"SinkWriter(sink={self.sink!r})"
