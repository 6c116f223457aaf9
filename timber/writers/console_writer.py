"""Console writer"""

import sys


class ConsoleWriter:
    """Write rendered log lines to the console."""

    def __init__(self, stream=None):
        """
        Initialize console writer.

        Args:
            stream: Output text stream (default: sys.stdout, looked up on
                    every write so redirection is honoured)
        """
        self._stream = stream

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdout

    def write(self, message: str) -> None:
        """Write message as-is; separator and terminator are already in it."""
        self.stream.write(message)

    def __repr__(self) -> str:
        """String representation."""
        return f"ConsoleWriter(stream={self._stream!r})"
