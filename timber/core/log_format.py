"""
Log format: a template paired with an ordered sequence of attributes
"""

from typing import Optional, Sequence, Tuple

from timber.core.attributes import Attribute, Date, FileName, Level, Line, Message


class LogFormat:
    """
    Specifies the format to be used in the log message.

    The template uses ``%s`` placeholders which are filled, in order, with
    the rendered attributes. When attributes are absent or empty only the
    raw message is emitted and the template is ignored.

    Keeping the placeholder count in line with the attribute count is the
    caller's responsibility; it is not validated here.

    Example:
        fmt = LogFormat("%s: %s", [Level(), Message()])
    """

    __slots__ = ("_template", "_attributes")

    def __init__(self, template: str, attributes: Optional[Sequence[Attribute]] = None):
        """
        Initialize log format.

        Args:
            template: Template string with positional placeholders
            attributes: Attributes substituted into the template, in order
        """
        if not isinstance(template, str):
            raise TypeError("template must be a string")
        self._template = template
        self._attributes: Optional[Tuple[Attribute, ...]] = (
            tuple(attributes) if attributes is not None else None
        )

    @property
    def template(self) -> str:
        return self._template

    @property
    def attributes(self) -> Optional[Tuple[Attribute, ...]]:
        return self._attributes

    @property
    def is_raw(self) -> bool:
        """True when formatting degrades to the raw message."""
        return not self._attributes

    @classmethod
    def default(cls) -> "LogFormat":
        """
        The default log format.

        Logs appear as ``[FATAL 16:12:24 views.py:21] some message``.
        """
        return DEFAULT_LOG_FORMAT

    def __eq__(self, other: object) -> bool:
        # Formats without attributes never compare equal, not even to
        # themselves.
        if not isinstance(other, LogFormat):
            return NotImplemented
        if self._template != other._template:
            return False
        if self._attributes is None or other._attributes is None:
            return False
        return self._attributes == other._attributes

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((self._template, self._attributes))

    def __repr__(self) -> str:
        """String representation."""
        return f"LogFormat(template={self._template!r}, attributes={self._attributes!r})"


DEFAULT_LOG_FORMAT = LogFormat(
    "[%s %s %s:%s] %s",
    [
        Level(),
        Date("HH:mm:ss"),
        FileName(full_path=False, include_extension=True),
        Line(),
        Message(),
    ],
)
