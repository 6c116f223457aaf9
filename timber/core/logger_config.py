"""
Logger configuration management
"""

from dataclasses import dataclass, field

from timber.core.log_format import LogFormat
from timber.core.log_level import LogLevel


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Holds the initial settings of a Logger. Every value can still be changed
    on the logger afterwards.
    """

    # Basic settings
    name: str = "timber"
    enabled: bool = True
    min_level: LogLevel = LogLevel.DEBUG

    # Message settings
    separator: str = ", "
    terminator: str = "\n"
    log_format: LogFormat = field(default_factory=LogFormat.default)

    # Perform formatting and writing on the calling thread
    use_current_thread: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.min_level, LogLevel):
            raise TypeError("min_level must be LogLevel enum")
        if not isinstance(self.log_format, LogFormat):
            raise TypeError("log_format must be a LogFormat")
        if not isinstance(self.separator, str):
            raise TypeError("separator must be a string")
        if not isinstance(self.terminator, str):
            raise TypeError("terminator must be a string")
        if not self.name:
            raise ValueError("name cannot be empty")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging and tests."""
        return cls(
            min_level=LogLevel.ALL,
            use_current_thread=True,  # Deterministic output
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            min_level=LogLevel.WARN,
            use_current_thread=False,
        )
