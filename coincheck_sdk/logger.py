"""Injectable logging for the client and CLI."""

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, TextIO


class LogLevel(str, Enum):
    """Verbosity threshold, lowest first. NONE silences a logger."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    NONE = "none"

    @property
    def severity(self) -> int:
        return list(LogLevel).index(self)

    @classmethod
    def parse(cls, name: str) -> "LogLevel":
        """Case-insensitive lookup; "warning" is accepted for WARN."""
        name = name.strip().lower()
        if name == "warning":
            return cls.WARN
        return cls(name)


class Logger(ABC):
    """
    Sink for the client's request and failure messages.

    Subclasses implement ``log``; the per-level helpers route through it.
    Messages never contain the API secret.
    """

    @abstractmethod
    def log(self, level: LogLevel, message: str, *args: Any) -> None:
        pass

    def debug(self, message: str, *args: Any) -> None:
        self.log(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args: Any) -> None:
        """Request lines such as ``GET https://coincheck.com/api/ticker``."""
        self.log(LogLevel.INFO, message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self.log(LogLevel.WARN, message, *args)

    def error(self, message: str, *args: Any) -> None:
        """Transport, decode and CLI failures."""
        self.log(LogLevel.ERROR, message, *args)


class ConsoleLogger(Logger):
    """
    Logger that writes to a text stream, standard error by default.

    Standard output is left alone so CLI results stay machine-readable.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        prefix: str = "[coincheck]",
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize console logger.

        Args:
            level: Minimum log level to display
            prefix: Prefix for log messages
            stream: Destination stream; resolved to sys.stderr at write time when omitted
        """
        self.level = level
        self.prefix = prefix
        self._stream = stream

    def log(self, level: LogLevel, message: str, *args: Any) -> None:
        if level is LogLevel.NONE or level.severity < self.level.severity:
            return
        stream = self._stream or sys.stderr
        print(f"{self.prefix} {level.value.upper()}: {message}", *args, file=stream)

    def set_level(self, level: LogLevel) -> None:
        """Set log level."""
        self.level = level

    def get_level(self) -> LogLevel:
        """Get current log level."""
        return self.level


class NoopLogger(Logger):
    """Discards everything; the default in tests."""

    def log(self, level: LogLevel, message: str, *args: Any) -> None:
        pass
