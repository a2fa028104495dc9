from enum import IntEnum, auto
from sys import exc_info
from traceback import format_exc
from typing import Union


class LogLevel(IntEnum):
    NONE = auto()
    INFO = auto()
    DEBUG = auto()
    VERBOSE = auto()

    @classmethod
    def parse(cls, level: Union[str, "LogLevel"]) -> "LogLevel":
        """Return the LogLevel matching an enum member or its (case-insensitive) name."""
        return cls[level.upper()] if isinstance(level, str) else cls(level)


class Logger:
    """Logger is a class for logging messages to the console host with consistent formatting."""

    def __init__(self, level: Union[str, LogLevel] = LogLevel.NONE):
        self.level = LogLevel.parse(level)

    def enabled(self, level: LogLevel) -> bool:
        return self.level >= level

    def normal(self, *message):
        print(*message)

    def error(self, *message):
        print('[ERROR]', *message)
        # Only dump a traceback while an exception is actually being handled.
        if exc_info()[0] is not None:
            print(format_exc())

    def info(self, *message):
        if self.enabled(LogLevel.INFO):
            print('[INFO]', *message)

    def debug(self, *message):
        if self.enabled(LogLevel.DEBUG):
            print('[DEBUG]', *message)

    def verbose(self, *message):
        if self.enabled(LogLevel.VERBOSE):
            print('[VERBOSE]', *message)
