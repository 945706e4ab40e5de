"""Small coloured console logger with positional ``{n}`` placeholders."""

from __future__ import annotations

import sys
from datetime import datetime
from enum import Enum
from typing import Callable, TextIO

__all__ = ["Level", "Logger", "format_message"]

_RESET = "\033[0m"


class Level(Enum):
    TRACE = "\033[0m"
    DEBUG = "\033[0;34m"
    INFO = "\033[0;32m"
    WARN = "\033[0;33m"
    ERROR = "\033[0;31m"
    CRITICAL = "\033[0;41m"

    @property
    def color(self) -> str:
        return self.value


def _to_text(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def format_message(message: str, *args: object) -> str:
    """Replace every ``{i}`` in ``message`` with the i-th argument, in order."""
    result = message
    for index, arg in enumerate(args):
        result = result.replace(f"{{{index}}}", _to_text(arg))
    return result


class Logger:
    """Writes timestamped, coloured lines to a text stream."""

    def __init__(
        self,
        name: str = "FZLogger",
        level: Level = Level.TRACE,
        stream: TextIO | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.name = name
        self.level = level
        self._stream = stream
        self._clock = clock

    def set_name(self, name: str) -> None:
        self.name = name

    def set_level(self, level: Level) -> None:
        self.level = level

    def trace(self, message: str, *args: object) -> None:
        self._emit(Level.TRACE, message, args)

    def debug(self, message: str, *args: object) -> None:
        self._emit(Level.DEBUG, message, args)

    def info(self, message: str, *args: object) -> None:
        self._emit(Level.INFO, message, args)

    def warn(self, message: str, *args: object) -> None:
        self._emit(Level.WARN, message, args)

    def error(self, message: str, *args: object) -> None:
        self._emit(Level.ERROR, message, args)

    def critical(self, message: str, *args: object) -> None:
        self._emit(Level.CRITICAL, message, args)

    def log(self, message: str, *args: object) -> None:
        """Log at the logger's own level."""
        self._emit(self.level, message, args)

    def file_does_not_exist(self, file_path: str, message: str, *args: object) -> bool:
        """Return True, logging an error, when ``file_path`` cannot be opened."""
        try:
            with open(file_path, "rb"):
                return False
        except OSError:
            self.error(message, *args)
            return True

    def _emit(self, level: Level, message: str, args: tuple[object, ...]) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        now = self._clock()
        text = format_message(message, *args)
        stream.write(f"{level.color}[{now:%H:%M:%S}] {self.name}: {text}{_RESET}\n")
        stream.flush()