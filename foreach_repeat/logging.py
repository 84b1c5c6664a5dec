"""Logging for foreach_repeat.
The loop driver is the only producer: one TRACE entry per callback
invocation (category ``"loop"``) and a DEBUG summary when the loop halts.
Both are skipped entirely unless the global logger is enabled for them.
"""

from __future__ import annotations

import sys
import time
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any, TextIO

DEFAULT_MAX_ENTRIES = 1000

_RESET = "\033[0m"
_LEVEL_STYLE = {
    0: ("", ""),
    1: ("•", "\033[37m"),
    2: ("→", "\033[34m"),
    3: ("⚙", "\033[35m"),
    4: ("⋯", "\033[90m"),
}
_WARNING_MARK = ("⚠", "\033[33m")
_ERROR_MARK = ("✗", "\033[31m")
_CATEGORY_COLOR = "\033[36m"
_TIME_COLOR = "\033[90m"


class LogLevel(IntEnum):
    """Log levels for foreach_repeat."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3
    TRACE = 4

    @classmethod
    def from_name(cls, name: str) -> LogLevel:
        """Parse a level name such as ``"debug"`` (case-insensitive)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(level.name.lower() for level in cls)
            raise ValueError(f"unknown log level {name!r} (expected one of: {valid})") from None


def supports_color(stream: TextIO) -> bool:
    """Check if the stream is a terminal that understands ANSI colors."""
    if not getattr(stream, "isatty", None) or not stream.isatty():
        return False
    if sys.platform == "win32":
        import os

        return bool(os.environ.get("TERM") or "ANSICON" in os.environ)
    return True


def _paint(text: str, code: str, color: bool) -> str:
    if not color or not code:
        return text
    return f"{code}{text}{_RESET}"


@dataclass
class LogEntry:
    """A log entry with metadata."""

    level: LogLevel
    message: str
    category: str = "general"
    timestamp: float = field(default_factory=time.time)
    context: dict[str, Any] = field(default_factory=dict)

    def format(self, color: bool = True, show_time: bool = True) -> str:
        """Render as ``[time] [mark] [category] message``."""
        parts = []
        if show_time:
            stamp = time.strftime("%H:%M:%S", time.localtime(self.timestamp))
            parts.append(_paint(stamp, _TIME_COLOR, color))
        mark, code = self.context.get("mark") or _LEVEL_STYLE[int(self.level)]
        if mark:
            parts.append(_paint(mark, code, color))
        if self.category != "general":
            parts.append(_paint(f"[{self.category}]", _CATEGORY_COLOR, color))
        parts.append(self.message)
        return " ".join(parts)


class ForEachRepeatLogger:
    """Main logger for foreach_repeat.
    Entries above the active level are dropped before formatting. Those kept
    are written to the stream (and the log file, if any) and retained in a
    ring buffer of ``max_entries``, so a loop traced over an unbounded source
    holds at most that many entries in memory.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.NORMAL,
        color: bool = True,
        stream: TextIO | None = None,
        file_path: Path | None = None,
        show_time: bool = True,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ):
        if max_entries < 0:
            raise ValueError(f"max_entries must be >= 0, got {max_entries}")
        self.level = level
        self.show_time = show_time
        self._stream = stream or sys.stderr
        self._color = color and supports_color(self._stream)
        self._file_handle: TextIO | None = None
        self._entries: deque[LogEntry] = deque(maxlen=max_entries)
        if file_path is not None:
            self.open_file(file_path)

    @property
    def max_entries(self) -> int:
        return self._entries.maxlen

    def set_level(self, level: LogLevel) -> None:
        self.level = level

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if a message at this level would be logged."""
        return level <= self.level

    def log(
        self,
        level: LogLevel,
        message: str,
        category: str = "general",
        **context: Any,
    ) -> None:
        """Log a message at the specified level."""
        if not self.is_enabled_for(level):
            return
        entry = LogEntry(level=level, message=message, category=category, context=context)
        self._entries.append(entry)
        self._stream.write(entry.format(color=self._color, show_time=self.show_time) + "\n")
        self._stream.flush()
        if self._file_handle:
            self._file_handle.write(entry.format(color=False) + "\n")
            self._file_handle.flush()

    def info(self, message: str, **context: Any) -> None:
        self.log(LogLevel.NORMAL, message, **context)

    def debug(self, message: str, **context: Any) -> None:
        self.log(LogLevel.DEBUG, message, **context)

    def trace(self, message: str, **context: Any) -> None:
        self.log(LogLevel.TRACE, message, **context)

    def warning(self, message: str, category: str = "general") -> None:
        """Log a warning (shown unless QUIET)."""
        self.log(LogLevel.NORMAL, message, category=category, mark=_WARNING_MARK)

    def error(self, message: str, category: str = "general") -> None:
        """Log an error (always shown)."""
        self.log(LogLevel.QUIET, message, category=category, mark=_ERROR_MARK)

    def get_entries(
        self,
        level: LogLevel | None = None,
        category: str | None = None,
    ) -> list[LogEntry]:
        """Get retained entries, oldest first, optionally filtered."""
        return [
            e
            for e in self._entries
            if (level is None or e.level == level) and (category is None or e.category == category)
        ]

    def clear(self) -> None:
        self._entries.clear()

    def open_file(self, path: Path) -> None:
        """Mirror entries (uncolored) to ``path``, truncating it."""
        self.close()
        self._file_handle = open(Path(path), "w", encoding="utf-8")

    def close(self) -> None:
        if self._file_handle:
            self._file_handle.close()
            self._file_handle = None


_logger: ForEachRepeatLogger | None = None


def get_logger() -> ForEachRepeatLogger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = ForEachRepeatLogger()
    return _logger


def set_logger(logger: ForEachRepeatLogger) -> None:
    """Set the global logger instance."""
    global _logger
    _logger = logger


def configure_logging(
    level: LogLevel = LogLevel.NORMAL,
    color: bool = True,
    file_path: Path | None = None,
    stream: TextIO | None = None,
    show_time: bool = True,
    max_entries: int = DEFAULT_MAX_ENTRIES,
) -> ForEachRepeatLogger:
    """Replace the global logger, closing the previous one's log file."""
    global _logger
    if _logger is not None:
        _logger.close()
    _logger = ForEachRepeatLogger(
        level=level,
        color=color,
        stream=stream,
        file_path=file_path,
        show_time=show_time,
        max_entries=max_entries,
    )
    return _logger


__all__ = [
    "DEFAULT_MAX_ENTRIES",
    "LogLevel",
    "LogEntry",
    "ForEachRepeatLogger",
    "get_logger",
    "set_logger",
    "configure_logging",
    "supports_color",
]
