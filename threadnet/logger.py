"""Small levelled logger with pluggable console and file sinks."""

from __future__ import annotations

import os
import sys
import threading
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from pathlib import Path
from typing import Any, TextIO

DEFAULT_LOG_DIR = "./log/"
DEFAULT_LOG_FILENAME = "log.log"


class LogLevel(IntEnum):
    """Severity of a log record."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4


def get_timestamp() -> str:
    """Return the current local time as ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


def level_to_string(level: Any) -> str:
    """Return the name of a level, or ``UNKNOWN`` for anything else."""
    try:
        return LogLevel(level).name
    except (ValueError, TypeError):
        return "UNKNOWN"


def _format_value(info: Any) -> str:
    if isinstance(info, float):
        # Matches the default general formatting of a C-style stream.
        return format(info, "g")
    return str(info)


class LogStrategy(ABC):
    """Where finished log lines are written."""

    @abstractmethod
    def sync_log(self, message: str) -> None:
        """Write one complete log line."""


class ConsoleLogStrategy(LogStrategy):
    """Writes each log line to a text stream, standard output by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def sync_log(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        with self._lock:
            stream.write(message + "\n")
            stream.flush()


class FileLogStrategy(LogStrategy):
    """Appends each log line to a file, creating its directory if needed."""

    def __init__(
        self,
        directory: str | os.PathLike[str] = DEFAULT_LOG_DIR,
        filename: str = DEFAULT_LOG_FILENAME,
    ) -> None:
        self.directory = Path(directory)
        self.filename = filename
        self._lock = threading.Lock()
        with self._lock:
            if not self.directory.exists():
                try:
                    self.directory.mkdir(parents=True, exist_ok=True)
                except OSError as exc:
                    print(exc, file=sys.stderr)

    @property
    def path(self) -> Path:
        """Full path of the log file."""
        return self.directory / self.filename

    def sync_log(self, message: str) -> None:
        with self._lock:
            try:
                with self.path.open("a", encoding="utf-8") as out:
                    out.write(message + "\n")
            except OSError:
                return


class LogMessage:
    """One log record under construction; written out when flushed."""

    def __init__(self, level: LogLevel, filename: str, line: int, logger: Logger) -> None:
        self.level = level
        self.timestamp = get_timestamp()
        self.pid = os.getpid()
        self.filename = filename
        self.line = line
        self._logger = logger
        self._flushed = False
        self._parts = [
            f"[{self.timestamp}] [{level_to_string(level)}] [{self.pid}] "
            f"[{filename}] [{line}] - "
        ]

    @property
    def text(self) -> str:
        """The record as it would be written."""
        return "".join(self._parts)

    def append(self, info: Any) -> LogMessage:
        """Add a value to the record's text and return the record."""
        self._parts.append(_format_value(info))
        return self

    def __lshift__(self, info: Any) -> LogMessage:
        return self.append(info)

    def flush(self) -> None:
        """Hand the record to the logger's strategy; only the first call writes."""
        if self._flushed:
            return
        self._flushed = True
        strategy = self._logger.strategy
        if strategy is not None:
            strategy.sync_log(self.text)

    def __enter__(self) -> LogMessage:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()


def _caller_location(depth: int) -> tuple[str, int]:
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return "<unknown>", 0
    return os.path.basename(frame.f_code.co_filename), frame.f_lineno


class Logger:
    """Builds log records and sends them through the current strategy."""

    def __init__(self) -> None:
        self.strategy: LogStrategy | None = None
        self.use_console_strategy()

    def use_console_strategy(self, stream: TextIO | None = None) -> None:
        """Send records to a text stream (standard output by default)."""
        self.strategy = ConsoleLogStrategy(stream)

    def use_file_strategy(
        self,
        directory: str | os.PathLike[str] = DEFAULT_LOG_DIR,
        filename: str = DEFAULT_LOG_FILENAME,
    ) -> None:
        """Append records to ``directory/filename``."""
        self.strategy = FileLogStrategy(directory, filename)

    def message(
        self, level: LogLevel, filename: str | None = None, line: int | None = None
    ) -> LogMessage:
        """Start a record; the caller's file and line are used when not given."""
        if filename is None or line is None:
            caller_file, caller_line = _caller_location(1)
            filename = caller_file if filename is None else filename
            line = caller_line if line is None else line
        return LogMessage(level, filename, line, self)

    def log(self, level: LogLevel, *args: Any) -> None:
        """Write one record made of ``args`` at the caller's location."""
        filename, line = _caller_location(1)
        self._emit(level, args, filename, line)

    def _emit(self, level: LogLevel, args: tuple[Any, ...], filename: str, line: int) -> None:
        with LogMessage(level, filename, line, self) as record:
            for info in args:
                record.append(info)


logger = Logger()


def log(level: LogLevel, *args: Any) -> None:
    """Write one record through the shared logger at the caller's location."""
    filename, line = _caller_location(1)
    logger._emit(level, args, filename, line)


def main(argv: list[str] | None = None) -> int:
    """Log a line at every level to the console, then to ``./log/log.log``."""
    logger.use_console_strategy()
    for level in LogLevel:
        log(level, "CONSOLE hello world", " hello bit, ", 3.14, " C")

    logger.use_file_strategy()
    for level in LogLevel:
        log(level, "FILE hello world", " hello bit, ", 3.14, " C")
    return 0


if __name__ == "__main__":
    sys.exit(main())