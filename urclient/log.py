"""Pluggable, level-filtered logging for client messages."""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from enum import IntEnum

__all__ = [
    "LogLevel",
    "LogHandler",
    "DefaultLogHandler",
    "register_log_handler",
    "unregister_log_handler",
    "set_log_level",
    "get_log_level",
    "log",
]


class LogLevel(IntEnum):
    """Severity of a log message, ordered from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    NONE = 5


class LogHandler(ABC):
    """Base class for objects that receive log messages."""

    @abstractmethod
    def log(self, file: str, line: int, loglevel: LogLevel, message: str) -> None:
        """Handle one message coming from ``file`` at ``line``."""


class DefaultLogHandler(LogHandler):
    """Handler used when no other handler is registered; writes to stderr."""

    def log(self, file: str, line: int, loglevel: LogLevel, message: str) -> None:
        sys.stderr.write(f"{LogLevel(loglevel).name} {file} {line}: {message}\n")
        sys.stderr.flush()


class _LogState:
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.handler: LogHandler = DefaultLogHandler()
        self.level = LogLevel.WARN


_state = _LogState()


def register_log_handler(handler: LogHandler | None) -> None:
    """Route all further messages to ``handler``; ``None`` restores the default."""
    if handler is None:
        unregister_log_handler()
        return
    if not isinstance(handler, LogHandler):
        raise TypeError("handler must be a LogHandler instance")
    with _state.lock:
        _state.handler = handler


def unregister_log_handler() -> None:
    """Drop the registered handler and fall back to the default one."""
    with _state.lock:
        _state.handler = DefaultLogHandler()


def set_log_level(level: LogLevel | int) -> None:
    """Suppress every message whose level is lower than ``level``."""
    new_level = LogLevel(level)
    with _state.lock:
        _state.level = new_level


def get_log_level() -> LogLevel:
    """Return the current threshold level."""
    with _state.lock:
        return _state.level


def log(file: str, line: int, level: LogLevel | int, fmt: str, *args: object) -> None:
    """Format ``fmt`` printf-style with ``args`` and pass it to the handler."""
    level = LogLevel(level)
    with _state.lock:
        threshold = _state.level
        handler = _state.handler
    if level < threshold:
        return
    message = fmt % args if args else fmt
    handler.log(file, line, level, message)