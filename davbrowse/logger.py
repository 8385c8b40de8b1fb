"""Application log: an in-memory, level-filtered message store."""

from __future__ import annotations

import logging
import threading
from collections import deque
from enum import Enum
from typing import Callable, NamedTuple, Optional


class MsgType(Enum):
    """Message severity; values are stable and used in configuration files."""

    DEBUG = 0
    WARNING = 1
    CRITICAL = 2
    FATAL = 3
    INFO = 4

    @property
    def rank(self) -> int:
        """Position of the level in severity order."""
        return _RANKS[self]

    @classmethod
    def from_logging_level(cls, levelno: int) -> "MsgType":
        """Map a :mod:`logging` level number to a message type."""
        if levelno >= logging.CRITICAL:
            return cls.FATAL
        if levelno >= logging.ERROR:
            return cls.CRITICAL
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG

    def __lt__(self, other):
        if not isinstance(other, MsgType):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, MsgType):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, MsgType):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, MsgType):
            return NotImplemented
        return self.rank >= other.rank


_RANKS = {
    MsgType.DEBUG: 0,
    MsgType.INFO: 1,
    MsgType.WARNING: 2,
    MsgType.CRITICAL: 3,
    MsgType.FATAL: 4,
}


class LogMessage(NamedTuple):
    level: MsgType
    text: str


NotificationFunc = Callable[[LogMessage], None]


class Logger:
    """Thread-safe store of log messages at or above a maximum level."""

    _instance: Optional["Logger"] = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._filtered = False
        self._max_level = MsgType.DEBUG
        self._lock = threading.Lock()
        self._enable_func = False
        self._log: deque[LogMessage] = deque()
        self._notification_func: Optional[NotificationFunc] = None
        self._handler: Optional[LogHandler] = None

    @classmethod
    def get_instance(cls) -> "Logger":
        """Return the process-wide logger."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def install_handler(self) -> "LogHandler":
        """Route the package's :mod:`logging` records into this logger."""
        target = logging.getLogger("davbrowse")
        if self._handler is None or self._handler not in target.handlers:
            self._handler = LogHandler(self)
            target.addHandler(self._handler)
        target.setLevel(logging.DEBUG)
        return self._handler

    @property
    def max_level(self) -> MsgType:
        return self._max_level

    @max_level.setter
    def max_level(self, level: MsgType) -> None:
        old = self._max_level
        if old == level:
            return
        self._max_level = level
        if self._filtered or old > level:
            return
        with self._lock:
            self._log = deque(msg for msg in self._log if not msg.level < level)
        self._filtered = True

    def get_log(self) -> list[LogMessage]:
        """Return a copy of the log and start sending notifications."""
        with self._lock:
            self._enable_func = self._notification_func is not None
            return list(self._log)

    def append_message(self, level: MsgType, text: str) -> None:
        message = LogMessage(level, text)
        with self._lock:
            if level < self._max_level:
                return
            self._log.append(message)
            if self._enable_func and self._notification_func is not None:
                self._notification_func(message)

    def set_notification_func(self, func: Optional[NotificationFunc]) -> None:
        """Set the callback for new messages; it fires after the next get_log()."""
        with self._lock:
            self._enable_func = False
            self._notification_func = func


class LogHandler(logging.Handler):
    """A :mod:`logging` handler feeding records into a :class:`Logger`."""

    def __init__(self, logger: Optional[Logger] = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            target = self._logger if self._logger is not None else Logger.get_instance()
            level = MsgType.from_logging_level(record.levelno)
            if level >= target.max_level:
                target.append_message(level, self.format(record))
        except Exception:
            self.handleError(record)