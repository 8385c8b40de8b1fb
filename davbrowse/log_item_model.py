"""A list model over the application log."""

from __future__ import annotations

import logging
import threading
from enum import IntEnum
from typing import Any, NamedTuple

from .logger import LogMessage, Logger, MsgType

_log = logging.getLogger(__name__)

_USER_ROLE = 0x0100

_BASE_ROLE_NAMES = {
    0: "display",
    1: "decoration",
    2: "edit",
    3: "toolTip",
    4: "statusTip",
    5: "whatsThis",
}

_DEFAULT_COLOR = "#000000"

_COLOR_BY_LEVEL = {
    MsgType.DEBUG: "#8a8a89",
    MsgType.WARNING: "#b1b12b",
    MsgType.CRITICAL: "#bc1c28",
    MsgType.FATAL: "#bc1c28",
}

_INDENT = "\n    "


class LogRole(IntEnum):
    COLOUR = _USER_ROLE
    TEXT = _USER_ROLE + 1
    ENUM_SIZE = _USER_ROLE + 2


class LogEntry(NamedTuple):
    colour: str
    text: str


def color_for_level(level: MsgType) -> str:
    """Return the display colour of a message level as ``#rrggbb``."""
    return _COLOR_BY_LEVEL.get(level, _DEFAULT_COLOR)


def _indent(text: str) -> str:
    return text.replace("\n", _INDENT)


class LogItemModel:
    """Rows are log messages; new messages appear after :meth:`update`.

    Messages arriving from other threads are buffered until the next call
    to :meth:`update`, which the user interface runs periodically.
    """

    def __init__(self, logger: Logger) -> None:
        _log.debug("The log item model is being created")
        self._logger = logger
        self._lock = threading.Lock()
        self._needs_update = False
        self._pending: list[LogEntry] = []
        self._logger.set_notification_func(self._on_message)
        self._entries: list[LogEntry] = [
            LogEntry(color_for_level(msg.level), _indent(msg.text)) for msg in self._logger.get_log()
        ]

    def __enter__(self) -> "LogItemModel":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _on_message(self, message: LogMessage) -> None:
        with self._lock:
            self._pending.append(LogEntry(color_for_level(message.level), message.text))
            self._needs_update = True

    def row_count(self) -> int:
        return len(self._entries)

    def data(self, row: int, role: int) -> Any:
        """Return the colour or text of the message at ``row``, or None."""
        if role < LogRole.COLOUR or role >= LogRole.ENUM_SIZE:
            return None
        entry = self._entries[row]
        if role == LogRole.COLOUR:
            return entry.colour
        return entry.text

    def role_names(self) -> dict[int, str]:
        names = dict(_BASE_ROLE_NAMES)
        names[LogRole.COLOUR] = "colour"
        names[LogRole.TEXT] = "text"
        return names

    def text_at(self, index: int) -> str:
        """Return the text of one message, as it would be copied."""
        return self._entries[index].text

    def all_text(self) -> str:
        """Return every message, one per line, as it would be copied."""
        return "\n".join(entry.text for entry in self._entries)

    def update(self) -> int:
        """Move buffered messages into the model; return how many were added."""
        with self._lock:
            if not self._needs_update:
                return 0
            added = [LogEntry(entry.colour, _indent(entry.text)) for entry in self._pending]
            self._pending.clear()
            self._needs_update = False
        self._entries.extend(added)
        return len(added)

    def close(self) -> None:
        """Stop receiving messages from the logger."""
        _log.debug("The log item model is being destroyed")
        self._logger.set_notification_func(None)