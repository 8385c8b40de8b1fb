"""File system entries reported by a WebDAV server."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Status(Enum):
    NONE = "none"
    UNKNOWN = "unknown"
    OK = "ok"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"


class ObjectType(Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class FileSystemObject:
    """A directory or file; absent properties are ``None``."""

    name: str
    type: ObjectType
    creation_time: Optional[datetime] = None
    modification_time: Optional[datetime] = None
    size: Optional[int] = None

    @property
    def is_creation_time_valid(self) -> bool:
        return self.creation_time is not None

    @property
    def is_modification_time_valid(self) -> bool:
        return self.modification_time is not None

    @property
    def is_size_valid(self) -> bool:
        return self.size is not None


_STATUS_CODES = (
    ("200", Status.OK),
    ("401", Status.UNAUTHORIZED),
    ("403", Status.FORBIDDEN),
    ("404", Status.NOT_FOUND),
)


def extract_name(abs_path: str) -> str:
    """Return the last segment of an absolute path, ignoring a trailing slash."""
    if not abs_path:
        return ""
    if abs_path == "/":
        return abs_path
    end = len(abs_path) - 1 if abs_path.endswith("/") else len(abs_path)
    pos = abs_path.rfind("/", 0, end)
    if pos == -1:
        raise ValueError(f"not an absolute path: {abs_path!r}")
    return abs_path[pos + 1 : end]


def to_status(text: str) -> Status:
    """Map an HTTP status line to a property status."""
    for code, status in _STATUS_CODES:
        if code in text:
            return status
    return Status.NONE


def _resolve(current: Status, replacement: Status) -> Status:
    return replacement if current is Status.UNKNOWN else current


@dataclass
class FSObjectStruct:
    """Properties of an entry collected while a reply is being read."""

    is_curr_dir_obj: bool = False
    name: str = ""
    type: tuple[Status, ObjectType] = (Status.NONE, ObjectType.FILE)
    creation_date: tuple[Status, Optional[datetime]] = (Status.NONE, None)
    last_modified: tuple[Status, Optional[datetime]] = (Status.NONE, None)
    content_length: tuple[Status, int] = (Status.NONE, 0)

    def replace_unknown_status(self, status: Status) -> None:
        """Give every property still marked unknown the given status."""
        self.type = (_resolve(self.type[0], status), self.type[1])
        self.creation_date = (_resolve(self.creation_date[0], status), self.creation_date[1])
        self.last_modified = (_resolve(self.last_modified[0], status), self.last_modified[1])
        self.content_length = (_resolve(self.content_length[0], status), self.content_length[1])

    def to_object(self) -> FileSystemObject:
        """Build the entry, keeping only properties with an OK status."""
        def valid(pair):
            return pair[1] if pair[0] is Status.OK else None

        return FileSystemObject(
            name=self.name,
            type=self.type[1],
            creation_time=valid(self.creation_date),
            modification_time=valid(self.last_modified),
            size=valid(self.content_length),
        )