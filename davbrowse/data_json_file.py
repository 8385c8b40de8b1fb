"""The list of saved servers in ``data.json``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from .json_file import JsonFile
from .server_info import ServerInfo

_SERVERS = "servers"
_DESC = "description"
_ADDR = "address"
_PORT = "port"
_PATH = "path"

_log = logging.getLogger(__name__)


def _field(entry: Any, key: str, kind: type) -> Any:
    if not isinstance(entry, dict) or key not in entry:
        _log.warning("data.json: %s: %s", key, "key not found")
        raise ValueError(f"missing key {key!r}")
    value = entry[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        _log.warning("data.json: %s: %s", key, f"expected {kind.__name__}")
        raise ValueError(f"wrong type for {key!r}")
    return value


def _server_from_json(entry: Any) -> ServerInfo:
    desc = _field(entry, _DESC, str)
    addr = _field(entry, _ADDR, str)
    port = _field(entry, _PORT, int)
    path = _field(entry, _PATH, str)
    return ServerInfo(desc, addr, port, path)


def _server_to_json(info: ServerInfo) -> dict:
    return {_DESC: info.description, _ADDR: info.addr, _PORT: info.port, _PATH: info.path}


class DataJsonFile(JsonFile):
    """Reads and updates the saved server list."""

    def __init__(self, directory: Optional[Union[str, Path]] = None) -> None:
        super().__init__("data.json", directory)

    def read_servers(self) -> list[ServerInfo]:
        """Return the valid servers, repairing the stored list if needed."""
        root = self.root_obj
        entries = root.get(_SERVERS) if isinstance(root, dict) else None
        if not isinstance(entries, list):
            _log.warning("data.json: %s: %s", _SERVERS, "missing or not an array")
            entries = []
            self.set_value(_SERVERS, entries)

        servers: list[ServerInfo] = []
        has_invalid = False
        for entry in entries:
            try:
                servers.append(_server_from_json(entry))
            except ValueError:
                has_invalid = True
        if has_invalid:
            self.set_value(_SERVERS, [_server_to_json(info) for info in servers])
        return servers

    def add(self, server: ServerInfo) -> None:
        entries = self._servers_array()
        entries.append(_server_to_json(server))
        self.set_value(_SERVERS, entries)

    def edit(self, index: int, server: ServerInfo) -> None:
        entries = self._servers_array()
        if not 0 <= index < len(entries):
            raise IndexError(f"server index out of range: {index}")
        entries[index] = _server_to_json(server)
        self.set_value(_SERVERS, entries)

    def remove(self, row: int, count: int) -> None:
        entries = self._servers_array()
        if row < 0 or count < 0 or row + count > len(entries):
            raise IndexError(f"cannot remove {count} servers from row {row}")
        del entries[row : row + count]
        self.set_value(_SERVERS, entries)

    def _servers_array(self) -> list:
        root = self.root_obj
        entries = root.get(_SERVERS) if isinstance(root, dict) else None
        if not isinstance(entries, list):
            raise ValueError("data.json holds no server list")
        return entries