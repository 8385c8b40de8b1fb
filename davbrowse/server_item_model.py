"""A list model over the saved servers."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Optional

from .server_info import ServerInfo
from .server_info_manager import ServerInfoManager

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


class ServerRole(IntEnum):
    DESC = _USER_ROLE
    ADDR = _USER_ROLE + 1
    PORT = _USER_ROLE + 2
    PATH = _USER_ROLE + 3


_FIELD_BY_ROLE = {
    ServerRole.DESC: "description",
    ServerRole.ADDR: "addr",
    ServerRole.PORT: "port",
    ServerRole.PATH: "path",
}


def _server_role(role: int) -> Optional[ServerRole]:
    try:
        return ServerRole(role)
    except ValueError:
        return None


class ServerItemModel:
    """Rows are servers; roles select their fields."""

    def __init__(self, manager: ServerInfoManager) -> None:
        self._manager = manager
        _log.debug("The server item model is being created")

    def row_count(self) -> int:
        return len(self._manager)

    def data(self, row: int, role: int) -> Any:
        """Return the field for ``role`` of the server at ``row``, or None."""
        server_role = _server_role(role)
        if server_role is None:
            return None
        return getattr(self._manager.get(row), _FIELD_BY_ROLE[server_role])

    def set_data(self, row: int, value: Any, role: int) -> bool:
        """Change one field; return whether anything changed."""
        server_role = _server_role(role)
        if server_role is None:
            return False
        info = self._manager.get(row)
        field = _FIELD_BY_ROLE[server_role]
        new_value = int(value) if server_role is ServerRole.PORT else str(value)
        if getattr(info, field) == new_value:
            return False
        setattr(info, field, new_value)
        self._manager.edit(row, info)
        return True

    def remove_rows(self, row: int, count: int) -> bool:
        self._manager.remove(row, count)
        return True

    def role_names(self) -> dict[int, str]:
        names = dict(_BASE_ROLE_NAMES)
        names[ServerRole.DESC] = "desc"
        names[ServerRole.ADDR] = "addr"
        names[ServerRole.PORT] = "port"
        names[ServerRole.PATH] = "path"
        return names

    def add_server_info(self, description: str, addr: str, port: int, path: str) -> None:
        self._manager.add(ServerInfo(description, addr, port, path))