"""An editable list model over the sort criteria."""

from __future__ import annotations

import logging
from typing import Any

from .settings_json_file import SettingsJsonFile
from .sort_param import SortParam

_log = logging.getLogger(__name__)

DISPLAY_ROLE = 0
DESCENDING_ROLE = 0x0100

_BASE_ROLE_NAMES = {
    0: "display",
    1: "decoration",
    2: "edit",
    3: "toolTip",
    4: "statusTip",
    5: "whatsThis",
}


class SortParamItemModel:
    """A working copy of the sort params that is saved on request."""

    def __init__(self, settings: SettingsJsonFile) -> None:
        _log.debug("The sort parameter item model is being created")
        self._settings = settings
        self._data: list[SortParam] = []
        self.reset_changes()

    def row_count(self) -> int:
        return len(self._data)

    def data(self, row: int, role: int) -> Any:
        """Return the description or direction of the param at ``row``, or None."""
        if role == DISPLAY_ROLE:
            return self._data[row].description
        if role == DESCENDING_ROLE:
            return self._data[row].descending
        return None

    def set_data(self, row: int, value: Any, role: int) -> bool:
        """Set the direction of a param; return whether it changed."""
        if role != DESCENDING_ROLE:
            return False
        param = self._data[row]
        new_value = bool(value)
        if param.descending == new_value:
            return False
        param.descending = new_value
        return True

    def role_names(self) -> dict[int, str]:
        names = dict(_BASE_ROLE_NAMES)
        names[DESCENDING_ROLE] = "descending"
        return names

    def has_changes(self) -> bool:
        return self._data != self._settings.sort_params

    def move_up(self, row: int) -> None:
        if not 0 < row < len(self._data):
            raise IndexError(f"cannot move row {row} up")
        self._data[row - 1], self._data[row] = self._data[row], self._data[row - 1]

    def invert(self) -> None:
        """Reverse the order of the params."""
        self._data.reverse()

    def move_down(self, row: int) -> None:
        if not 0 <= row < len(self._data) - 1:
            raise IndexError(f"cannot move row {row} down")
        self._data[row + 1], self._data[row] = self._data[row], self._data[row + 1]

    def save(self) -> None:
        self._settings.sort_params = self._data

    def reset_changes(self) -> None:
        """Discard edits and reload the params from the settings."""
        self._data = self._settings.sort_params