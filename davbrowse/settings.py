"""Settings as presented to the user interface."""

from __future__ import annotations

from .logger import MsgType
from .settings_json_file import SettingsJsonFile

_DESC_LEVEL_PAIRS = (
    ("Debug", MsgType.DEBUG),
    ("Information", MsgType.INFO),
    ("Warning", MsgType.WARNING),
    ("Critical", MsgType.CRITICAL),
    ("Fatal", MsgType.FATAL),
)


class Settings:
    """Exposes the log level as an index into a list of descriptions."""

    def __init__(self, settings: SettingsJsonFile) -> None:
        self._settings = settings
        self._index_by_level = {level: i for i, (_, level) in enumerate(_DESC_LEVEL_PAIRS)}

    @property
    def download_path(self) -> str:
        return self._settings.download_path

    @download_path.setter
    def download_path(self, path: str) -> None:
        self._settings.download_path = path

    @property
    def current_log_level(self) -> int:
        return self._index_by_level[self._settings.max_log_level]

    @current_log_level.setter
    def current_log_level(self, index: int) -> None:
        if not 0 <= index < len(_DESC_LEVEL_PAIRS):
            raise IndexError(f"log level index out of range: {index}")
        self._settings.max_log_level = _DESC_LEVEL_PAIRS[index][1]

    @property
    def search_cs_flag(self) -> bool:
        return self._settings.search_cs_flag

    @search_cs_flag.setter
    def search_cs_flag(self, case_sensitive: bool) -> None:
        self._settings.search_cs_flag = case_sensitive

    def level_desc_list(self) -> list[str]:
        """Descriptions of the log levels, in index order."""
        return [desc for desc, _ in _DESC_LEVEL_PAIRS]