"""Application settings stored in ``config.json``."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar, Union

import platformdirs

from .json_file import JsonFile
from .logger import Logger, MsgType
from .sort_param import SortParam, default_sort_params, sort_param_by_id, sort_param_id

_DOWNLOAD_PATH = "download_path"
_LOG_LEVEL = "log_level"
_SORT = "sort"
_SORT_ID = "id"
_SORT_DESCENDING = "descending"
_CASE_SENSITIVE = "case_sensitive"

_log = logging.getLogger(__name__)

T = TypeVar("T")


def _parse_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError("expected a string")
    return value


def _parse_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError("expected a boolean")
    return value


def _parse_level(value: Any) -> MsgType:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("expected an integer")
    return MsgType(value)


def _parse_sort_param(entry: Any) -> SortParam:
    if not isinstance(entry, dict):
        raise TypeError("expected an object")
    param_id = _parse_str(entry[_SORT_ID])
    try:
        param = sort_param_by_id(param_id)
    except ValueError:
        _log.warning('The sort param isn\'t supported: "%s"', param_id)
        raise
    param.descending = _parse_bool(entry[_SORT_DESCENDING])
    return param


def _parse_sort_params(value: Any) -> list[SortParam]:
    if not isinstance(value, list):
        raise TypeError("expected an array")
    return [_parse_sort_param(entry) for entry in value]


def _sort_params_to_json(params: list[SortParam]) -> list[dict]:
    return [{_SORT_ID: sort_param_id(p), _SORT_DESCENDING: p.descending} for p in params]


def _copy_params(params: list[SortParam]) -> list[SortParam]:
    return [dataclasses.replace(p) for p in params]


class SettingsJsonFile(JsonFile):
    """Settings with defaults for anything missing or invalid in the file."""

    def __init__(self, logger: Optional[Logger] = None, directory: Optional[Union[str, Path]] = None) -> None:
        super().__init__("config.json", directory)
        self._logger = logger if logger is not None else Logger.get_instance()
        self._sort_param_changed: Optional[Callable[[], None]] = None

        root = self.root_obj
        self._download_path: str = self._get_setting(
            root, _DOWNLOAD_PATH, _parse_str, platformdirs.user_downloads_dir, lambda v: v
        )
        self._log_level: MsgType = self._get_setting(
            root, _LOG_LEVEL, _parse_level, lambda: MsgType.WARNING, lambda v: v.value
        )
        self._logger.max_level = self._log_level
        self._sort_params: list[SortParam] = self._get_setting(
            root, _SORT, _parse_sort_params, default_sort_params, _sort_params_to_json
        )
        self._case_sensitive: bool = self._get_setting(
            root, _CASE_SENSITIVE, _parse_bool, lambda: True, lambda v: v
        )

    def _get_setting(
        self,
        root: Any,
        key: str,
        parse: Callable[[Any], T],
        default: Callable[[], T],
        to_json: Callable[[T], Any],
    ) -> T:
        try:
            if not isinstance(root, dict):
                raise KeyError(key)
            return parse(root[key])
        except (KeyError, TypeError, ValueError) as exc:
            _log.warning("config.json: %s: %s", key, exc)
            value = default()
            self.set_value(key, to_json(value))
            return value

    @property
    def download_path(self) -> str:
        return self._download_path

    @download_path.setter
    def download_path(self, path: str) -> None:
        if self._download_path == path:
            return
        self._download_path = path
        self.set_value(_DOWNLOAD_PATH, path)

    @property
    def max_log_level(self) -> MsgType:
        return self._log_level

    @max_log_level.setter
    def max_log_level(self, level: MsgType) -> None:
        if self._log_level == level:
            return
        self._log_level = level
        self._logger.max_level = level
        self.set_value(_LOG_LEVEL, level.value)

    @property
    def sort_params(self) -> list[SortParam]:
        return _copy_params(self._sort_params)

    @sort_params.setter
    def sort_params(self, params: list[SortParam]) -> None:
        if self._sort_params == list(params):
            return
        self._sort_params = _copy_params(params)
        self.set_value(_SORT, _sort_params_to_json(self._sort_params))
        if self._sort_param_changed is not None:
            self._sort_param_changed()

    @property
    def search_cs_flag(self) -> bool:
        return self._case_sensitive

    @search_cs_flag.setter
    def search_cs_flag(self, case_sensitive: bool) -> None:
        if self._case_sensitive == case_sensitive:
            return
        self._case_sensitive = case_sensitive
        self.set_value(_CASE_SENSITIVE, case_sensitive)

    def set_notification_func(self, func: Optional[Callable[[], None]]) -> None:
        """Set the callback run when the sort params change."""
        self._sort_param_changed = func