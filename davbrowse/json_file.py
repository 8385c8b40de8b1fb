"""A JSON document kept in sync with a file in the configuration directory."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import platformdirs

_APP_DIR = "WebDAVClient"

_log = logging.getLogger(__name__)


def default_config_dir() -> Path:
    """Return the directory the application keeps its JSON files in."""
    return Path(platformdirs.user_config_dir()) / _APP_DIR


class JsonFile:
    """A JSON root value that is written back to its file on every change.

    A missing or unparsable file starts out as ``null``.  When the directory
    cannot be created the document lives in memory only.
    """

    def __init__(self, filename: str, directory: Optional[Union[str, Path]] = None) -> None:
        self._path: Optional[Path] = None
        self._data: Any = None
        dir_path = Path(directory) if directory is not None else default_config_dir()
        _log.debug('Settings path: "%s"', dir_path)
        try:
            dir_path.mkdir(parents=True, exist_ok=True)
        except OSError:
            _log.critical('Could not create directory "%s"', dir_path)
            return
        self._path = dir_path / filename
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError:
            self._set_root_obj(None)
            return
        try:
            self._data = json.loads(text)
        except ValueError:
            self._set_root_obj(None)

    @property
    def path(self) -> Optional[Path]:
        """The backing file, or ``None`` when it could not be set up."""
        return self._path

    @property
    def root_obj(self) -> Any:
        """A copy of the whole document."""
        return copy.deepcopy(self._data)

    def set_value(self, key: str, value: Any) -> None:
        """Set a top-level key and write the document out."""
        obj = self.root_obj
        if obj is None:
            obj = {}
        elif not isinstance(obj, dict):
            raise TypeError(f"cannot set {key!r}: the document root is not an object")
        obj[key] = copy.deepcopy(value)
        self._set_root_obj(obj)

    def _set_root_obj(self, data: Any) -> None:
        self._data = data
        if self._path is None:
            _log.critical('Could not create file "%s"', "")
            return
        text = json.dumps(data, indent=4, sort_keys=True, ensure_ascii=False) + "\n"
        try:
            self._path.write_text(text, encoding="utf-8")
        except OSError:
            _log.critical('Could not write to the file "%s"', self._path)