"""Sorting and name search over a file item model."""

from __future__ import annotations

import functools
import logging
import threading
from typing import Callable, Optional

from .file_item_model import FileItemModel
from .settings_json_file import SettingsJsonFile
from .sort_param import CompResult, FileItemRole

_log = logging.getLogger(__name__)

_TYPING_DELAY_MSEC = 600


class FileSortFilterModel:
    """Orders the rows of a file item model by the configured sort params
    and hides rows whose names do not contain the search text.

    The model owns its source and closes it in :meth:`close`.
    ``on_change`` is called whenever the order or the filter changes.
    """

    def __init__(
        self,
        settings: SettingsJsonFile,
        source: FileItemModel,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        _log.debug("The file sort filter item model is being created")
        self._settings = settings
        self._source = source
        self._on_change = on_change
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._text = ""
        self._applied_text = ""
        self._case_sensitive = settings.search_cs_flag
        self._params = settings.sort_params
        self._settings.set_notification_func(self.update)

    def __enter__(self) -> "FileSortFilterModel":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def search(self, text: str) -> None:
        """Filter by ``text`` right away."""
        if self._text == text:
            return
        self._text = text
        self.repeat_search(0)

    def search_with_timer(self, text: str) -> None:
        """Filter by ``text`` after a short pause, restarting on each call."""
        if self._text == text:
            return
        self._text = text
        self.repeat_search(_TYPING_DELAY_MSEC)

    def repeat_search(self, msec: int) -> None:
        """Apply the current search text after ``msec`` milliseconds."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            if msec > 0:
                timer = threading.Timer(msec / 1000, self._apply_search)
                timer.daemon = True
                self._timer = timer
                timer.start()
                return
        self._apply_search()

    def _apply_search(self) -> None:
        with self._lock:
            self._timer = None
            self._case_sensitive = self._settings.search_cs_flag
            self._applied_text = self._text
        self._notify()

    def accepts_row(self, row: int) -> bool:
        """Return whether the source row passes the search filter."""
        with self._lock:
            text = self._applied_text
            case_sensitive = self._case_sensitive
        if not text:
            return True
        if self._source.data(row, FileItemRole.IS_EXIT):
            return False
        name = self._source.data(row, FileItemRole.NAME)
        if case_sensitive:
            return text in name
        return text.casefold() in name.casefold()

    def less_than(self, left: int, right: int) -> bool:
        """Return whether source row ``left`` sorts before ``right``."""
        left_is_exit = bool(self._source.data(left, FileItemRole.IS_EXIT))
        right_is_exit = bool(self._source.data(right, FileItemRole.IS_EXIT))
        if left_is_exit or right_is_exit:
            return left_is_exit
        for param in self._params:
            result = param.comp_func(
                self._source.data(left, param.role),
                self._source.data(right, param.role),
                param.descending,
            )
            if result is not CompResult.EQUAL:
                return result is CompResult.LESS
        return False

    def _compare(self, left: int, right: int) -> int:
        if self.less_than(left, right):
            return -1
        if self.less_than(right, left):
            return 1
        return 0

    def rows(self) -> list[int]:
        """Return the visible source rows in display order."""
        visible = [row for row in range(self._source.row_count()) if self.accepts_row(row)]
        return sorted(visible, key=functools.cmp_to_key(self._compare))

    def update(self) -> None:
        """Reload the sort params from the settings."""
        self._params = self._settings.sort_params
        self._notify()

    def close(self) -> None:
        """Cancel a pending search and detach from the settings and source."""
        _log.debug("The file sort filter item model is being destroyed")
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        self._settings.set_notification_func(None)
        self._source.close()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()