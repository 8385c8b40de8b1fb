"""Sort criteria for file lists and their comparison functions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Callable

_USER_ROLE = 0x0100


class FileItemRole(IntEnum):
    NAME = _USER_ROLE
    EXTENSION = _USER_ROLE + 1
    ICON_NAME = _USER_ROLE + 2
    WIDE_IMAGE_WIDTH_FLAG = _USER_ROLE + 3
    CREATION_TIME = _USER_ROLE + 4
    CREATION_TIME_STR = _USER_ROLE + 5
    MOD_TIME = _USER_ROLE + 6
    MOD_TIME_STR = _USER_ROLE + 7
    FILE_FLAG = _USER_ROLE + 8
    IS_EXIT = _USER_ROLE + 9
    SIZE = _USER_ROLE + 10
    SIZE_STR = _USER_ROLE + 11
    ENUM_SIZE = _USER_ROLE + 12


class CompResult(Enum):
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


CompareFunc = Callable[[Any, Any, bool], CompResult]


def _left_is_less_if_ascending(left_is_less: bool, descending: bool) -> CompResult:
    if descending:
        return CompResult.GREATER if left_is_less else CompResult.LESS
    return CompResult.LESS if left_is_less else CompResult.GREATER


def _compare_nulls(lhs, rhs, descending: bool):
    """Order missing values after present ones; None when both are present."""
    left_is_null = lhs is None
    right_is_null = rhs is None
    if left_is_null or right_is_null:
        if left_is_null == right_is_null:
            return CompResult.EQUAL
        return _left_is_less_if_ascending(right_is_null, descending)
    return None


def _compare_ordered(lhs, rhs, descending: bool) -> CompResult:
    if lhs == rhs:
        return CompResult.EQUAL
    return _left_is_less_if_ascending(lhs < rhs, descending)


def compare_file_flag(lhs: bool, rhs: bool, descending: bool) -> CompResult:
    """Directories (flag false) come before files in ascending order."""
    left_is_file = bool(lhs)
    right_is_file = bool(rhs)
    if left_is_file == right_is_file:
        return CompResult.EQUAL
    return _left_is_less_if_ascending(right_is_file, descending)


def compare_string(lhs: str, rhs: str, descending: bool) -> CompResult:
    return _compare_ordered(str(lhs), str(rhs), descending)


def compare_extension(lhs, rhs, descending: bool) -> CompResult:
    nulls = _compare_nulls(lhs, rhs, descending)
    return nulls if nulls is not None else compare_string(lhs, rhs, descending)


def compare_time(lhs, rhs, descending: bool) -> CompResult:
    nulls = _compare_nulls(lhs, rhs, descending)
    return nulls if nulls is not None else _compare_ordered(lhs, rhs, descending)


def compare_size(lhs, rhs, descending: bool) -> CompResult:
    nulls = _compare_nulls(lhs, rhs, descending)
    return nulls if nulls is not None else _compare_ordered(lhs, rhs, descending)


@dataclass(eq=False)
class SortParam:
    """One sort key; two params are equal when role and direction match."""

    role: FileItemRole
    description: str
    descending: bool
    comp_func: CompareFunc

    def __eq__(self, other):
        if not isinstance(other, SortParam):
            return NotImplemented
        return self.role == other.role and self.descending == other.descending

    __hash__ = None


_SUPPORTED: dict[str, tuple[FileItemRole, str, CompareFunc]] = {
    "type": (FileItemRole.FILE_FLAG, "Type (directories are higher)", compare_file_flag),
    "name": (FileItemRole.NAME, "Name", compare_string),
    "modification_time": (FileItemRole.MOD_TIME, "Modification time", compare_time),
    "creation_time": (FileItemRole.CREATION_TIME, "Creation time", compare_time),
    "size": (FileItemRole.SIZE, "Size", compare_size),
    "extension": (FileItemRole.EXTENSION, "Filename extension", compare_extension),
}

_ID_BY_ROLE = {role: param_id for param_id, (role, _, _) in _SUPPORTED.items()}

_DEFAULT_ORDER = ("type", "name", "modification_time", "creation_time", "size", "extension")


def sort_param_by_id(param_id: str) -> SortParam:
    """Return a fresh ascending param for a configuration id."""
    try:
        role, description, func = _SUPPORTED[param_id]
    except KeyError:
        raise ValueError(f"unsupported sort param: {param_id!r}") from None
    return SortParam(role, description, False, func)


def sort_param_id(param: SortParam) -> str:
    """Return the configuration id of a param."""
    try:
        return _ID_BY_ROLE[param.role]
    except KeyError:
        raise ValueError(f"no sort param for role {param.role!r}") from None


def default_sort_params() -> list[SortParam]:
    return [sort_param_by_id(param_id) for param_id in _DEFAULT_ORDER]