"""In-memory server list backed by ``data.json``."""

from __future__ import annotations

import dataclasses
from typing import Iterator, Optional

from .data_json_file import DataJsonFile
from .server_info import ServerInfo


class ServerInfoManager:
    """Holds the saved servers and writes every change to disk."""

    def __init__(self, json_file: Optional[DataJsonFile] = None) -> None:
        self._json_file = json_file if json_file is not None else DataJsonFile()
        self._infos: list[ServerInfo] = self._json_file.read_servers()

    def get(self, row: int) -> ServerInfo:
        """Return a copy of the server at ``row``."""
        if not 0 <= row < len(self._infos):
            raise IndexError(f"server row out of range: {row}")
        return dataclasses.replace(self._infos[row])

    def __len__(self) -> int:
        return len(self._infos)

    def __iter__(self) -> Iterator[ServerInfo]:
        return (dataclasses.replace(info) for info in self._infos)

    def add(self, info: ServerInfo) -> None:
        self._json_file.add(info)
        self._infos.append(dataclasses.replace(info))

    def edit(self, row: int, info: ServerInfo) -> None:
        self._json_file.edit(row, info)
        self._infos[row] = dataclasses.replace(info)

    def remove(self, row: int, count: int) -> None:
        self._json_file.remove(row, count)
        del self._infos[row : row + count]