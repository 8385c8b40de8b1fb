"""Connection details of a WebDAV server."""

from dataclasses import dataclass

_MAX_PORT = 0xFFFF


@dataclass
class ServerInfo:
    description: str
    addr: str
    port: int
    path: str

    def __post_init__(self) -> None:
        self._check_port(self.port)

    def __setattr__(self, name, value):
        if name == "port":
            self._check_port(value)
        super().__setattr__(name, value)

    @staticmethod
    def _check_port(port: int) -> None:
        if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= _MAX_PORT:
            raise ValueError(f"invalid port: {port!r}")