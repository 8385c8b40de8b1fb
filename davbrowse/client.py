"""A WebDAV client that asks a server for the contents of a directory."""

from __future__ import annotations

import http.client
import logging
import socket
import ssl
import threading
from typing import Callable, Optional
from urllib.parse import quote

from .network_errors import NetworkError

_log = logging.getLogger(__name__)

FILE_LIST_REQUEST = (
    b'<?xml version="1.0" encoding="utf-8"?>\n'
    b'<D:propfind xmlns:D="DAV:">\n'
    b"<D:prop>\n"
    b"<D:creationdate/>\n"
    b"<D:getlastmodified/>\n"
    b"<D:resourcetype/>\n"
    b"<D:getcontentlength/>\n"
    b"</D:prop>\n"
    b"</D:propfind>"
)

_MAX_PORT = 0xFFFF
_PATH_SAFE = "/%:@!$&'()*+,;=~-._"

ReplyHandler = Callable[[bytes], None]
ErrorHandler = Callable[[NetworkError], None]


def _error_from_status(status: int) -> NetworkError:
    if status < 400:
        return NetworkError.NO_ERROR
    specific = {
        401: NetworkError.AUTHENTICATION_REQUIRED,
        403: NetworkError.CONTENT_ACCESS_DENIED,
        404: NetworkError.CONTENT_NOT_FOUND,
        405: NetworkError.CONTENT_OPERATION_NOT_PERMITTED,
        407: NetworkError.PROXY_AUTHENTICATION_REQUIRED,
        409: NetworkError.CONTENT_CONFLICT,
        410: NetworkError.CONTENT_GONE,
        500: NetworkError.INTERNAL_SERVER,
        501: NetworkError.OPERATION_NOT_IMPLEMENTED,
        503: NetworkError.SERVICE_UNAVAILABLE,
    }
    if status in specific:
        return specific[status]
    return NetworkError.UNKNOWN_CONTENT if status < 500 else NetworkError.UNKNOWN_SERVER


def _error_from_exception(exc: BaseException) -> NetworkError:
    if isinstance(exc, socket.gaierror):
        return NetworkError.HOST_NOT_FOUND
    if isinstance(exc, ConnectionRefusedError):
        return NetworkError.CONNECTION_REFUSED
    if isinstance(exc, TimeoutError):
        return NetworkError.TIMEOUT
    if isinstance(exc, (ConnectionResetError, ConnectionAbortedError, BrokenPipeError)):
        return NetworkError.REMOTE_HOST_CLOSED
    if isinstance(exc, ssl.SSLError):
        return NetworkError.SSL_HANDSHAKE_FAILED
    if isinstance(exc, http.client.HTTPException):
        return NetworkError.PROTOCOL_FAILURE
    return NetworkError.UNKNOWN_NETWORK


class _Request:
    """One request in flight; cancelling it closes its connection."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._connection: Optional[http.client.HTTPConnection] = None
        self.canceled = False

    def attach(self, connection: http.client.HTTPConnection) -> bool:
        with self._lock:
            self._connection = connection
            return not self.canceled

    def cancel(self) -> None:
        with self._lock:
            self.canceled = True
            connection = self._connection
        if connection is None:
            return
        sock = connection.sock
        if sock is not None:
            try:
                sock.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
        connection.close()


class Client:
    """Sends PROPFIND requests and reports the reply or the failure.

    Requests run on a background thread; the handlers are called from it.
    """

    def __init__(
        self,
        reply_handler: ReplyHandler,
        error_handler: ErrorHandler,
        timeout: Optional[float] = None,
    ) -> None:
        self._reply_handler = reply_handler
        self._error_handler = error_handler
        self._timeout = timeout
        self._addr: Optional[str] = None
        self._port = 0
        self._lock = threading.Lock()
        self._current: Optional[_Request] = None
        self._thread: Optional[threading.Thread] = None

    def set_server_info(self, addr: str, port: int) -> None:
        if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= _MAX_PORT:
            raise ValueError(f"invalid port: {port!r}")
        self._addr = addr
        self._port = port

    def request_file_list(self, path: str) -> None:
        """Ask for the entries of the directory at ``path``."""
        if self._addr is None:
            raise RuntimeError("the server address has not been set")
        addr, port = self._addr, self._port
        target = quote(path, safe=_PATH_SAFE)
        _log.info("The request is occurring: %s", f"http://{addr}:{port}{target}")

        request = _Request()
        with self._lock:
            previous = self._current
            self._current = request
        if previous is not None:
            previous.cancel()
        thread = threading.Thread(target=self._run, args=(request, addr, port, target), daemon=True)
        self._thread = thread
        thread.start()

    def abort(self) -> None:
        """Cancel the request in flight, reporting it as cancelled."""
        with self._lock:
            request = self._current
            if request is None:
                return
            self._current = None
        _log.debug("The request is being aborted")
        request.cancel()
        self._error_handler(NetworkError.OPERATION_CANCELED)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait for the latest request thread; return whether it has finished."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def _run(self, request: _Request, addr: str, port: int, target: str) -> None:
        data = b""
        error = NetworkError.NO_ERROR
        connection = http.client.HTTPConnection(addr, port, timeout=self._timeout)
        try:
            if not request.attach(connection):
                return
            connection.request(
                "PROPFIND",
                target,
                body=FILE_LIST_REQUEST,
                headers={
                    "Depth": "1",
                    "Content-Type": "text/xml",
                    "Content-Length": str(len(FILE_LIST_REQUEST)),
                },
            )
            response = connection.getresponse()
            data = response.read()
            error = _error_from_status(response.status)
        except (OSError, http.client.HTTPException) as exc:
            error = _error_from_exception(exc)
        finally:
            connection.close()

        with self._lock:
            if request is not self._current:
                return
            self._current = None
        if error is NetworkError.NO_ERROR:
            self._reply_handler(data)
        else:
            self._error_handler(error)