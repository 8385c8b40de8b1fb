"""Descriptions of the errors a file list request can end with."""

from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import Union

_log = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Why a file list request failed."""

    REPLY_PARSE_ERROR = "reply_parse_error"
    NETWORK_ERROR = "network_error"
    INCORRECT_PATH = "incorrect_path"


class NetworkError(IntEnum):
    """Transport and HTTP level failures of a request."""

    NO_ERROR = 0
    CONNECTION_REFUSED = 1
    REMOTE_HOST_CLOSED = 2
    HOST_NOT_FOUND = 3
    TIMEOUT = 4
    OPERATION_CANCELED = 5
    SSL_HANDSHAKE_FAILED = 6
    TEMPORARY_NETWORK_FAILURE = 7
    NETWORK_SESSION_FAILED = 8
    BACKGROUND_REQUEST_NOT_ALLOWED = 9
    TOO_MANY_REDIRECTS = 10
    INSECURE_REDIRECT = 11
    UNKNOWN_NETWORK = 99
    PROXY_CONNECTION_REFUSED = 101
    PROXY_CONNECTION_CLOSED = 102
    PROXY_NOT_FOUND = 103
    PROXY_TIMEOUT = 104
    PROXY_AUTHENTICATION_REQUIRED = 105
    UNKNOWN_PROXY = 199
    CONTENT_ACCESS_DENIED = 201
    CONTENT_OPERATION_NOT_PERMITTED = 202
    CONTENT_NOT_FOUND = 203
    AUTHENTICATION_REQUIRED = 204
    CONTENT_RESEND = 205
    CONTENT_CONFLICT = 206
    CONTENT_GONE = 207
    UNKNOWN_CONTENT = 299
    PROTOCOL_UNKNOWN = 301
    PROTOCOL_INVALID_OPERATION = 302
    PROTOCOL_FAILURE = 399
    INTERNAL_SERVER = 401
    OPERATION_NOT_IMPLEMENTED = 402
    SERVICE_UNAVAILABLE = 403
    UNKNOWN_SERVER = 499


_DESCRIPTIONS = {
    NetworkError.CONNECTION_REFUSED: "Connection refused",
    NetworkError.REMOTE_HOST_CLOSED: "Connection closed",
    NetworkError.HOST_NOT_FOUND: "Host not found",
    NetworkError.TIMEOUT: "Connection timed out",
    NetworkError.OPERATION_CANCELED: "Operation cancel error",
    NetworkError.SSL_HANDSHAKE_FAILED: "SSL/TLS handshake failed",
    NetworkError.TEMPORARY_NETWORK_FAILURE: "Connection broken",
    NetworkError.NETWORK_SESSION_FAILED: "Session failed",
    NetworkError.BACKGROUND_REQUEST_NOT_ALLOWED: "Background request not allowed",
    NetworkError.TOO_MANY_REDIRECTS: "Too many redirects",
    NetworkError.INSECURE_REDIRECT: "Insecure redirect",
    NetworkError.UNKNOWN_NETWORK: "Unknown network error",
    NetworkError.PROXY_CONNECTION_REFUSED: "Connection to proxy refused",
    NetworkError.PROXY_CONNECTION_CLOSED: "Connection to proxy closed",
    NetworkError.PROXY_NOT_FOUND: "Proxy not found",
    NetworkError.PROXY_TIMEOUT: "Connection to proxy timed out",
    NetworkError.PROXY_AUTHENTICATION_REQUIRED: "Proxy requires authentication",
    NetworkError.UNKNOWN_PROXY: "Unknown proxy error",
    NetworkError.CONTENT_ACCESS_DENIED: "Access to content denied",
    NetworkError.CONTENT_OPERATION_NOT_PERMITTED: "Content operation not permitted",
    NetworkError.CONTENT_NOT_FOUND: "Content not found",
    NetworkError.AUTHENTICATION_REQUIRED: "Authentication required",
    NetworkError.CONTENT_RESEND: "Request resend failed",
    NetworkError.CONTENT_CONFLICT: "Conflict error",
    NetworkError.CONTENT_GONE: "Content no longer available",
    NetworkError.UNKNOWN_CONTENT: "Unknown content error",
    NetworkError.PROTOCOL_UNKNOWN: "Protocol unknown error",
    NetworkError.PROTOCOL_INVALID_OPERATION: "Invalid operation for protocol",
    NetworkError.PROTOCOL_FAILURE: "Protocol handle error",
    NetworkError.INTERNAL_SERVER: "Internal server error",
    NetworkError.OPERATION_NOT_IMPLEMENTED: "Server does not support operation",
    NetworkError.SERVICE_UNAVAILABLE: "Service unavailable",
    NetworkError.UNKNOWN_SERVER: "Unknown server error",
}

_UNKNOWN = "Unknown error"


def describe_network_error(error: Union[NetworkError, int]) -> tuple[str, str]:
    """Return the text shown to the user and the name written to the log."""
    try:
        known = NetworkError(error)
    except ValueError:
        return _UNKNOWN, _UNKNOWN
    display = _DESCRIPTIONS.get(known)
    if display is None:
        return _UNKNOWN, _UNKNOWN
    return display, f"NetworkError.{known.name}"


def error_message(kind: ErrorKind, error: Union[NetworkError, int] = NetworkError.NO_ERROR) -> str:
    """Return the text to show for a failed request, logging network errors."""
    if kind is ErrorKind.REPLY_PARSE_ERROR:
        return "Reply parse error"
    if error == NetworkError.NO_ERROR:
        raise ValueError("a network failure needs an error code")
    display, log_name = describe_network_error(error)
    _log.critical("Network error: %s", log_name)
    return display