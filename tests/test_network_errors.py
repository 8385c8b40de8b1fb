import logging

import pytest

from davbrowse.network_errors import (
    ErrorKind,
    NetworkError,
    describe_network_error,
    error_message,
)


def test_connection_refused_description():
    display, log_name = describe_network_error(NetworkError.CONNECTION_REFUSED)
    assert display == "Connection refused"
    assert "CONNECTION_REFUSED" in log_name


def test_host_not_found_description():
    assert describe_network_error(NetworkError.HOST_NOT_FOUND)[0] == "Host not found"


@pytest.mark.parametrize("error", [e for e in NetworkError if e is not NetworkError.NO_ERROR])
def test_every_error_has_its_own_description(error):
    display, log_name = describe_network_error(error)
    assert display != "Unknown error"
    assert log_name.endswith(error.name)


def test_plain_integer_is_accepted():
    assert describe_network_error(int(NetworkError.TIMEOUT)) == describe_network_error(NetworkError.TIMEOUT)


def test_unknown_code_gives_unknown_error():
    assert describe_network_error(12345) == ("Unknown error", "Unknown error")


def test_no_error_code_gives_unknown_error():
    assert describe_network_error(NetworkError.NO_ERROR)[0] == "Unknown error"


def test_reply_parse_error_message():
    assert error_message(ErrorKind.REPLY_PARSE_ERROR) == "Reply parse error"


def test_network_error_message_is_logged(caplog):
    with caplog.at_level(logging.CRITICAL, logger="davbrowse"):
        text = error_message(ErrorKind.NETWORK_ERROR, NetworkError.CONTENT_NOT_FOUND)
    assert text == describe_network_error(NetworkError.CONTENT_NOT_FOUND)[0]
    assert any("Network error:" in r.getMessage() and "CONTENT_NOT_FOUND" in r.getMessage() for r in caplog.records)


def test_network_error_without_code_raises():
    with pytest.raises(ValueError):
        error_message(ErrorKind.NETWORK_ERROR, NetworkError.NO_ERROR)