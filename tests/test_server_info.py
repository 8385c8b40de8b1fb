import pytest

from davbrowse.server_info import ServerInfo


def test_fields_are_kept():
    info = ServerInfo("Home", "192.168.0.10", 8080, "/dav")
    assert (info.description, info.addr, info.port, info.path) == ("Home", "192.168.0.10", 8080, "/dav")


def test_fields_can_be_changed():
    info = ServerInfo("Home", "localhost", 80, "/")
    info.description = "Office"
    info.port = 443
    assert info == ServerInfo("Office", "localhost", 443, "/")


@pytest.mark.parametrize("port", [-1, 65536, "80", True])
def test_invalid_port_rejected(port):
    with pytest.raises(ValueError):
        ServerInfo("x", "localhost", port, "/")


def test_invalid_port_rejected_on_assignment():
    info = ServerInfo("x", "localhost", 80, "/")
    with pytest.raises(ValueError):
        info.port = 70000
    assert info.port == 80