import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from davbrowse.client import FILE_LIST_REQUEST, Client
from davbrowse.network_errors import NetworkError

PAYLOAD = b"<D:multistatus xmlns:D=\"DAV:\"/>"


class _Handler(BaseHTTPRequestHandler):
    def do_PROPFIND(self):
        length = int(self.headers.get("Content-Length", "0"))
        body = self.rfile.read(length)
        self.server.requests.append(
            {
                "command": self.command,
                "path": self.path,
                "depth": self.headers.get("Depth"),
                "content_type": self.headers.get("Content-Type"),
                "body": body,
            }
        )
        if self.server.hold:
            self.server.release.wait(5)
        self.send_response(self.server.status)
        self.send_header("Content-Length", str(len(PAYLOAD)))
        self.end_headers()
        self.wfile.write(PAYLOAD)

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    srv = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    srv.requests = []
    srv.status = 207
    srv.hold = False
    srv.release = threading.Event()
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield srv
    srv.release.set()
    srv.shutdown()
    srv.server_close()


def _client(replies, errors):
    return Client(replies.append, errors.append, timeout=5)


def test_reply_is_delivered(server):
    replies, errors = [], []
    client = _client(replies, errors)
    client.set_server_info("127.0.0.1", server.server_address[1])
    client.request_file_list("/dav/")
    assert client.wait(5)
    assert replies == [PAYLOAD]
    assert errors == []


def test_request_is_propfind_with_depth_one(server):
    replies, errors = [], []
    client = _client(replies, errors)
    client.set_server_info("127.0.0.1", server.server_address[1])
    client.request_file_list("/dav/")
    assert client.wait(5)
    request = server.requests[0]
    assert request["command"] == "PROPFIND"
    assert request["path"] == "/dav/"
    assert request["depth"] == "1"
    assert request["content_type"] == "text/xml"
    assert request["body"] == FILE_LIST_REQUEST


def test_non_ascii_path_is_percent_encoded(server):
    replies, errors = [], []
    client = _client(replies, errors)
    client.set_server_info("127.0.0.1", server.server_address[1])
    client.request_file_list("/dav/Диск 1/")
    assert client.wait(5)
    assert server.requests[0]["path"] == "/dav/%D0%94%D0%B8%D1%81%D0%BA%201/"


def test_http_not_found_is_reported(server):
    server.status = 404
    replies, errors = [], []
    client = _client(replies, errors)
    client.set_server_info("127.0.0.1", server.server_address[1])
    client.request_file_list("/missing/")
    assert client.wait(5)
    assert errors == [NetworkError.CONTENT_NOT_FOUND]
    assert replies == []


def test_connection_refused_is_reported():
    sock = socket.socket()
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    replies, errors = [], []
    client = _client(replies, errors)
    client.set_server_info("127.0.0.1", port)
    client.request_file_list("/")
    assert client.wait(5)
    assert errors == [NetworkError.CONNECTION_REFUSED]


def test_abort_reports_cancellation_and_drops_reply(server):
    server.hold = True
    replies, errors = [], []
    client = _client(replies, errors)
    client.set_server_info("127.0.0.1", server.server_address[1])
    client.request_file_list("/dav/")
    client.abort()
    server.release.set()
    assert client.wait(5)
    assert errors == [NetworkError.OPERATION_CANCELED]
    assert replies == []


def test_abort_without_request_does_nothing():
    replies, errors = [], []
    client = _client(replies, errors)
    client.abort()
    assert errors == []


def test_request_without_server_info_raises():
    client = Client(lambda data: None, lambda error: None)
    with pytest.raises(RuntimeError):
        client.request_file_list("/")


def test_invalid_port_is_rejected():
    client = Client(lambda data: None, lambda error: None)
    with pytest.raises(ValueError):
        client.set_server_info("127.0.0.1", 70000)