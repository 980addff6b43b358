import socket
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from miinettest.ping import PingError, PingResult, ping


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/":
            body = b"hello"
            self.send_response(200)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)
        elif self.path == "/redirect":
            self.send_response(302)
            self.send_header("Location", "/")
            self.send_header("Content-Length", "0")
            self.end_headers()
        elif self.path == "/slow":
            time.sleep(1.0)
            self.send_response(200)
            self.send_header("Content-Length", "0")
            self.end_headers()
        else:
            self.send_response(404)
            self.send_header("Content-Length", "0")
            self.end_headers()

    def log_message(self, format, *args):
        pass


@pytest.fixture
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def _closed_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_ping_ok(base_url):
    result = ping(base_url + "/")
    assert isinstance(result, PingResult)
    assert result.status == 200
    assert result.url == base_url + "/"
    assert result.elapsed_ms >= 0


def test_ping_http_error_status_is_reported(base_url):
    assert ping(base_url + "/missing").status == 404


def test_ping_does_not_follow_redirects(base_url):
    assert ping(base_url + "/redirect").status == 302


def test_ping_refused_connection_raises():
    with pytest.raises(PingError):
        ping(f"http://127.0.0.1:{_closed_port()}/", timeout=2)


def test_ping_times_out(base_url):
    with pytest.raises(PingError):
        ping(base_url + "/slow", timeout=0.2)


def test_ping_malformed_url_raises():
    with pytest.raises(PingError):
        ping("not a url")


@pytest.mark.parametrize("timeout", [0, -1])
def test_ping_rejects_non_positive_timeout(timeout):
    with pytest.raises(ValueError):
        ping("http://127.0.0.1/", timeout=timeout)