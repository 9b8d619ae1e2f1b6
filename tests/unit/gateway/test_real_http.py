"""Tests for RealHttpClient with urllib patched out."""

import io
import threading
import urllib.error
from collections.abc import Iterator
from http.server import BaseHTTPRequestHandler, HTTPServer
from unittest.mock import MagicMock, patch

import pytest

from git_pr.core.errors import RequestError
from git_pr.gateway.http.real import RealHttpClient
from git_pr.gateway.http.types import HttpResponse

URL = "https://api.github.com/repos/alice/proj/pulls"


def _fake_urlopen_response(status: int, body: str) -> MagicMock:
    response = MagicMock()
    response.status = status
    response.read.return_value = body.encode("utf-8")
    response.__enter__.return_value = response
    return response


def test_send_returns_success_response() -> None:
    with patch(
        "git_pr.gateway.http.real.urllib.request.urlopen",
        return_value=_fake_urlopen_response(201, '{"number": 1}'),
    ) as mock_urlopen:
        response = RealHttpClient().send(
            "POST", URL, headers={"Authorization": "Bearer t"}, body='{"a": 1}'
        )

    assert response == HttpResponse(status=201, body='{"number": 1}')
    request = mock_urlopen.call_args.args[0]
    assert request.get_method() == "POST"
    assert request.full_url == URL
    assert request.data == b'{"a": 1}'
    assert request.get_header("Authorization") == "Bearer t"


def test_send_returns_http_error_as_response() -> None:
    error = urllib.error.HTTPError(
        URL, 422, "Unprocessable Entity", {}, io.BytesIO(b'{"message": "Validation Failed"}')
    )
    with patch("git_pr.gateway.http.real.urllib.request.urlopen", side_effect=error):
        response = RealHttpClient().send("POST", URL, headers={}, body="{}")

    assert response.status == 422
    assert response.body == '{"message": "Validation Failed"}'
    assert not response.ok


def test_send_raises_request_error_when_unreachable() -> None:
    error = urllib.error.URLError("Name or service not known")
    with patch("git_pr.gateway.http.real.urllib.request.urlopen", side_effect=error):
        with pytest.raises(RequestError, match="Name or service not known") as exc_info:
            RealHttpClient().send("GET", URL, headers={}, body=None)

    assert exc_info.value.status is None


def test_send_raises_request_error_on_timeout() -> None:
    with patch("git_pr.gateway.http.real.urllib.request.urlopen", side_effect=TimeoutError()):
        with pytest.raises(RequestError, match="timed out"):
            RealHttpClient(timeout=5).send("GET", URL, headers={}, body=None)


class _Latin1Handler(BaseHTTPRequestHandler):
    """Answers every request with Latin-1 HTML, as some proxies do."""

    def do_GET(self) -> None:
        body = b"<html>Passerelle d\xe9faillante</html>"
        status = 502 if self.path.startswith("/error") else 200
        self.send_response(status)
        self.send_header("Content-Type", "text/html; charset=iso-8859-1")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        pass


@pytest.fixture
def latin1_server(monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    for var in ("http_proxy", "HTTP_PROXY", "all_proxy", "ALL_PROXY"):
        monkeypatch.delenv(var, raising=False)
    server = HTTPServer(("127.0.0.1", 0), _Latin1Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_port}"
    finally:
        server.shutdown()
        server.server_close()


def test_send_tolerates_non_utf8_success_body(latin1_server: str) -> None:
    response = RealHttpClient(timeout=5).send("GET", f"{latin1_server}/ok", headers={}, body=None)

    assert response.status == 200
    assert response.body == "<html>Passerelle d\ufffdfaillante</html>"


def test_send_tolerates_non_utf8_error_body(latin1_server: str) -> None:
    response = RealHttpClient(timeout=5).send(
        "GET", f"{latin1_server}/error", headers={}, body=None
    )

    assert response.status == 502
    assert "Passerelle" in response.body


def test_send_raises_request_error_on_connection_reset() -> None:
    response = _fake_urlopen_response(200, "")
    response.read.side_effect = ConnectionResetError(104, "Connection reset by peer")
    with patch("git_pr.gateway.http.real.urllib.request.urlopen", return_value=response):
        with pytest.raises(RequestError, match="Connection reset by peer"):
            RealHttpClient().send("GET", URL, headers={}, body=None)
