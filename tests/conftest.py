import os
import socket
import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC = REPO_ROOT / "src"
FIXTURES = Path(__file__).resolve().parent / "fixtures"

# Prefer repo sources over any installed package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def block_network(monkeypatch):
    if os.getenv("LIVE") == "1":
        return

    real_connect = socket.socket.connect

    def guarded_connect(sock, address):
        host = address[0]
        if host not in ("127.0.0.1", "localhost"):
            raise RuntimeError("Network access blocked in tests")
        return real_connect(sock, address)

    monkeypatch.setattr(socket.socket, "connect", guarded_connect)


@pytest.fixture()
def fixture_html():
    def _read(name):
        return (FIXTURES / name).read_text(encoding="utf-8")

    return _read


class FakeResponse:
    def __init__(self, status_code=200, body="", url="", content_type="text/html;charset=UTF-8"):
        self.status_code = status_code
        self.content = body.encode("utf-8") if isinstance(body, str) else body
        self.url = url
        self.headers = {"Content-Type": content_type} if content_type else {}


class FakeSession:
    """Records outgoing calls and answers each with a canned response."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []
        self.closed = False

    def _answer(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        self.response.url = url
        return self.response

    def get(self, url, **kwargs):
        return self._answer("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._answer("POST", url, **kwargs)

    def close(self):
        self.closed = True


@pytest.fixture()
def fake_session():
    def _make(status_code=200, body="", error=None, content_type="text/html;charset=UTF-8"):
        return FakeSession(
            FakeResponse(status_code=status_code, body=body, content_type=content_type),
            error=error,
        )

    return _make
