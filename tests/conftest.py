"""Pytest shared fixtures for the FusionAuth client tests."""
import json
import pathlib
import sys
from typing import Any, Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from fusionauth.core.api import FusionAuthClient


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from opening real connections.

    Integration tests are explicitly marked with @pytest.mark.integration and
    talk to the in-process mock server, so they skip this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _unexpected(method, url, *args, **kwargs):
        raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")

    monkeypatch.setattr(requests, "request", _unexpected)


# ─────────────────────────────────────────────────────────────────────────────
# Stub transport
# ─────────────────────────────────────────────────────────────────────────────
class StubResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, body: Any = None, headers: Optional[dict] = None):
        self.status_code = status_code
        if body is None:
            self.content = b""
        elif isinstance(body, bytes):
            self.content = body
        elif isinstance(body, str):
            self.content = body.encode("utf-8")
        else:
            self.content = json.dumps(body).encode("utf-8")
        self.headers = headers or {}


class RecordingTransport:
    """Callable replacing requests.request; records every call it receives."""

    def __init__(self):
        self.calls: list[dict] = []
        self._responses: list[StubResponse] = []
        self._error: Optional[BaseException] = None

    def respond(self, status_code: int = 200, body: Any = None, headers: Optional[dict] = None) -> "RecordingTransport":
        self._responses.append(StubResponse(status_code, body, headers))
        return self

    def fail(self, error: BaseException) -> "RecordingTransport":
        self._error = error
        return self

    @property
    def last(self) -> dict:
        assert self.calls, "transport was never called"
        return self.calls[-1]

    def __call__(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self._error is not None:
            raise self._error
        if not self._responses:
            return StubResponse(200)
        if len(self._responses) == 1:
            return self._responses[0]
        return self._responses.pop(0)


@pytest.fixture
def transport(monkeypatch):
    """Replace requests.request with a recording stub (defaults to 200, empty body)."""
    stub = RecordingTransport()
    monkeypatch.setattr(requests, "request", stub)
    return stub


@pytest.fixture
def fa_client():
    """FusionAuth client pointed at a fake host, no tenant."""
    return FusionAuthClient("test-api-key", "http://fusionauth.test")
