"""Pytest configuration: project root on sys.path and shared fakes."""

import os
import sys
from typing import Any, Dict, List, Optional

import pytest
import requests

# Ensure project root is on sys.path so that
# imports like `from tarotka...` and `from api...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, raw: Optional[str] = None):
        self.status_code = status_code
        self._body = body
        self._raw = raw

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        if self._raw is not None:
            raise ValueError("not JSON")
        return self._body


class FakeSession:
    """Stands in for requests.Session: records posts and replays a canned result."""

    def __init__(self, response: Optional[FakeResponse] = None, exc: Optional[Exception] = None):
        self.response = response or FakeResponse(200, {"answer": ""})
        self.exc = exc
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, json: Any = None, timeout: Any = None) -> FakeResponse:
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def offline_session():
    return FakeSession(exc=requests.ConnectionError("network unreachable"))
