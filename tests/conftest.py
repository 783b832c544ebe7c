# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures for Utho SDK tests.

Network access is replaced by :class:`FakeSession`, a ``requests.Session``
that replays canned responses and records every call.
"""

import json

import pytest
import requests

from utho import UthoClient, UthoConfig, with_session


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code=200, body=b"", headers=None):
        self.status_code = status_code
        self.headers = headers or {}
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self._content = body
        self.closed = False

    @property
    def content(self):
        return self._content

    def close(self):
        self.closed = True


class FakeSession(requests.Session):
    """Session replaying queued responses (or raising queued exceptions)."""

    def __init__(self, responses=None):
        super().__init__()
        self.responses = list(responses or [])
        self.calls = []
        self.served = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            raise AssertionError("No more responses")
        r = self.responses.pop(0)
        if isinstance(r, Exception):
            raise r
        self.served.append(r)
        return r

    @property
    def last_call(self):
        return self.calls[-1]

    def last_json(self):
        data = self.last_call.get("data")
        return None if data is None else json.loads(data.decode("utf-8"))


@pytest.fixture
def token():
    return "tok"


@pytest.fixture
def base_url():
    """Standard test base URL (no trailing slash on purpose)."""
    return "https://api.example.com/v2"


@pytest.fixture
def make_client(token, base_url):
    """Build a client whose requests are served by a ``FakeSession``."""

    def _make(*responses):
        session = FakeSession(responses)
        client = UthoClient(token, with_session(session), config=UthoConfig(base_url=base_url))
        return client, session

    return _make


@pytest.fixture
def response():
    return FakeResponse


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("UTHO_API_TOKEN", "UTHO_BASE_URL", "UTHO_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_session():
    return FakeSession
