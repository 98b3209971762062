"""
Shared pytest fixtures for Peloton client testing.
"""
import io
import json
from http.client import HTTPMessage
from unittest.mock import Mock
from urllib.parse import urlsplit

import pytest
from requests.adapters import HTTPAdapter
from requests.cookies import cookiejar_from_dict
from requests.structures import CaseInsensitiveDict
from urllib3.response import HTTPResponse

from peloton_client.sdk.client import PelotonClient


@pytest.fixture
def client():
    """A fresh, logged-out client."""
    return PelotonClient()


@pytest.fixture
def authed_client():
    """A client with a session token and user id already set."""
    client = PelotonClient()
    client.set_session("peloton_session_id=token", user_id="42")
    return client


@pytest.fixture
def fake_response():
    """Factory for Mock objects shaped like requests.Response.

    Pass body=None together with text=... to make .json() fail.
    """

    def _make(status=200, body=None, cookies=None, headers=None, text=None):
        resp = Mock()
        resp.status_code = status
        resp.headers = CaseInsensitiveDict(headers or {"Content-Type": "application/json"})
        resp.cookies = cookiejar_from_dict(cookies or {})
        if text is not None:
            resp.json = Mock(side_effect=json.JSONDecodeError("Expecting value", text, 0))
        else:
            resp.json = Mock(return_value=body)
        return resp

    return _make


class _SentResponse:
    """The http.client response urllib3 wraps: headers plus a closed socket."""

    def __init__(self, msg):
        self.msg = msg

    def isclosed(self):
        return True

    def close(self):
        pass


class StubAdapter(HTTPAdapter):
    """Transport adapter answering from a route table instead of the network.

    Routes map (method, path) to (status, [(header, value), ...], body_bytes).
    Every prepared request sent is kept in ``sent``.
    """

    def __init__(self):
        super().__init__()
        self.routes = {}
        self.sent = []

    def add(self, method, path, status=200, body=b"{}", headers=None):
        if not isinstance(body, bytes):
            body = json.dumps(body).encode()
        self.routes[(method, path)] = (status, headers or [], body)

    def send(self, request, **kwargs):
        self.sent.append(request)
        status, headers, body = self.routes[(request.method, urlsplit(request.url).path)]

        msg = HTTPMessage()
        msg["Content-Type"] = "application/json"
        for name, value in headers:
            msg[name] = value  # repeated names are appended, not replaced

        raw = HTTPResponse(
            body=io.BytesIO(body),
            headers=list(msg.items()),
            status=status,
            preload_content=False,
        )
        # requests reads Set-Cookie from the underlying http.client message
        raw._original_response = _SentResponse(msg)
        return self.build_response(request, raw)


@pytest.fixture
def stub_transport():
    return StubAdapter()


@pytest.fixture
def stubbed_client(stub_transport):
    """Logged-out client whose session talks to stub_transport."""
    client = PelotonClient()
    client._session.mount("https://", stub_transport)
    return client
