"""Pytest configuration and shared fixtures."""

import json
import logging

import httpx
import pytest

from adapters.api import ApiClient
from core.config import AppSettings
from core.interfaces.token_source import StaticTokenSource
from core.session import SessionStore

# Disable logging during tests
logging.disable(logging.CRITICAL)

BASE_URL = "https://api.test/api/v1/"
GUILD_ID = "111"


class FakeApi:
    """In-memory stand-in for the RuleKeeper API.

    Routes are keyed by (method, path relative to the base URL); every request
    is recorded so tests can assert on paths, params and bodies.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, body=None, status=200):
        self.routes.setdefault((method.upper(), path), []).append((status, body))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len("/api/v1/"):]
        responses = self.routes.get((request.method, path))
        if not responses:
            return httpx.Response(404, json={"detail": f"no route for {request.method} {path}"})
        # The last response for a route is sticky; earlier ones are consumed in order.
        status, body = responses.pop(0) if len(responses) > 1 else responses[0]
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self, method, path):
        return [r for r in self.requests if r.method == method.upper() and r.url.path.endswith("/" + path)]

    def body(self, method, path, index=-1):
        return json.loads(self.calls(method, path)[index].content)


@pytest.fixture
def fake_api():
    return FakeApi()


@pytest.fixture
def settings(tmp_path):
    return AppSettings(
        _env_file=None,
        api_base_url=BASE_URL,
        default_guild_id=GUILD_ID,
        session_file=tmp_path / "session.json",
    )


@pytest.fixture
def session(settings):
    return SessionStore.from_settings(settings)


@pytest.fixture
def api(settings, fake_api):
    """ApiClient wired to the fake API with a fixed bearer token."""
    return ApiClient(settings, token_source=StaticTokenSource("test-token"), transport=fake_api.transport())


@pytest.fixture
def cli_env(monkeypatch, tmp_path, fake_api):
    """Point the CLI at the fake API and a throwaway session file."""
    from cli import runtime

    monkeypatch.setenv("RULEKEEPER_API_BASE_URL", BASE_URL)
    monkeypatch.setenv("RULEKEEPER_DEFAULT_GUILD_ID", GUILD_ID)
    monkeypatch.setenv("RULEKEEPER_SESSION_FILE", str(tmp_path / "session.json"))
    monkeypatch.setenv("RULEKEEPER_LOG_LEVEL", "WARNING")
    monkeypatch.setattr(
        runtime,
        "open_api",
        lambda settings, session: ApiClient(settings, token_source=session, transport=fake_api.transport()),
    )
    runtime.get_settings.cache_clear()
    yield fake_api
    runtime.get_settings.cache_clear()
