"""Tests for adapters/http_client.py"""

import httpx

from adapters.http_client import build_async_client
from core.interfaces.token_source import StaticTokenSource, TokenSource
from core.session import SessionStore


def _recording_transport(seen):
    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={})

    return httpx.MockTransport(handler)


class TestBuildAsyncClient:
    async def test_base_url_and_headers(self, settings):
        seen = []
        async with build_async_client(settings, transport=_recording_transport(seen)) as client:
            await client.get("guilds")

        request = seen[0]
        assert str(request.url) == "https://api.test/api/v1/guilds"
        assert request.headers["User-Agent"] == settings.user_agent
        assert request.headers["Accept"] == "application/json"
        assert "Authorization" not in request.headers

    async def test_bearer_token(self, settings):
        seen = []
        client = build_async_client(
            settings, token_source=StaticTokenSource("abc"), transport=_recording_transport(seen)
        )
        async with client:
            await client.get("auth/verify")

        assert seen[0].headers["Authorization"] == "Bearer abc"

    async def test_empty_token_sends_no_header(self, settings):
        seen = []
        client = build_async_client(settings, token_source=StaticTokenSource(None), transport=_recording_transport(seen))
        async with client:
            await client.get("guilds")

        assert "Authorization" not in seen[0].headers

    async def test_token_is_read_per_request(self, settings, session):
        """A login between two calls is picked up without rebuilding the client."""
        seen = []
        client = build_async_client(settings, token_source=session, transport=_recording_transport(seen))
        async with client:
            await client.get("guilds")
            session.save_tokens("fresh", "r")
            await client.get("guilds")

        assert "Authorization" not in seen[0].headers
        assert seen[1].headers["Authorization"] == "Bearer fresh"

    async def test_extra_headers(self, settings):
        seen = []
        client = build_async_client(settings, transport=_recording_transport(seen), extra_headers={"X-Test": "1"})
        async with client:
            await client.get("guilds")

        assert seen[0].headers["X-Test"] == "1"

    def test_timeout_from_settings(self, settings):
        client = build_async_client(settings.model_copy(update={"http_timeout_seconds": 5.0}))
        assert client.timeout.read == 5.0


class TestTokenSources:
    def test_session_store_is_a_token_source(self, tmp_path):
        assert isinstance(SessionStore(tmp_path / "s.json"), TokenSource)

    def test_static_token_source(self):
        assert isinstance(StaticTokenSource("x"), TokenSource)
