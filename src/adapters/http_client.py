"""Wrapper de httpx.

Estandariza timeouts, headers, autenticación bearer y logging de las llamadas a
la API del bot.
"""

from __future__ import annotations

import logging
from typing import Generator

import httpx

from core.config import AppSettings
from core.interfaces.token_source import TokenSource

logger = logging.getLogger(__name__)


class BearerTokenAuth(httpx.Auth):
    """Añade `Authorization: Bearer <token>` si hay token en el momento del envío."""

    def __init__(self, token_source: TokenSource) -> None:
        self._token_source = token_source

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self._token_source.get_access_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


def _logging_hooks(settings: AppSettings) -> dict[str, list]:
    async def log_request(request: httpx.Request) -> None:
        logger.debug("--> %s %s", request.method, request.url)
        if settings.log_http_bodies and request.content:
            logger.debug("    body: %s", request.content.decode("utf-8", errors="replace"))

    async def log_response(response: httpx.Response) -> None:
        request = response.request
        logger.debug("<-- %s %s %s", response.status_code, request.method, request.url)
        if settings.log_http_bodies:
            await response.aread()
            logger.debug("    body: %s", response.text)

    return {"request": [log_request], "response": [log_response]}


def build_async_client(
    settings: AppSettings | None = None,
    *,
    token_source: TokenSource | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando a la API de RuleKeeper.

    - `base_url` = `settings.api_base_url` (las rutas de los servicios son relativas)
    - `transport` permite inyectar `httpx.MockTransport` en tests
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        auth=BearerTokenAuth(token_source) if token_source is not None else None,
        event_hooks=_logging_hooks(settings),
        transport=transport,
    )
