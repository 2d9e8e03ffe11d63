"""Flujo de autenticación sobre los endpoints `auth/*`.

Login, callback OAuth de Discord, refresco de tokens y logout, manteniendo el
`SessionStore` local al día con lo que devuelve la API.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from adapters.api.auth import AuthService
from core.domain.models import (
    DiscordCallbackRequest,
    LoginRequest,
    LoginResponse,
    RefreshTokenRequest,
)
from core.errors import DashboardError, NotAuthenticatedError
from core.session import SessionStore

logger = logging.getLogger(__name__)


class AuthFlow:
    def __init__(self, auth: AuthService, session: SessionStore) -> None:
        self._auth = auth
        self._session = session

    def _persist(self, response: LoginResponse) -> None:
        # Sin el par completo de tokens (MFA pendiente, URL OAuth) no se toca la sesión.
        access, refresh = response.access_token, response.refresh_token
        if not (access and refresh):
            return
        self._session.save_tokens(access, refresh)
        if response.user is not None:
            self._session.save_user(response.user)
        logger.info("Session stored for %s", response.user.username if response.user else "unknown user")

    async def login(
        self,
        username: str,
        password: str,
        *,
        use_discord: bool = False,
        redirect_uri: str | None = None,
    ) -> LoginResponse:
        request = LoginRequest(
            username=username,
            password=password,
            use_discord=use_discord,
            redirect_uri=redirect_uri,
            is_mobile=False,
        )
        response = await self._auth.login(request)
        self._persist(response)
        return response

    async def discord_callback(self, code: str, *, redirect_uri: str | None = None) -> LoginResponse:
        response = await self._auth.discord_callback(DiscordCallbackRequest(code=code, redirect_uri=redirect_uri))
        self._persist(response)
        return response

    async def refresh(self) -> LoginResponse:
        refresh_token = self._session.get_refresh_token()
        if not refresh_token:
            raise NotAuthenticatedError("No refresh token stored; run `rkdash auth login` first")
        response = await self._auth.refresh(RefreshTokenRequest(refresh_token=refresh_token))
        if response.access_token:
            # El backend no rota el refresh token: se conserva el anterior.
            self._session.save_tokens(response.access_token, refresh_token)
        return response

    async def verify(self) -> dict[str, Any]:
        if not self._session.is_authenticated:
            raise NotAuthenticatedError("Not logged in")
        return await self._auth.verify()

    async def logout(self) -> None:
        """Cierra sesión en el servidor (best effort) y borra siempre la sesión local."""

        try:
            if self._session.is_authenticated:
                await self._auth.logout()
        except (DashboardError, httpx.HTTPError) as exc:
            logger.info("Server-side logout failed, clearing local session anyway: %s", exc)
        finally:
            self._session.clear()
