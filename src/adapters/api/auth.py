"""Endpoints `auth/*`."""

from __future__ import annotations

from typing import Any

from adapters.api.base import ApiService, parse_model
from core.domain.models import (
    DiscordCallbackRequest,
    LoginRequest,
    LoginResponse,
    RefreshTokenRequest,
)


class AuthService(ApiService):
    async def login(self, request: LoginRequest) -> LoginResponse:
        data = await self._post("auth/login", request.to_payload())
        return parse_model(LoginResponse, data)

    async def discord_callback(self, request: DiscordCallbackRequest) -> LoginResponse:
        data = await self._post("auth/discord/callback", request.to_payload())
        return parse_model(LoginResponse, data)

    async def refresh(self, request: RefreshTokenRequest) -> LoginResponse:
        data = await self._post("auth/refresh", request.to_payload())
        return parse_model(LoginResponse, data)

    async def verify(self) -> dict[str, Any]:
        return await self._get("auth/verify")

    async def logout(self) -> dict[str, Any]:
        return await self._post("auth/logout")
