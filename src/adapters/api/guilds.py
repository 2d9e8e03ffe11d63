"""Endpoints `guilds/*`: servidores visibles, canales, roles y ajustes generales."""

from __future__ import annotations

from typing import Any

from adapters.api.base import ApiService, parse_list, parse_model, seg
from core.domain.models import Channel, Guild, GuildList, Role


class GuildService(ApiService):
    async def list(self) -> GuildList:
        return parse_model(GuildList, await self._get("guilds"))

    async def get(self, guild_id: str) -> Guild:
        return parse_model(Guild, await self._get(f"guilds/{seg(guild_id)}"))

    async def channels(self, guild_id: str) -> list[Channel]:
        return parse_list(Channel, await self._get(f"guilds/{seg(guild_id)}/channels"))

    async def roles(self, guild_id: str) -> list[Role]:
        roles = parse_list(Role, await self._get(f"guilds/{seg(guild_id)}/roles"))
        return sorted(roles, key=lambda r: r.position, reverse=True)

    async def settings(self, guild_id: str) -> dict[str, Any]:
        return await self._get(f"guilds/{seg(guild_id)}/settings")

    async def update_settings(self, guild_id: str, settings: dict[str, Any]) -> dict[str, Any]:
        return await self._put(f"guilds/{seg(guild_id)}/settings", settings)
