"""Endpoints `permissions/{guild_id}/permissions/*`: permisos por comando."""

from __future__ import annotations

from typing import Any

from adapters.api.base import ApiService, seg


class PermissionsService(ApiService):
    def _base(self, guild_id: str) -> str:
        return f"permissions/{seg(guild_id)}/permissions"

    async def list(self, guild_id: str) -> list[dict[str, Any]]:
        return await self._get(self._base(guild_id))

    async def get(self, guild_id: str, command_name: str) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/{seg(command_name)}")

    async def update(self, guild_id: str, command_name: str, permission: dict[str, Any]) -> dict[str, Any]:
        return await self._put(f"{self._base(guild_id)}/{seg(command_name)}", permission)

    async def reset(self, guild_id: str, command_name: str) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/{seg(command_name)}")

    async def add_role(self, guild_id: str, command_name: str, role_id: str) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/{seg(command_name)}/roles", {"role_id": role_id})

    async def add_channel(self, guild_id: str, command_name: str, channel_id: str) -> dict[str, Any]:
        body = {"channel_id": channel_id}
        return await self._post(f"{self._base(guild_id)}/{seg(command_name)}/channels", body)

    async def bulk_update(self, guild_id: str, permissions: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/bulk", permissions)

    async def export(self, guild_id: str) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/export")

    async def import_(self, guild_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/import", data)
