"""Endpoints `commands/*`: comandos personalizados por servidor."""

from __future__ import annotations

from typing import Any

from adapters.api.base import ApiService, parse_list, seg
from core.domain.models import CommandDraft, GuildCommand


class CommandService(ApiService):
    def _base(self, guild_id: str) -> str:
        return f"commands/{seg(guild_id)}"

    async def list(self, guild_id: str, *, include_builtin: bool = False) -> list[GuildCommand]:
        data = await self._get(
            self._base(guild_id),
            params={"include_builtin": "true" if include_builtin else "false"},
        )
        return parse_list(GuildCommand, data)

    async def create(self, guild_id: str, draft: CommandDraft) -> dict[str, Any]:
        return await self._post(self._base(guild_id), draft.to_payload())

    async def update(self, guild_id: str, command_name: str, draft: CommandDraft) -> dict[str, Any]:
        return await self._put(f"{self._base(guild_id)}/{seg(command_name)}", draft.to_payload())

    async def delete(self, guild_id: str, command_name: str) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/{seg(command_name)}")

    async def sync(self, guild_id: str) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/sync")

    async def export(self, guild_id: str) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/export")

    async def import_(self, guild_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/import", data)

    async def delete_all(self, guild_id: str) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/delete-all")
