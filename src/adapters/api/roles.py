"""Endpoints `roles/{guild_id}/*`: auto-roles, roles por juego y menús de roles."""

from __future__ import annotations

from typing import Any

from adapters.api.base import ApiService, parse_list, parse_model, seg
from core.domain.models import AutoRole, GameRole, RoleMenu, RoleMenuDraft, RoleMenuUpdate


class RoleService(ApiService):
    def _base(self, guild_id: str) -> str:
        return f"roles/{seg(guild_id)}"

    async def auto_roles(self, guild_id: str) -> list[AutoRole]:
        return parse_list(AutoRole, await self._get(f"{self._base(guild_id)}/auto-roles"))

    async def add_auto_role(self, guild_id: str, role_id: str) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/auto-roles", {"role_id": role_id})

    async def delete_auto_role(self, guild_id: str, role_id: str) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/auto-roles/{seg(role_id)}")

    async def game_roles(self, guild_id: str) -> list[GameRole]:
        return parse_list(GameRole, await self._get(f"{self._base(guild_id)}/game-roles"))

    async def add_game_role(self, guild_id: str, game_name: str, role_id: str) -> dict[str, Any]:
        body = {"game_name": game_name, "role_id": role_id}
        return await self._post(f"{self._base(guild_id)}/game-roles", body)

    async def update_game_role(self, guild_id: str, game_role_id: int, game_name: str, role_id: str) -> dict[str, Any]:
        body = {"game_name": game_name, "role_id": role_id}
        return await self._put(f"{self._base(guild_id)}/game-roles/{int(game_role_id)}", body)

    async def delete_game_role(self, guild_id: str, game_role_id: int) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/game-roles/{int(game_role_id)}")


class RoleMenuService(ApiService):
    def _base(self, guild_id: str) -> str:
        return f"roles/{seg(guild_id)}/role-menus"

    async def list(self, guild_id: str) -> list[RoleMenu]:
        return parse_list(RoleMenu, await self._get(self._base(guild_id)))

    async def get(self, guild_id: str, menu_id: str) -> RoleMenu:
        return parse_model(RoleMenu, await self._get(f"{self._base(guild_id)}/{seg(menu_id)}"))

    async def create(self, guild_id: str, draft: RoleMenuDraft) -> dict[str, Any]:
        return await self._post(self._base(guild_id), draft.to_payload())

    async def update(self, guild_id: str, menu_id: str, update: RoleMenuUpdate) -> dict[str, Any]:
        return await self._put(f"{self._base(guild_id)}/{seg(menu_id)}", update.to_payload())

    async def delete(self, guild_id: str, menu_id: str) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/{seg(menu_id)}")
