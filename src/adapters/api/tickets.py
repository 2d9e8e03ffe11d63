"""Endpoints `tickets/{guild_id}/*`: menús de tickets, tickets abiertos y transcripciones."""

from __future__ import annotations

from typing import Any

from adapters.api.base import ApiService, parse_list, seg
from core.domain.models import Ticket


class TicketsService(ApiService):
    def _base(self, guild_id: str) -> str:
        return f"tickets/{seg(guild_id)}"

    async def menus(self, guild_id: str) -> list[dict[str, Any]]:
        return await self._get(f"{self._base(guild_id)}/menus")

    async def menu(self, guild_id: str, menu_id: int) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/menus/{int(menu_id)}")

    async def create_menu(self, guild_id: str, menu: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/menus", menu)

    async def update_menu(self, guild_id: str, menu_id: int, menu: dict[str, Any]) -> dict[str, Any]:
        return await self._put(f"{self._base(guild_id)}/menus/{int(menu_id)}", menu)

    async def delete_menu(self, guild_id: str, menu_id: int) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/menus/{int(menu_id)}")

    async def tickets(self, guild_id: str) -> list[Ticket]:
        return parse_list(Ticket, await self._get(f"{self._base(guild_id)}/tickets"))

    async def transcripts(self, guild_id: str) -> list[dict[str, Any]]:
        return await self._get(f"{self._base(guild_id)}/transcripts")

    async def transcript(self, guild_id: str, transcript_id: int) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/transcripts/{int(transcript_id)}")
