"""Endpoints `moderation/{guild_id}/*`: avisos, bans y palabras bloqueadas."""

from __future__ import annotations

from typing import Any

from adapters.api.base import ApiService, parse_list, seg
from core.domain.models import Ban, BlockedWord, MemberWarning


class ModerationService(ApiService):
    def _base(self, guild_id: str) -> str:
        return f"moderation/{seg(guild_id)}"

    async def warnings(self, guild_id: str) -> list[MemberWarning]:
        return parse_list(MemberWarning, await self._get(f"{self._base(guild_id)}/warnings"))

    async def user_warnings(self, guild_id: str, user_id: str) -> list[MemberWarning]:
        data = await self._get(f"{self._base(guild_id)}/warnings/{seg(user_id)}")
        return parse_list(MemberWarning, data)

    async def add_warning(self, guild_id: str, user_id: str, reason: str) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/warnings/{seg(user_id)}", {"reason": reason})

    async def delete_warning(self, guild_id: str, warning_id: str) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/warnings/{seg(warning_id)}")

    async def bans(self, guild_id: str) -> list[Ban]:
        return parse_list(Ban, await self._get(f"{self._base(guild_id)}/bans"), key="bans")

    async def blocked_words(self, guild_id: str) -> list[BlockedWord]:
        data = await self._get(f"{self._base(guild_id)}/blocked-words")
        if isinstance(data, list):
            # Entradas sin `word` no se pueden mostrar ni borrar por nombre.
            data = [item for item in data if isinstance(item, dict) and isinstance(item.get("word"), str)]
        return parse_list(BlockedWord, data)

    async def add_blocked_word(self, guild_id: str, word: str) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/blocked-words", {"word": word})

    async def delete_blocked_word(self, guild_id: str, word_id: int) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/blocked-words/{int(word_id)}")
