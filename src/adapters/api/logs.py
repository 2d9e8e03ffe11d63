"""Endpoints `logs/{guild_id}/logs/*`: registro de eventos del servidor."""

from __future__ import annotations

from typing import Any

from adapters.api.base import ApiService, parse_list, seg
from core.domain.models import ServerLogEntry


class LogsService(ApiService):
    def _base(self, guild_id: str) -> str:
        return f"logs/{seg(guild_id)}/logs"

    async def list(self, guild_id: str, *, log_type: str | None = None, limit: int = 100) -> list[ServerLogEntry]:
        data = await self._get(self._base(guild_id), params={"type": log_type, "limit": str(limit)})
        return parse_list(ServerLogEntry, data, key="logs")

    async def types(self, guild_id: str) -> list[str]:
        data = await self._get(f"{self._base(guild_id)}/types")
        types = data.get("types") if isinstance(data, dict) else data
        return [str(t) for t in types or []]

    async def detail(self, guild_id: str, log_id: str) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/{seg(log_id)}")

    async def stats(self, guild_id: str, *, days: int = 7) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/stats", params={"days": days})

    async def export(self, guild_id: str, *, log_type: str | None = None) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/export", params={"type": log_type})
