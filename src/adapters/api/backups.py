"""Endpoints `backups/{guild_id}/*`: copias de seguridad y sus programaciones."""

from __future__ import annotations

from typing import Any

from adapters.api.base import ApiService, parse_list, parse_model, seg
from core.domain.models import Backup, BackupSchedule
from core.errors import NotFoundError


class BackupsService(ApiService):
    def _base(self, guild_id: str) -> str:
        return f"backups/{seg(guild_id)}"

    async def list(self, guild_id: str) -> list[Backup]:
        backups = parse_list(Backup, await self._get(self._base(guild_id)))
        return sorted(backups, key=lambda b: b.created_at, reverse=True)

    async def create(self, guild_id: str) -> dict[str, Any]:
        return await self._post(self._base(guild_id))

    async def get(self, guild_id: str, backup_id: str) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/{seg(backup_id)}")

    async def delete(self, guild_id: str, backup_id: str) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/{seg(backup_id)}")

    async def download(self, guild_id: str, backup_id: str) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/{seg(backup_id)}/download")

    async def restore(self, guild_id: str, backup_id: str) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/{seg(backup_id)}/restore")

    async def share(self, guild_id: str, backup_id: str) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/{seg(backup_id)}/share")

    async def schedules(self, guild_id: str) -> list[BackupSchedule]:
        return parse_list(BackupSchedule, await self._get(f"{self._base(guild_id)}/schedules"))

    async def schedule(self, guild_id: str, schedule_id: int) -> BackupSchedule:
        for item in await self.schedules(guild_id):
            if item.id == schedule_id:
                return item
        raise NotFoundError(f"Backup schedule {schedule_id} not found")

    async def create_schedule(self, guild_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/schedules", payload)

    async def update_schedule(self, guild_id: str, schedule_id: int, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._put(f"{self._base(guild_id)}/schedules/{int(schedule_id)}", payload)

    async def delete_schedule(self, guild_id: str, schedule_id: int) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/schedules/{int(schedule_id)}")
