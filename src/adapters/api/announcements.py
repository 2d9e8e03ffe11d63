"""Endpoints `{twitch,youtube}/{guild_id}/announcements`.

Ambos recursos tienen la misma forma; solo cambian el prefijo y los modelos.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel

from adapters.api.base import ApiService, parse_list, seg
from core.domain.models import (
    ApiModel,
    TwitchAnnouncement,
    TwitchAnnouncementDraft,
    TwitchAnnouncementUpdate,
    YouTubeAnnouncement,
    YouTubeAnnouncementDraft,
    YouTubeAnnouncementUpdate,
)

AnnouncementT = TypeVar("AnnouncementT", bound=BaseModel)


class AnnouncementService(ApiService, Generic[AnnouncementT]):
    def __init__(self, http: httpx.AsyncClient, *, prefix: str, model: type[AnnouncementT]) -> None:
        super().__init__(http)
        self.prefix = prefix
        self._model = model

    def _base(self, guild_id: str) -> str:
        return f"{self.prefix}/{seg(guild_id)}/announcements"

    async def list(self, guild_id: str) -> list[AnnouncementT]:
        return parse_list(self._model, await self._get(self._base(guild_id)), key="announcements")

    async def add(self, guild_id: str, draft: ApiModel) -> dict[str, Any]:
        return await self._post(self._base(guild_id), draft.to_payload())

    async def update(self, guild_id: str, announcement_id: int, update: ApiModel) -> dict[str, Any]:
        return await self._put(f"{self._base(guild_id)}/{int(announcement_id)}", update.to_payload())

    async def set_enabled(self, guild_id: str, announcement_id: int, enabled: bool) -> dict[str, Any]:
        update_model = TwitchAnnouncementUpdate if self.prefix == "twitch" else YouTubeAnnouncementUpdate
        return await self.update(guild_id, announcement_id, update_model(enabled=enabled))

    async def delete(self, guild_id: str, announcement_id: int) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/{int(announcement_id)}")


def twitch_service(http: httpx.AsyncClient) -> AnnouncementService[TwitchAnnouncement]:
    return AnnouncementService(http, prefix="twitch", model=TwitchAnnouncement)


def youtube_service(http: httpx.AsyncClient) -> AnnouncementService[YouTubeAnnouncement]:
    return AnnouncementService(http, prefix="youtube", model=YouTubeAnnouncement)


DRAFT_MODELS: dict[str, tuple[type[ApiModel], type[ApiModel]]] = {
    "twitch": (TwitchAnnouncementDraft, TwitchAnnouncementUpdate),
    "youtube": (YouTubeAnnouncementDraft, YouTubeAnnouncementUpdate),
}
