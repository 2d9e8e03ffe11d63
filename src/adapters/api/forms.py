"""Endpoints `forms/{guild_id}/forms/*`: formularios y sus envíos."""

from __future__ import annotations

from typing import Any

from adapters.api.base import ApiService, parse_list, seg
from core.domain.models import FormSummary


class FormsService(ApiService):
    def _base(self, guild_id: str) -> str:
        return f"forms/{seg(guild_id)}/forms"

    async def list(self, guild_id: str) -> list[FormSummary]:
        return parse_list(FormSummary, await self._get(self._base(guild_id)), key="forms")

    async def get(self, guild_id: str, form_id: str) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/{seg(form_id)}")

    async def create(self, guild_id: str, form: dict[str, Any]) -> dict[str, Any]:
        return await self._post(self._base(guild_id), form)

    async def update(self, guild_id: str, form_id: str, form: dict[str, Any]) -> dict[str, Any]:
        return await self._put(f"{self._base(guild_id)}/{seg(form_id)}", form)

    async def delete(self, guild_id: str, form_id: str) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/{seg(form_id)}")

    async def submissions(self, guild_id: str, form_id: str) -> list[dict[str, Any]]:
        return await self._get(f"{self._base(guild_id)}/{seg(form_id)}/submissions")

    async def submission(self, guild_id: str, form_id: str, submission_id: str) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/{seg(form_id)}/submissions/{seg(submission_id)}")

    async def delete_submission(self, guild_id: str, form_id: str, submission_id: str) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/{seg(form_id)}/submissions/{seg(submission_id)}")

    async def export_submissions(self, guild_id: str, form_id: str) -> dict[str, Any]:
        return await self._get(f"{self._base(guild_id)}/{seg(form_id)}/export")
