"""Endpoints `users/{guild_id}/*`: miembros, XP, cumpleaños y restauración de datos."""

from __future__ import annotations

from typing import Any

from adapters.api.base import ApiService, parse_list, parse_model, seg
from core.domain.leveling import XP_OPERATIONS
from core.domain.models import Birthday, MemberRecord
from core.errors import InvalidInputError


class UsersService(ApiService):
    def _base(self, guild_id: str) -> str:
        return f"users/{seg(guild_id)}"

    async def list(self, guild_id: str, *, params: dict[str, Any] | None = None) -> list[MemberRecord]:
        data = await self._get(f"{self._base(guild_id)}/users", params=params)
        return parse_list(MemberRecord, data, key="users")

    async def get(self, guild_id: str, user_id: str) -> MemberRecord:
        data = await self._get(f"{self._base(guild_id)}/users/{seg(user_id)}")
        # Algunas versiones del backend envuelven el registro en {"user": {...}}.
        if isinstance(data, dict) and isinstance(data.get("user"), dict):
            data = {**data["user"], **{k: v for k, v in data.items() if k != "user"}}
        return parse_model(MemberRecord, data)

    async def update(self, guild_id: str, user_id: str, update: dict[str, Any]) -> dict[str, Any]:
        return await self._put(f"{self._base(guild_id)}/users/{seg(user_id)}", update)

    async def delete_data(self, guild_id: str, user_id: str) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/users/{seg(user_id)}")

    async def modify_xp(self, guild_id: str, user_id: str, operation: str, amount: int) -> dict[str, Any]:
        if operation not in XP_OPERATIONS:
            raise InvalidInputError(f"Unknown XP operation: {operation}")
        body = {"operation": operation, "amount": amount}
        return await self._post(f"{self._base(guild_id)}/users/{seg(user_id)}/xp", body)

    async def restore(self, guild_id: str, user_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/users/{seg(user_id)}/restore", data)

    async def birthdays(self, guild_id: str) -> list[Birthday]:
        return parse_list(Birthday, await self._get(f"{self._base(guild_id)}/birthdays"))

    async def set_birthday(self, guild_id: str, birthday: Birthday) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/birthdays", birthday.to_payload())

    async def delete_birthday(self, guild_id: str, user_id: str) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/birthdays/{seg(user_id)}")
