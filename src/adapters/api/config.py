"""Endpoints `config/{guild_id}/*`: documentos de configuración del bot."""

from __future__ import annotations

from typing import Any

from adapters.api.base import ApiService, parse_list, parse_model, seg
from core.domain.models import (
    BirthdayConfig,
    GoodbyeConfig,
    LeaderboardEntry,
    LevelConfig,
    LevelReward,
    LogConfig,
    RestoreSettings,
    SpamConfig,
    StoredWarningAction,
    WarningAction,
    WarningActions,
    WelcomeConfig,
)
from core.errors import ResponseFormatError


class ConfigService(ApiService):
    def _base(self, guild_id: str) -> str:
        return f"config/{seg(guild_id)}"

    # logging
    async def logging(self, guild_id: str) -> LogConfig:
        return parse_model(LogConfig, await self._get(f"{self._base(guild_id)}/logging"))

    async def update_logging(self, guild_id: str, config: LogConfig) -> dict[str, Any]:
        return await self._put(f"{self._base(guild_id)}/logging", config.to_payload())

    # welcome / goodbye
    async def welcome(self, guild_id: str) -> WelcomeConfig:
        return parse_model(WelcomeConfig, await self._get(f"{self._base(guild_id)}/welcome"))

    async def update_welcome(self, guild_id: str, config: WelcomeConfig) -> WelcomeConfig:
        data = await self._put(f"{self._base(guild_id)}/welcome", config.to_payload())
        return parse_model(WelcomeConfig, data)

    async def goodbye(self, guild_id: str) -> GoodbyeConfig:
        return parse_model(GoodbyeConfig, await self._get(f"{self._base(guild_id)}/goodbye"))

    async def update_goodbye(self, guild_id: str, config: GoodbyeConfig) -> GoodbyeConfig:
        data = await self._put(f"{self._base(guild_id)}/goodbye", config.to_payload())
        return parse_model(GoodbyeConfig, data)

    # spam
    async def spam(self, guild_id: str) -> SpamConfig:
        return parse_model(SpamConfig, await self._get(f"{self._base(guild_id)}/spam"))

    async def update_spam(self, guild_id: str, config: SpamConfig) -> SpamConfig:
        data = await self._put(f"{self._base(guild_id)}/spam", config.to_payload())
        return parse_model(SpamConfig, data)

    # leveling
    async def leveling(self, guild_id: str) -> LevelConfig:
        return parse_model(LevelConfig, await self._get(f"{self._base(guild_id)}/leveling"))

    async def update_leveling(self, guild_id: str, config: LevelConfig) -> LevelConfig:
        data = await self._put(f"{self._base(guild_id)}/leveling", config.to_payload())
        return parse_model(LevelConfig, data)

    async def leaderboard(self, guild_id: str, *, limit: int = 100) -> list[LeaderboardEntry]:
        data = await self._get(f"{self._base(guild_id)}/leaderboard", params={"limit": limit})
        return parse_list(LeaderboardEntry, data, key="leaderboard")

    async def level_rewards(self, guild_id: str) -> list[LevelReward]:
        data = await self._get(f"{self._base(guild_id)}/level-rewards")
        rewards = data.get("rewards") if isinstance(data, dict) else None
        if not isinstance(rewards, dict):
            raise ResponseFormatError("Expected {'rewards': {level: role_id}}")
        out = [parse_model(LevelReward, {"level": level, "role_id": role}) for level, role in rewards.items()]
        return sorted(out, key=lambda r: r.level)

    async def add_level_reward(self, guild_id: str, reward: LevelReward) -> dict[str, Any]:
        return await self._post(f"{self._base(guild_id)}/level-rewards", reward.to_payload())

    async def delete_level_reward(self, guild_id: str, level: int) -> dict[str, Any]:
        return await self._delete(f"{self._base(guild_id)}/level-rewards/{int(level)}")

    # birthdays
    async def birthdays(self, guild_id: str) -> BirthdayConfig:
        return parse_model(BirthdayConfig, await self._get(f"{self._base(guild_id)}/birthdays"))

    async def update_birthdays(self, guild_id: str, config: BirthdayConfig) -> dict[str, Any]:
        return await self._put(f"{self._base(guild_id)}/birthdays", config.to_payload())

    # warning actions
    async def warning_actions(self, guild_id: str) -> list[StoredWarningAction]:
        data = await self._get(f"{self._base(guild_id)}/warning-actions")
        actions = parse_model(WarningActions, data).actions
        return sorted(actions, key=lambda a: a.warning_count)

    async def update_warning_actions(self, guild_id: str, actions: list[WarningAction]) -> dict[str, Any]:
        body = {"actions": [action.to_payload() for action in actions]}
        return await self._put(f"{self._base(guild_id)}/warning-actions", body)

    # restore settings
    async def restore_settings(self, guild_id: str) -> RestoreSettings:
        data = await self._get(f"{self._base(guild_id)}/restore-settings")
        if isinstance(data, dict):
            data = {**data, "guild_id": data.get("guild_id") or guild_id}
        return parse_model(RestoreSettings, data)

    async def update_restore_settings(self, guild_id: str, settings: RestoreSettings) -> dict[str, Any]:
        return await self._put(f"{self._base(guild_id)}/restore-settings", settings.to_payload())
