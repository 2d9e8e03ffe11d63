"""Tests for core/domain/models.py"""

import pytest
from pydantic import ValidationError

from core.domain.models import (
    Ban,
    BirthdayConfig,
    GoodbyeConfig,
    Guild,
    LevelConfig,
    LoginResponse,
    MemberWarning,
    RestoreSettings,
    StoredWarningAction,
    TwitchAnnouncementUpdate,
    WarningAction,
    WelcomeConfig,
)


class TestApiModel:
    """Shared behaviour of every wire model."""

    def test_nulls_fall_back_to_defaults(self):
        ban = Ban.model_validate({"user_id": "1", "username": None, "reason": None})

        assert ban.username == "Unknown"
        assert ban.reason is None

    def test_numeric_ids_become_strings(self):
        guild = Guild.model_validate({"guild_id": 123456789012345678, "name": "Test"})

        assert guild.guild_id == "123456789012345678"

    def test_unknown_keys_are_ignored(self):
        warning = MemberWarning.model_validate({"id": 1, "user_id": 2, "brand_new_field": True})

        assert warning.id == "1"
        assert not hasattr(warning, "brand_new_field")

    def test_payload_omits_none(self):
        assert TwitchAnnouncementUpdate(enabled=False).to_payload() == {"enabled": False}

    def test_payload_can_keep_none(self):
        payload = TwitchAnnouncementUpdate(enabled=True).to_payload(exclude_none=False)

        assert payload["message"] is None
        assert payload["enabled"] is True


class TestWarningAction:
    def test_timeout_requires_duration(self):
        with pytest.raises(ValidationError, match="duration_seconds"):
            WarningAction(warning_count=3, action="timeout")

    def test_kick_without_duration(self):
        action = WarningAction(warning_count=5, action="kick")

        assert action.to_payload() == {"warning_count": 5, "action": "kick"}

    def test_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            WarningAction(warning_count=0, action="ban")

    def test_unknown_action(self):
        with pytest.raises(ValidationError):
            WarningAction(warning_count=1, action="mute")

    def test_stored_rows_are_read_leniently(self):
        """Rows already on the server are shown as-is, even ones the editor would refuse."""
        stored = StoredWarningAction.model_validate({"warning_count": 0, "action": "mute", "duration_seconds": 0})

        assert (stored.warning_count, stored.action, stored.duration_seconds) == (0, "mute", 0)


class TestConfigDefaults:
    def test_welcome_and_goodbye_colors(self):
        assert WelcomeConfig().embed_color == 0x00FF00
        assert GoodbyeConfig().embed_color == 0xFF0000

    def test_level_config_range(self):
        with pytest.raises(ValidationError, match="xp_min"):
            LevelConfig(xp_min=30, xp_max=10)

    def test_birthday_payload_is_string_map(self):
        payload = BirthdayConfig(enabled=True, channel_id="9").to_payload()

        assert payload == {"enabled": "true", "channel_id": "9", "role_id": ""}

    def test_restore_settings_defaults(self):
        settings = RestoreSettings(guild_id="1")

        assert settings.restore_roles and settings.restore_xp and settings.restore_nickname
        assert settings.excluded_roles == []


class TestLoginResponse:
    def test_has_tokens(self):
        assert LoginResponse(access_token="a", refresh_token="r").has_tokens

    def test_missing_refresh_token(self):
        assert not LoginResponse(access_token="a").has_tokens

    def test_mfa_flag_from_int(self):
        assert LoginResponse.model_validate({"requires_mfa": 1}).requires_mfa is True
