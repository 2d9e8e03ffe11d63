"""Tests for the form editors in core/services/"""

import pytest

from core.domain.models import BackupSchedule, LevelConfig, LogConfig, RestoreSettings, Role, WarningAction, WelcomeConfig
from core.errors import InvalidInputError
from core.services.backup_schedules import ScheduleDraft, describe, toggle_payload
from core.services.config_edit import apply_updates, parse_assignments
from core.services.restore_settings import clear_excluded, exclude_all, toggle_excluded_role
from core.services.warning_actions import WarningActionDraft, build_actions, drafts_from_actions


class TestWarningActionDraft:
    def test_parse_with_duration(self):
        draft = WarningActionDraft.parse("3:Timeout:1h")
        assert draft == WarningActionDraft(warning_count="3", action="timeout", duration="1h")

    def test_parse_without_duration(self):
        assert WarningActionDraft.parse("5:kick").duration == ""

    @pytest.mark.parametrize("spec", ["5", "1:2:3:4", ""])
    def test_parse_rejects_bad_shape(self, spec):
        with pytest.raises(InvalidInputError):
            WarningActionDraft.parse(spec)


class TestBuildActions:
    """Draft rows to WarningAction list."""

    def test_valid_rows(self):
        actions = build_actions(
            [
                WarningActionDraft("3", "timeout", "1h"),
                WarningActionDraft("5", "kick", ""),
                WarningActionDraft("7", "ban", "ignored"),
            ]
        )

        assert [(a.warning_count, a.action, a.duration_seconds) for a in actions] == [
            (3, "timeout", 3600),
            (5, "kick", None),
            (7, "ban", None),
        ]

    @pytest.mark.parametrize(
        "draft",
        [
            WarningActionDraft("", "kick", ""),
            WarningActionDraft("abc", "kick", ""),
            WarningActionDraft("0", "kick", ""),
            WarningActionDraft("-2", "ban", ""),
            WarningActionDraft("3", "", ""),
            WarningActionDraft("3", "   ", ""),
        ],
    )
    def test_incomplete_rows_are_skipped(self, draft):
        assert build_actions([draft]) == []

    def test_timeout_needs_duration(self):
        with pytest.raises(InvalidInputError, match="Timeout actions require a duration"):
            build_actions([WarningActionDraft("3", "timeout", "  ")])

    def test_timeout_duration_must_parse(self):
        with pytest.raises(InvalidInputError, match="Invalid duration format: soon"):
            build_actions([WarningActionDraft("3", "timeout", "soon")])

    def test_zero_timeout_rejected(self):
        with pytest.raises(InvalidInputError, match="Invalid duration format"):
            build_actions([WarningActionDraft("3", "timeout", "0m")])

    def test_unknown_action(self):
        with pytest.raises(InvalidInputError, match="Unknown action"):
            build_actions([WarningActionDraft("3", "mute", "")])

    def test_drafts_round_trip(self):
        actions = [WarningAction(warning_count=2, action="timeout", duration_seconds=86400)]

        drafts = drafts_from_actions(actions)

        assert drafts == [WarningActionDraft("2", "timeout", "1d")]
        assert build_actions(drafts) == actions

    def test_empty_table_shows_one_blank_row(self):
        assert drafts_from_actions([]) == [WarningActionDraft()]


class TestScheduleDraft:
    def test_defaults_payload(self):
        assert ScheduleDraft().to_payload() == {
            "frequency": "days",
            "frequency_value": 1,
            "frequency_unit": "days",
            "time": "00:00",
            "start_time": "00:00",
            "max_backups": 7,
            "timezone": "UTC",
        }

    @pytest.mark.parametrize(
        "changes,message",
        [
            ({"frequency_value": 0}, "Frequency"),
            ({"frequency_unit": "hours"}, "Unknown frequency unit"),
            ({"start_time": "24:00"}, "HH:MM"),
            ({"start_time": "7:30"}, "HH:MM"),
            ({"max_backups": 0}, "Max backups"),
            ({"timezone": " "}, "Timezone"),
        ],
    )
    def test_validation(self, changes, message):
        draft = ScheduleDraft(**changes)
        with pytest.raises(InvalidInputError, match=message):
            draft.to_payload()

    def test_from_schedule(self):
        schedule = BackupSchedule(id=1, frequency_value=2, frequency_unit="weeks", start_time="03:15", max_backups=4)

        draft = ScheduleDraft.from_schedule(schedule)

        assert draft == ScheduleDraft(2, "weeks", "03:15", 4, "UTC")

    def test_toggle_payload_inverts(self):
        assert toggle_payload(BackupSchedule(id=1, enabled=1)) == {"enabled": 0}
        assert toggle_payload(BackupSchedule(id=1, enabled=0)) == {"enabled": 1}

    def test_describe(self):
        schedule = BackupSchedule(id=1, frequency_value=3, frequency_unit="days", start_time="12:00", timezone="UTC")
        assert describe(schedule) == "Every 3 days at 12:00 (UTC)"


class TestConfigEdit:
    def test_parse_assignments(self):
        assert parse_assignments(["a=1", " b = x=y "]) == {"a": "1", "b": "x=y"}

    @pytest.mark.parametrize("item", ["novalue", "=1"])
    def test_parse_assignments_rejects(self, item):
        with pytest.raises(InvalidInputError):
            parse_assignments([item])

    def test_scalar_and_bool_fields(self):
        updated = apply_updates(WelcomeConfig(), ["enabled=true", "channel_id=55", "embed_color=255"])

        assert updated.enabled is True
        assert updated.channel_id == "55"
        assert updated.embed_color == 255

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("ON", True), ("1", True), ("False", False), ("off", False), ("0", False)],
    )
    def test_bool_words(self, raw, expected):
        updated = apply_updates(WelcomeConfig(enabled=not expected), [f"enabled={raw}"])
        assert updated.enabled is expected

    @pytest.mark.parametrize("raw", ["yes", "ture", "", "2"])
    def test_unrecognised_bool_is_rejected(self, raw):
        """A typo must not silently switch a feature off."""
        with pytest.raises(InvalidInputError, match="enabled"):
            apply_updates(WelcomeConfig(enabled=True), [f"enabled={raw}"])

    def test_id_list_fields_accept_commas(self):
        updated = apply_updates(LogConfig(), ["excluded_roles=1, 2,3"])
        assert updated.excluded_roles == ["1", "2", "3"]

    def test_null_word_resets_optional_field(self):
        updated = apply_updates(WelcomeConfig(channel_id="55"), ["channel_id=none"])
        assert updated.channel_id is None

    def test_original_is_untouched(self):
        original = LevelConfig()
        apply_updates(original, ["cooldown=5"])
        assert original.cooldown == 60

    def test_unknown_field(self):
        with pytest.raises(InvalidInputError, match="Unknown field"):
            apply_updates(WelcomeConfig(), ["colour=1"])

    def test_bad_value(self):
        with pytest.raises(InvalidInputError, match="cooldown"):
            apply_updates(LevelConfig(), ["cooldown=soon"])

    def test_model_rule_violation(self):
        with pytest.raises(InvalidInputError, match="xp_min"):
            apply_updates(LevelConfig(), ["xp_min=50", "xp_max=10"])


class TestRestoreSettingsEditor:
    def test_toggle_adds_then_removes(self):
        settings = RestoreSettings(guild_id="1", excluded_roles=["a"])

        added = toggle_excluded_role(settings, "b")
        removed = toggle_excluded_role(added, "a")

        assert added.excluded_roles == ["a", "b"]
        assert removed.excluded_roles == ["b"]
        assert settings.excluded_roles == ["a"]

    def test_exclude_all(self):
        roles = [Role(id="1", name="one"), Role(id="2", name="two")]
        assert exclude_all(RestoreSettings(guild_id="1"), roles).excluded_roles == ["1", "2"]

    def test_clear(self):
        assert clear_excluded(RestoreSettings(guild_id="1", excluded_roles=["x"])).excluded_roles == []

    def test_wire_format_after_edit(self):
        edited = toggle_excluded_role(RestoreSettings(guild_id="1"), "9")
        assert edited.to_payload()["excluded_roles"] == '["9"]'
