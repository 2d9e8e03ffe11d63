"""End-to-end tests of the `rkdash` commands against the fake API."""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app

G = "111"

runner = CliRunner()


def invoke(*args):
    return runner.invoke(app, list(args))


def invoke_with_input(text, *args):
    return runner.invoke(app, list(args), input=text)


def _route(request):
    return request.method, request.url.path.split("/api/v1/", 1)[-1]


class TestTools:
    """Offline helpers need neither a session nor the API."""

    def test_duration(self):
        result = invoke("tools", "duration", "2h")

        assert result.exit_code == 0
        assert "7200 seconds = 2h" in result.output

    def test_invalid_duration(self):
        result = invoke("tools", "duration", "soon")

        assert result.exit_code == 1
        assert "Invalid duration format" in result.output

    def test_level_progress(self):
        result = invoke("tools", "level-progress", "1", "150")

        assert result.exit_code == 0
        assert "XP to go" in result.output


class TestGuildsAndErrors:
    def test_list_guilds(self, cli_env):
        cli_env.add("GET", "guilds", {"guilds": [{"guild_id": 123, "name": "Lounge", "has_bot": 1}], "total": 1})

        result = invoke("guilds", "list")

        assert result.exit_code == 0
        assert "Lounge" in result.output

    def test_list_guilds_json(self, cli_env):
        cli_env.add("GET", "guilds", {"guilds": [], "total": 0})

        result = invoke("guilds", "list", "--json")

        assert result.exit_code == 0
        assert json.loads(result.output) == {"guilds": [], "total": 0}

    def test_unauthorized_shows_login_hint(self, cli_env):
        cli_env.add("GET", "guilds", {"detail": "Invalid token"}, status=401)

        result = invoke("guilds", "list")

        assert result.exit_code == 1
        assert "Invalid token" in result.output
        assert "Session expired" in result.output

    def test_missing_guild_is_rejected(self, cli_env, monkeypatch):
        monkeypatch.setenv("RULEKEEPER_DEFAULT_GUILD_ID", "")

        result = invoke("moderation", "bans")

        assert result.exit_code != 0
        assert cli_env.requests == []

    def test_explicit_guild_overrides_default(self, cli_env):
        cli_env.add("GET", "moderation/999/bans", {"bans": []})

        result = invoke("moderation", "bans", "--guild", "999")

        assert result.exit_code == 0
        assert len(cli_env.calls("GET", "moderation/999/bans")) == 1


class TestModeration:
    def test_warn_reloads_member_warnings(self, cli_env):
        cli_env.add("POST", f"moderation/{G}/warnings/222", {"success": True})
        cli_env.add("GET", f"moderation/{G}/warnings/222", [{"id": 1, "user_id": 222, "reason": "spam"}])

        result = invoke("moderation", "warn", "222", "--reason", "spam")

        assert result.exit_code == 0
        assert "Warned 222" in result.output
        assert cli_env.body("POST", f"moderation/{G}/warnings/222") == {"reason": "spam"}
        assert len(cli_env.calls("GET", f"moderation/{G}/warnings/222")) == 1

    def test_set_warning_actions(self, cli_env):
        cli_env.add("PUT", f"config/{G}/warning-actions", {"success": True})
        cli_env.add(
            "GET",
            f"config/{G}/warning-actions",
            {"actions": [{"warning_count": 3, "action": "timeout", "duration_seconds": 3600}]},
        )

        result = invoke("warning-actions", "set", "3:timeout:1h", "5:kick")

        assert result.exit_code == 0
        assert cli_env.body("PUT", f"config/{G}/warning-actions") == {
            "actions": [
                {"warning_count": 3, "action": "timeout", "duration_seconds": 3600},
                {"warning_count": 5, "action": "kick"},
            ]
        }

    def test_invalid_warning_action_is_not_sent(self, cli_env):
        result = invoke("warning-actions", "set", "3:timeout:forever")

        assert result.exit_code == 1
        assert "Error" in result.output
        assert cli_env.calls("PUT", f"config/{G}/warning-actions") == []

    def test_show_renders_rows_the_editor_would_reject(self, cli_env):
        cli_env.add(
            "GET",
            f"config/{G}/warning-actions",
            {"actions": [{"warning_count": 0, "action": "mute", "duration_seconds": 0}, {"warning_count": 4, "action": "kick"}]},
        )

        result = invoke("warning-actions", "show")

        assert result.exit_code == 0
        assert "mute" in result.output
        assert "kick" in result.output


class TestConfigDocuments:
    def test_set_spam_field(self, cli_env):
        cli_env.add("GET", f"config/{G}/spam", {"enabled": 1, "spam_threshold": 5})
        cli_env.add("PUT", f"config/{G}/spam", {})

        result = invoke("config", "set", "spam", "spam_threshold=8", "excluded_roles=1,2")

        assert result.exit_code == 0
        body = cli_env.body("PUT", f"config/{G}/spam")
        assert body["spam_threshold"] == 8
        assert body["excluded_roles"] == '["1","2"]'
        assert body["enabled"] is True

    def test_unknown_field(self, cli_env):
        cli_env.add("GET", f"config/{G}/spam", {})

        result = invoke("config", "set", "spam", "colour=red")

        assert result.exit_code == 1
        assert "Unknown field" in result.output
        assert cli_env.calls("PUT", f"config/{G}/spam") == []

    def test_misspelt_bool_keeps_the_feature_on(self, cli_env):
        cli_env.add("GET", f"config/{G}/welcome", {"enabled": 1, "channel_id": "5"})

        result = invoke("config", "set", "welcome", "enabled=yes")

        assert result.exit_code == 1
        assert "expected true/false" in result.output
        assert cli_env.calls("PUT", f"config/{G}/welcome") == []


class TestBackups:
    def test_schedule_toggle_disables_enabled_schedule(self, cli_env):
        cli_env.add(
            "GET",
            f"backups/{G}/schedules",
            [{"id": 2, "enabled": 1, "frequency_value": 1, "frequency_unit": "days"}],
        )
        cli_env.add("PUT", f"backups/{G}/schedules/2", {})

        result = invoke("backups", "schedule-toggle", "2")

        assert result.exit_code == 0
        assert cli_env.body("PUT", f"backups/{G}/schedules/2") == {"enabled": 0}
        assert "disabled" in result.output

    def test_schedule_toggle_unknown_id(self, cli_env):
        cli_env.add("GET", f"backups/{G}/schedules", [])

        result = invoke("backups", "schedule-toggle", "7")

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_schedule_create_validates_time(self, cli_env):
        result = invoke("backups", "schedule-create", "--at", "25:00")

        assert result.exit_code == 1
        assert cli_env.calls("POST", f"backups/{G}/schedules") == []


class TestMembers:
    def test_xp_change(self, cli_env):
        cli_env.add("GET", f"users/{G}/users/222", {"user_id": "222", "username": "bob", "xp": 100, "level": 1})
        cli_env.add("GET", f"users/{G}/users/222", {"user_id": "222", "username": "bob", "xp": 150, "level": 1})
        cli_env.add("POST", f"users/{G}/users/222/xp", {"success": True})

        result = invoke("users", "xp", "222", "add", "50", "--yes")

        assert result.exit_code == 0
        assert "XP updated" in result.output
        assert cli_env.body("POST", f"users/{G}/users/222/xp") == {"operation": "add", "amount": 50}

    def test_leaderboard_limit(self, cli_env):
        cli_env.add("GET", f"config/{G}/leaderboard", {"leaderboard": [{"user_id": 1, "username": "ann", "xp": 200, "level": 1}]})

        result = invoke("leveling", "leaderboard", "--limit", "5")

        assert result.exit_code == 0
        assert "ann" in result.output
        assert cli_env.requests[0].url.params["limit"] == "5"


class TestAuth:
    def test_login_whoami_logout(self, cli_env, tmp_path):
        cli_env.add(
            "POST",
            "auth/login",
            {"access_token": "a1", "refresh_token": "r1", "user": {"user_id": "1", "username": "bob"}},
        )
        cli_env.add("POST", "auth/logout", {"success": True})
        session_file = tmp_path / "session.json"

        login = invoke("auth", "login", "-u", "bob", "-p", "secret")
        assert login.exit_code == 0
        assert "Logged in as bob" in login.output
        assert json.loads(session_file.read_text())["access_token"] == "a1"

        whoami = invoke("auth", "whoami")
        assert whoami.exit_code == 0
        assert "bob" in whoami.output

        logout = invoke("auth", "logout")
        assert logout.exit_code == 0
        assert not session_file.exists()

    def test_whoami_without_session(self, cli_env):
        result = invoke("auth", "whoami")

        assert result.exit_code == 1
        assert "Not logged in" in result.output

    def test_mfa_does_not_store_session(self, cli_env, tmp_path):
        cli_env.add("POST", "auth/login", {"requires_mfa": True})

        result = invoke("auth", "login", "-u", "bob", "-p", "secret")

        assert result.exit_code == 0
        assert "MFA" in result.output
        assert not (tmp_path / "session.json").exists()


class TestCustomCommands:
    STORED = [{"command_name": "hello", "content": "hi", "description": "Greets", "ephemeral": 1}]

    def test_update_keeps_stored_description_and_flag(self, cli_env):
        cli_env.add("GET", f"commands/{G}", self.STORED)
        cli_env.add("PUT", f"commands/{G}/hello", {"success": True})
        cli_env.add("POST", f"commands/{G}/sync", {"success": True})

        result = invoke("commands", "update", "hello", "new reply")

        assert result.exit_code == 0
        assert cli_env.body("PUT", f"commands/{G}/hello") == {
            "command_name": "hello",
            "content": "new reply",
            "description": "Greets",
            "ephemeral": True,
        }

    def test_update_explicit_options_win(self, cli_env):
        cli_env.add("GET", f"commands/{G}", self.STORED)
        cli_env.add("PUT", f"commands/{G}/hello", {"success": True})

        result = invoke("commands", "update", "hello", "bye", "-d", "Waves", "--no-ephemeral", "--no-sync")

        assert result.exit_code == 0
        body = cli_env.body("PUT", f"commands/{G}/hello")
        assert body["description"] == "Waves"
        assert body["ephemeral"] is False
        assert cli_env.calls("POST", f"commands/{G}/sync") == []

    def test_update_unknown_command(self, cli_env):
        cli_env.add("GET", f"commands/{G}", [])

        result = invoke("commands", "update", "ghost", "boo")

        assert result.exit_code == 1
        assert "not found" in result.output
        assert cli_env.calls("PUT", f"commands/{G}/ghost") == []

    def test_create_syncs_before_reload(self, cli_env):
        cli_env.add("POST", f"commands/{G}", {"success": True})
        cli_env.add("POST", f"commands/{G}/sync", {"success": True})
        cli_env.add("GET", f"commands/{G}", self.STORED)

        result = invoke("commands", "create", "hello", "hi")

        assert result.exit_code == 0
        assert [_route(r) for r in cli_env.requests] == [
            ("POST", f"commands/{G}"),
            ("POST", f"commands/{G}/sync"),
            ("GET", f"commands/{G}"),
        ]

    def test_delete_syncs(self, cli_env):
        cli_env.add("DELETE", f"commands/{G}/hello", {"success": True})
        cli_env.add("POST", f"commands/{G}/sync", {"success": True})
        cli_env.add("GET", f"commands/{G}", [])

        result = invoke("commands", "delete", "hello", "--yes")

        assert result.exit_code == 0
        assert len(cli_env.calls("POST", f"commands/{G}/sync")) == 1


class TestRoleMenus:
    MENU = {
        "id": "m1",
        "guild_id": G,
        "type": "dropdown",
        "channel_id": "c1",
        "config": {"title": "Pick", "roles": [{"role_id": "5", "label": "Red"}]},
    }

    def test_update_channel_keeps_type_and_config(self, cli_env):
        cli_env.add("GET", f"roles/{G}/role-menus/m1", self.MENU)
        cli_env.add("PUT", f"roles/{G}/role-menus/m1", {"success": True})
        cli_env.add("GET", f"roles/{G}/role-menus", [self.MENU])

        result = invoke("roles", "menu-update", "m1", "--channel", "c2")

        assert result.exit_code == 0
        body = cli_env.body("PUT", f"roles/{G}/role-menus/m1")
        assert body["type"] == "dropdown"
        assert body["channel_id"] == "c2"
        assert body["config"]["title"] == "Pick"
        assert body["config"]["roles"] == [{"role_id": "5", "label": "Red"}]

    def test_update_config_from_file(self, cli_env, tmp_path):
        config_file = tmp_path / "menu.json"
        config_file.write_text(json.dumps({"title": "Colours", "roles": [{"role_id": "6", "label": "Blue"}]}))
        cli_env.add("GET", f"roles/{G}/role-menus/m1", self.MENU)
        cli_env.add("PUT", f"roles/{G}/role-menus/m1", {"success": True})
        cli_env.add("GET", f"roles/{G}/role-menus", [self.MENU])

        result = invoke("roles", "menu-update", "m1", "--type", "button", "--config", str(config_file))

        assert result.exit_code == 0
        body = cli_env.body("PUT", f"roles/{G}/role-menus/m1")
        assert body["type"] == "button"
        assert body["channel_id"] == "c1"
        assert body["config"]["title"] == "Colours"
        assert body["config"]["roles"][0]["role_id"] == "6"

    def test_update_rejects_unknown_type(self, cli_env):
        cli_env.add("GET", f"roles/{G}/role-menus/m1", self.MENU)

        result = invoke("roles", "menu-update", "m1", "--type", "wheel")

        assert result.exit_code == 1
        assert "Invalid role menu" in result.output
        assert cli_env.calls("PUT", f"roles/{G}/role-menus/m1") == []


class TestDoctor:
    def test_offline_run(self, cli_env):
        result = invoke("doctor", "run", "--offline")

        assert result.exit_code == 0
        assert "RuleKeeper Doctor" in result.output
        assert cli_env.requests == []

    def test_setup_empty_answer_keeps_guild(self, cli_env, monkeypatch, tmp_path):
        env_file = tmp_path / "user.env"
        monkeypatch.setattr("core.config.get_user_env_file", lambda: env_file)

        result = invoke_with_input("\n\n", "doctor", "setup")

        assert result.exit_code == 0
        assert f"RULEKEEPER_DEFAULT_GUILD_ID={G}" in env_file.read_text().splitlines()

    def test_setup_none_clears_guild(self, cli_env, monkeypatch, tmp_path):
        env_file = tmp_path / "user.env"
        env_file.write_text(f"RULEKEEPER_DEFAULT_GUILD_ID={G}\n")
        monkeypatch.setattr("core.config.get_user_env_file", lambda: env_file)

        result = invoke_with_input("\nnone\n", "doctor", "setup")

        assert result.exit_code == 0
        lines = env_file.read_text().splitlines()
        assert "RULEKEEPER_DEFAULT_GUILD_ID=" in lines
        assert "RULEKEEPER_API_BASE_URL=https://api.test/api/v1/" in lines


@pytest.mark.parametrize("group", ["moderation", "backups", "roles", "config", "tickets", "forms", "logs"])
def test_groups_show_help(group):
    result = invoke(group, "--help")

    assert result.exit_code == 0
    assert "Usage" in result.output
