"""`rkdash leveling`: XP settings, leaderboard and level rewards."""

from __future__ import annotations

from typing import List

import typer

from cli.runtime import GuildOption, JsonOption, console, resolve_guild, run_api
from cli.ui_components import (
    build_config_panel,
    build_leaderboard_table,
    build_records_table,
    print_json,
    print_success,
)
from core.domain.models import LevelReward
from core.errors import InvalidInputError
from core.services.config_edit import apply_updates

app = typer.Typer(no_args_is_help=True, help="Leveling settings, leaderboard and rewards.")


def _print_rewards(rewards) -> None:
    if not rewards:
        console.print("[dim]No level rewards.[/dim]")
        return
    console.print(build_records_table("Level rewards", rewards, ["level", "role_id"]))


@app.command()
def config(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    """Show the leveling configuration."""

    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.config.leveling(guild_id))
    if as_json:
        print_json(console, result)
        return
    console.print(build_config_panel("Leveling", result))


@app.command("set")
def set_config(
    assignments: List[str] = typer.Argument(..., help="FIELD=VALUE pairs, e.g. xp_min=10 cooldown=30."),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        current = await ctx.api.config.leveling(guild_id)
        await ctx.api.config.update_leveling(guild_id, apply_updates(current, assignments))
        return await ctx.api.config.leveling(guild_id)

    result = run_api(action)
    print_success(console, "Leveling settings saved")
    console.print(build_config_panel("Leveling", result))


@app.command()
def leaderboard(
    limit: int = typer.Option(100, "--limit", "-n", min=1),
    guild: GuildOption = None,
    as_json: JsonOption = False,
) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.config.leaderboard(guild_id, limit=limit))
    if as_json:
        print_json(console, result)
        return
    console.print(build_leaderboard_table(result))


@app.command()
def rewards(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    """Roles handed out when members reach a level."""

    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.config.level_rewards(guild_id))
    if as_json:
        print_json(console, result)
        return
    _print_rewards(result)


@app.command("add-reward")
def add_reward(
    level: int = typer.Argument(...),
    role_id: str = typer.Argument(...),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        try:
            reward = LevelReward(level=level, role_id=role_id)
        except ValueError as exc:
            raise InvalidInputError("Level must be at least 1") from exc
        await ctx.api.config.add_level_reward(guild_id, reward)
        return await ctx.api.config.level_rewards(guild_id)

    result = run_api(action)
    print_success(console, f"Reward for level {level} saved")
    _print_rewards(result)


@app.command("remove-reward")
def remove_reward(level: int = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.config.delete_level_reward(guild_id, level)
        return await ctx.api.config.level_rewards(guild_id)

    result = run_api(action)
    print_success(console, f"Reward for level {level} removed")
    _print_rewards(result)
