"""`rkdash guilds`: servers the user can manage, plus their channels and roles."""

from __future__ import annotations

from typing import List

import typer

from cli.runtime import GuildOption, JsonOption, console, resolve_guild, run_api
from cli.ui_components import build_guilds_table, build_records_table, print_json, print_success
from core.services.config_edit import parse_assignments

app = typer.Typer(no_args_is_help=True, help="Guilds, channels and roles.")


@app.command("list")
def list_guilds(as_json: JsonOption = False) -> None:
    """List the guilds visible to the logged-in user."""

    result = run_api(lambda ctx: ctx.api.guilds.list())
    if as_json:
        print_json(console, result)
        return
    console.print(build_guilds_table(result.guilds))


@app.command()
def show(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.guilds.get(guild_id))
    if as_json:
        print_json(console, result)
        return
    console.print(build_guilds_table([result]))


@app.command()
def channels(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.guilds.channels(guild_id))
    if as_json:
        print_json(console, result)
        return
    console.print(build_records_table(f"Channels ({len(result)})", result, ["id", "name", "type", "position"]))


@app.command()
def roles(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    """Roles, highest position first."""

    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.guilds.roles(guild_id))
    if as_json:
        print_json(console, result)
        return
    console.print(build_records_table(f"Roles ({len(result)})", result, ["id", "name", "position", "color"]))


@app.command()
def settings(
    assignments: List[str] = typer.Argument(None, help="KEY=VALUE pairs to update."),
    guild: GuildOption = None,
) -> None:
    """Show guild settings, or update them with KEY=VALUE pairs."""

    guild_id = resolve_guild(guild)

    async def action(ctx):
        updates = parse_assignments(assignments or [])
        if updates:
            await ctx.api.guilds.update_settings(guild_id, updates)
        return bool(updates), await ctx.api.guilds.settings(guild_id)

    updated, result = run_api(action)
    if updated:
        print_success(console, "Settings updated")
    print_json(console, result)
