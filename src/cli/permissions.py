"""`rkdash permissions`: per-command role and channel permissions."""

from __future__ import annotations

from pathlib import Path

import typer

from adapters.json_exporter import export_payload_json, load_payload_json
from cli.runtime import GuildOption, JsonOption, YesOption, confirm, console, resolve_guild, run_api
from cli.ui_components import build_records_table, print_json, print_success
from core.errors import InvalidInputError

app = typer.Typer(no_args_is_help=True, help="Command permissions.")


def _object_from(source: Path) -> dict:
    body = load_payload_json(source)
    if not isinstance(body, dict):
        raise InvalidInputError(f"{source} must contain a JSON object")
    return body


@app.command("list")
def list_permissions(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.permissions.list(guild_id))
    if as_json or not isinstance(result, list):
        print_json(console, result)
        return
    columns = ["command_name", "allowed_roles", "allowed_channels", "enabled"]
    console.print(build_records_table(f"Permissions ({len(result)})", result, columns))


@app.command()
def show(command_name: str = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)
    print_json(console, run_api(lambda ctx: ctx.api.permissions.get(guild_id, command_name)))


@app.command("set")
def set_permission(
    command_name: str = typer.Argument(...),
    source: Path = typer.Argument(..., help="JSON file with the permission document."),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.permissions.update(guild_id, command_name, _object_from(source))
        return await ctx.api.permissions.get(guild_id, command_name)

    result = run_api(action)
    print_success(console, f"Permissions for /{command_name} saved")
    print_json(console, result)


@app.command()
def reset(command_name: str = typer.Argument(...), guild: GuildOption = None, yes: YesOption = False) -> None:
    """Drop custom permissions and go back to the defaults."""

    guild_id = resolve_guild(guild)
    confirm(f"Reset permissions for /{command_name}?", yes)
    run_api(lambda ctx: ctx.api.permissions.reset(guild_id, command_name))
    print_success(console, f"Permissions for /{command_name} reset")


@app.command("add-role")
def add_role(command_name: str = typer.Argument(...), role_id: str = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.permissions.add_role(guild_id, command_name, role_id)
        return await ctx.api.permissions.get(guild_id, command_name)

    result = run_api(action)
    print_success(console, f"Role {role_id} allowed for /{command_name}")
    print_json(console, result)


@app.command("add-channel")
def add_channel(
    command_name: str = typer.Argument(...),
    channel_id: str = typer.Argument(...),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.permissions.add_channel(guild_id, command_name, channel_id)
        return await ctx.api.permissions.get(guild_id, command_name)

    result = run_api(action)
    print_success(console, f"Channel {channel_id} allowed for /{command_name}")
    print_json(console, result)


@app.command()
def bulk(source: Path = typer.Argument(..., help="JSON object: command -> permissions."), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.permissions.bulk_update(guild_id, _object_from(source)))
    print_success(console, "Permissions updated")
    if result:
        print_json(console, result)


@app.command("export")
def export_permissions(
    output: Path = typer.Option(Path("permissions.json"), "--output", "-o"),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)
    data = run_api(lambda ctx: ctx.api.permissions.export(guild_id))
    print_success(console, f"Permissions exported to {export_payload_json(payload=data, output_path=output)}")


@app.command("import")
def import_permissions(source: Path = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.permissions.import_(guild_id, _object_from(source)))
    print_success(console, f"Permissions imported from {source}")
    if result:
        print_json(console, result)
