"""`rkdash commands`: custom slash commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from adapters.json_exporter import export_payload_json, load_payload_json
from cli.runtime import GuildOption, JsonOption, YesOption, confirm, console, resolve_guild, run_api
from cli.ui_components import build_records_table, print_json, print_success
from core.domain.models import CommandDraft
from core.errors import InvalidInputError, NotFoundError

app = typer.Typer(no_args_is_help=True, help="Custom commands.")

_COLUMNS = ["command_name", "description", "ephemeral", "is_builtin", "modified_at"]


SyncOption = Annotated[
    bool,
    typer.Option("--sync/--no-sync", help="Push the command list to Discord after the change."),
]


def _print_commands(commands) -> None:
    console.print(build_records_table(f"Commands ({len(commands)})", commands, _COLUMNS))


async def _sync_and_reload(ctx, guild_id: str, push: bool):
    if push:
        await ctx.api.commands.sync(guild_id)
    return await ctx.api.commands.list(guild_id)


def _draft(name: str, content: str, description: str, ephemeral: bool) -> CommandDraft:
    try:
        return CommandDraft(command_name=name, content=content, description=description, ephemeral=ephemeral)
    except ValueError as exc:
        raise InvalidInputError("Command name (1-32 chars) and content are required") from exc


@app.command("list")
def list_commands(
    builtin: bool = typer.Option(False, "--builtin", help="Include the bot's built-in commands."),
    guild: GuildOption = None,
    as_json: JsonOption = False,
) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.commands.list(guild_id, include_builtin=builtin))
    if as_json:
        print_json(console, result)
        return
    _print_commands(result)


@app.command()
def create(
    name: str = typer.Argument(...),
    content: str = typer.Argument(..., help="What the bot replies."),
    description: str = typer.Option("", "--description", "-d"),
    ephemeral: bool = typer.Option(False, "--ephemeral", help="Only the caller sees the reply."),
    push: SyncOption = True,
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.commands.create(guild_id, _draft(name, content, description, ephemeral))
        return await _sync_and_reload(ctx, guild_id, push)

    result = run_api(action)
    print_success(console, f"Command /{name} created")
    _print_commands(result)


@app.command()
def update(
    name: str = typer.Argument(...),
    content: str = typer.Argument(...),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Defaults to the current one."),
    ephemeral: Optional[bool] = typer.Option(None, "--ephemeral/--no-ephemeral", help="Defaults to the current flag."),
    push: SyncOption = True,
    guild: GuildOption = None,
) -> None:
    """Replace the reply of a command; unspecified options keep their stored value."""

    guild_id = resolve_guild(guild)

    async def action(ctx):
        commands = await ctx.api.commands.list(guild_id)
        current = next((c for c in commands if c.command_name == name), None)
        if current is None:
            raise NotFoundError(f"Command /{name} not found")
        draft = _draft(
            name,
            content,
            (current.description or "") if description is None else description,
            current.ephemeral if ephemeral is None else ephemeral,
        )
        await ctx.api.commands.update(guild_id, name, draft)
        return await _sync_and_reload(ctx, guild_id, push)

    result = run_api(action)
    print_success(console, f"Command /{name} updated")
    _print_commands(result)


@app.command()
def delete(
    name: str = typer.Argument(...),
    push: SyncOption = True,
    guild: GuildOption = None,
    yes: YesOption = False,
) -> None:
    guild_id = resolve_guild(guild)
    confirm(f"Delete command /{name}?", yes)

    async def action(ctx):
        await ctx.api.commands.delete(guild_id, name)
        return await _sync_and_reload(ctx, guild_id, push)

    result = run_api(action)
    print_success(console, f"Command /{name} deleted")
    _print_commands(result)



@app.command()
def sync(guild: GuildOption = None) -> None:
    """Push the command list to Discord."""

    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.commands.sync(guild_id))
    print_success(console, "Commands synced")
    if result:
        print_json(console, result)


@app.command("export")
def export_commands(
    output: Path = typer.Option(Path("commands.json"), "--output", "-o"),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)
    data = run_api(lambda ctx: ctx.api.commands.export(guild_id))
    print_success(console, f"Commands exported to {export_payload_json(payload=data, output_path=output)}")


@app.command("import")
def import_commands(
    source: Path = typer.Argument(..., help="JSON file produced by `export`."),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.commands.import_(guild_id, load_payload_json(source))
        return await ctx.api.commands.list(guild_id)

    result = run_api(action)
    print_success(console, f"Commands imported from {source}")
    _print_commands(result)


@app.command("delete-all")
def delete_all(guild: GuildOption = None, yes: YesOption = False) -> None:
    guild_id = resolve_guild(guild)
    confirm("Delete ALL custom commands of this guild?", yes)
    run_api(lambda ctx: ctx.api.commands.delete_all(guild_id))
    print_success(console, "All custom commands deleted")
