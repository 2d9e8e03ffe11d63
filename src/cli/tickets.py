"""`rkdash tickets`: ticket menus, open tickets and transcripts."""

from __future__ import annotations

from pathlib import Path

import typer

from adapters.json_exporter import load_payload_json
from cli.runtime import GuildOption, JsonOption, YesOption, confirm, console, resolve_guild, run_api
from cli.ui_components import build_records_table, print_json, print_success
from core.errors import InvalidInputError

app = typer.Typer(no_args_is_help=True, help="Ticket menus, tickets and transcripts.")


def _menu_body(source: Path) -> dict:
    body = load_payload_json(source)
    if not isinstance(body, dict):
        raise InvalidInputError(f"{source} must contain a JSON object")
    return body


@app.command("list")
def list_tickets(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    """Open tickets."""

    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.tickets.tickets(guild_id))
    if as_json:
        print_json(console, result)
        return
    columns = ["id", "username", "subject", "category", "status", "created_at"]
    console.print(build_records_table(f"Tickets ({len(result)})", result, columns))


@app.command()
def menus(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.tickets.menus(guild_id))
    if as_json or not isinstance(result, list):
        print_json(console, result)
        return
    console.print(build_records_table(f"Ticket menus ({len(result)})", result, ["id", "title", "channel_id"]))


@app.command("menu-show")
def menu_show(menu_id: int = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)
    print_json(console, run_api(lambda ctx: ctx.api.tickets.menu(guild_id, menu_id)))


@app.command("menu-create")
def menu_create(
    source: Path = typer.Argument(..., help="JSON file with the menu definition."),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        return await ctx.api.tickets.create_menu(guild_id, _menu_body(source))

    result = run_api(action)
    print_success(console, "Ticket menu created")
    if result:
        print_json(console, result)


@app.command("menu-update")
def menu_update(
    menu_id: int = typer.Argument(...),
    source: Path = typer.Argument(..., help="JSON file with the menu definition."),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.tickets.update_menu(guild_id, menu_id, _menu_body(source))
        return await ctx.api.tickets.menu(guild_id, menu_id)

    result = run_api(action)
    print_success(console, f"Ticket menu {menu_id} updated")
    print_json(console, result)


@app.command("menu-delete")
def menu_delete(menu_id: int = typer.Argument(...), guild: GuildOption = None, yes: YesOption = False) -> None:
    guild_id = resolve_guild(guild)
    confirm(f"Delete ticket menu {menu_id}?", yes)
    run_api(lambda ctx: ctx.api.tickets.delete_menu(guild_id, menu_id))
    print_success(console, f"Ticket menu {menu_id} deleted")


@app.command()
def transcripts(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.tickets.transcripts(guild_id))
    if as_json or not isinstance(result, list):
        print_json(console, result)
        return
    columns = ["id", "ticket_id", "username", "created_at"]
    console.print(build_records_table(f"Transcripts ({len(result)})", result, columns))


@app.command()
def transcript(transcript_id: int = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)
    print_json(console, run_api(lambda ctx: ctx.api.tickets.transcript(guild_id, transcript_id)))
