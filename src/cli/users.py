"""`rkdash users`: member records, XP edits and birthdays."""

from __future__ import annotations

import json
from typing import Optional

import typer

from cli.runtime import GuildOption, JsonOption, YesOption, confirm, console, resolve_guild, run_api
from cli.ui_components import (
    build_member_panel,
    build_members_table,
    build_records_table,
    print_json,
    print_success,
)
from core.domain.leveling import XP_OPERATIONS, preview_xp
from core.domain.models import Birthday
from core.errors import InvalidInputError

app = typer.Typer(no_args_is_help=True, help="Members, XP and birthdays.")


def _print_birthdays(birthdays) -> None:
    console.print(build_records_table(f"Birthdays ({len(birthdays)})", birthdays, ["user_id", "username", "birthday"]))


@app.command("list")
def list_users(
    search: Optional[str] = typer.Option(None, "--search", "-s"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1),
    guild: GuildOption = None,
    as_json: JsonOption = False,
) -> None:
    guild_id = resolve_guild(guild)
    params = {"search": search, "limit": limit}
    result = run_api(lambda ctx: ctx.api.users.list(guild_id, params=params))
    if as_json:
        print_json(console, result)
        return
    console.print(build_members_table(result))


@app.command()
def show(user_id: str = typer.Argument(...), guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    member = run_api(lambda ctx: ctx.api.users.get(guild_id, user_id))
    if as_json:
        print_json(console, member)
        return
    console.print(build_member_panel(member))


@app.command()
def xp(
    user_id: str = typer.Argument(...),
    operation: str = typer.Argument(..., help=f"One of: {', '.join(XP_OPERATIONS)}."),
    amount: int = typer.Argument(..., min=0),
    guild: GuildOption = None,
    yes: YesOption = False,
) -> None:
    """Add, remove or set a member's XP, previewing the result first."""

    guild_id = resolve_guild(guild)
    operation = operation.strip().lower()

    async def load(ctx):
        member = await ctx.api.users.get(guild_id, user_id)
        return member, preview_xp(int(member.xp), operation, amount)

    member, new_xp = run_api(load)
    console.print(f"{member.username}: [bold]{int(member.xp):,}[/bold] XP -> [bold]{new_xp:,}[/bold] XP")
    confirm("Apply this change?", yes)

    async def apply(ctx):
        await ctx.api.users.modify_xp(guild_id, user_id, operation, amount)
        return await ctx.api.users.get(guild_id, user_id)

    updated = run_api(apply)
    print_success(console, "XP updated")
    console.print(build_member_panel(updated))


@app.command()
def delete(user_id: str = typer.Argument(...), guild: GuildOption = None, yes: YesOption = False) -> None:
    """Delete all stored data for a member."""

    guild_id = resolve_guild(guild)
    confirm(f"Delete all stored data for {user_id}?", yes)
    run_api(lambda ctx: ctx.api.users.delete_data(guild_id, user_id))
    print_success(console, f"Data for {user_id} deleted")


@app.command()
def restore(
    user_id: str = typer.Argument(...),
    data: str = typer.Option("{}", "--data", help="JSON object sent as the restore body."),
    guild: GuildOption = None,
) -> None:
    """Re-apply a member's saved roles, XP and nickname."""

    guild_id = resolve_guild(guild)

    async def action(ctx):
        try:
            body = json.loads(data)
        except json.JSONDecodeError as exc:
            raise InvalidInputError(f"--data is not valid JSON: {exc}") from exc
        if not isinstance(body, dict):
            raise InvalidInputError("--data must be a JSON object")
        return await ctx.api.users.restore(guild_id, user_id, body)

    result = run_api(action)
    print_success(console, f"Restore for {user_id} requested")
    if result:
        print_json(console, result)


@app.command()
def birthdays(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.users.birthdays(guild_id))
    if as_json:
        print_json(console, result)
        return
    _print_birthdays(result)


@app.command("set-birthday")
def set_birthday(
    user_id: str = typer.Argument(...),
    birthday: str = typer.Argument(..., help="Date as stored by the bot, e.g. 05-21 or 1990-05-21."),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.users.set_birthday(guild_id, Birthday(user_id=user_id, birthday=birthday))
        return await ctx.api.users.birthdays(guild_id)

    result = run_api(action)
    print_success(console, f"Birthday for {user_id} saved")
    _print_birthdays(result)


@app.command("remove-birthday")
def remove_birthday(user_id: str = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.users.delete_birthday(guild_id, user_id)
        return await ctx.api.users.birthdays(guild_id)

    result = run_api(action)
    print_success(console, f"Birthday for {user_id} removed")
    _print_birthdays(result)
