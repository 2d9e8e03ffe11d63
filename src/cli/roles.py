"""`rkdash roles`: auto-roles, game roles and role menus."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from adapters.json_exporter import load_payload_json
from cli.runtime import GuildOption, JsonOption, YesOption, confirm, console, resolve_guild, run_api
from cli.ui_components import build_config_panel, build_records_table, print_json, print_success
from core.domain.models import RoleMenuConfig, RoleMenuDraft, RoleMenuRole, RoleMenuUpdate
from core.errors import InvalidInputError

app = typer.Typer(no_args_is_help=True, help="Auto-roles, game roles and role menus.")


def _print_auto_roles(roles) -> None:
    console.print(build_records_table(f"Auto-roles ({len(roles)})", roles, ["role_id", "role_name"]))


def _print_game_roles(roles) -> None:
    console.print(build_records_table(f"Game roles ({len(roles)})", roles, ["id", "game_name", "role_id"]))


def _print_menus(menus) -> None:
    rows = [
        {
            "id": m.id,
            "type": m.type,
            "channel_id": m.channel_id,
            "title": m.config.title if m.config else None,
            "roles": len(m.config.roles) if m.config else 0,
        }
        for m in menus
    ]
    console.print(build_records_table(f"Role menus ({len(menus)})", rows, ["id", "type", "channel_id", "title", "roles"]))


@app.command("auto-roles")
def auto_roles(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    """Roles given to every member on join."""

    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.roles.auto_roles(guild_id))
    if as_json:
        print_json(console, result)
        return
    _print_auto_roles(result)


@app.command("add-auto-role")
def add_auto_role(role_id: str = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.roles.add_auto_role(guild_id, role_id)
        return await ctx.api.roles.auto_roles(guild_id)

    result = run_api(action)
    print_success(console, f"Auto-role {role_id} added")
    _print_auto_roles(result)


@app.command("remove-auto-role")
def remove_auto_role(role_id: str = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.roles.delete_auto_role(guild_id, role_id)
        return await ctx.api.roles.auto_roles(guild_id)

    result = run_api(action)
    print_success(console, f"Auto-role {role_id} removed")
    _print_auto_roles(result)


@app.command("game-roles")
def game_roles(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    """Roles granted while a member plays a given game."""

    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.roles.game_roles(guild_id))
    if as_json:
        print_json(console, result)
        return
    _print_game_roles(result)


@app.command("add-game-role")
def add_game_role(
    game_name: str = typer.Argument(...),
    role_id: str = typer.Argument(...),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.roles.add_game_role(guild_id, game_name, role_id)
        return await ctx.api.roles.game_roles(guild_id)

    result = run_api(action)
    print_success(console, f"Game role for {game_name!r} added")
    _print_game_roles(result)


@app.command("update-game-role")
def update_game_role(
    game_role_id: int = typer.Argument(...),
    game_name: str = typer.Argument(...),
    role_id: str = typer.Argument(...),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.roles.update_game_role(guild_id, game_role_id, game_name, role_id)
        return await ctx.api.roles.game_roles(guild_id)

    result = run_api(action)
    print_success(console, f"Game role {game_role_id} updated")
    _print_game_roles(result)


@app.command("remove-game-role")
def remove_game_role(game_role_id: int = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.roles.delete_game_role(guild_id, game_role_id)
        return await ctx.api.roles.game_roles(guild_id)

    result = run_api(action)
    print_success(console, f"Game role {game_role_id} removed")
    _print_game_roles(result)


@app.command()
def menus(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.role_menus.list(guild_id))
    if as_json:
        print_json(console, result)
        return
    _print_menus(result)


@app.command("menu-show")
def menu_show(menu_id: str = typer.Argument(...), guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    menu = run_api(lambda ctx: ctx.api.role_menus.get(guild_id, menu_id))
    if as_json:
        print_json(console, menu)
        return
    console.print(build_config_panel(f"Role menu {menu.id} ({menu.type})", menu.config or RoleMenuConfig()))
    if menu.config and menu.config.roles:
        console.print(build_records_table("Roles", menu.config.roles, ["role_id", "label", "emoji", "description"]))


def _parse_menu_role(spec: str) -> RoleMenuRole:
    role_id, _, rest = spec.partition(":")
    label, _, emoji = rest.partition(":")
    if not role_id.strip() or not label.strip():
        raise InvalidInputError(f"Expected ROLE_ID:LABEL[:EMOJI], got {spec!r}")
    return RoleMenuRole(role_id=role_id.strip(), label=label.strip(), emoji=emoji.strip() or None)


@app.command("menu-create")
def menu_create(
    channel_id: str = typer.Argument(..., help="Channel where the menu is posted."),
    roles: List[str] = typer.Argument(..., help="ROLE_ID:LABEL[:EMOJI] entries."),
    menu_type: str = typer.Option("dropdown", "--type", help="dropdown, button or reactionrole."),
    title: Optional[str] = typer.Option(None, "--title"),
    description: Optional[str] = typer.Option(None, "--description"),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        config = RoleMenuConfig(
            title=title,
            description=description,
            roles=[_parse_menu_role(spec) for spec in roles],
            max_values=len(roles),
        )
        try:
            draft = RoleMenuDraft(guild_id=guild_id, type=menu_type, channel_id=channel_id, config=config)
        except ValueError as exc:
            raise InvalidInputError(f"Invalid role menu: {exc}") from exc
        await ctx.api.role_menus.create(guild_id, draft)
        return await ctx.api.role_menus.list(guild_id)

    result = run_api(action)
    print_success(console, "Role menu created")
    _print_menus(result)


@app.command("menu-delete")
def menu_delete(menu_id: str = typer.Argument(...), guild: GuildOption = None, yes: YesOption = False) -> None:
    guild_id = resolve_guild(guild)
    confirm(f"Delete role menu {menu_id}?", yes)

    async def action(ctx):
        await ctx.api.role_menus.delete(guild_id, menu_id)
        return await ctx.api.role_menus.list(guild_id)

    result = run_api(action)
    print_success(console, f"Role menu {menu_id} deleted")
    _print_menus(result)


@app.command("menu-update")
def menu_update(
    menu_id: str = typer.Argument(...),
    menu_type: Optional[str] = typer.Option(None, "--type", help="dropdown, button or reactionrole."),
    channel_id: Optional[str] = typer.Option(None, "--channel", help="Move the menu to another channel."),
    config_file: Optional[Path] = typer.Option(None, "--config", help="JSON file with the full menu config."),
    guild: GuildOption = None,
) -> None:
    """Change a role menu; options left out keep their current value."""

    guild_id = resolve_guild(guild)

    async def action(ctx):
        current = await ctx.api.role_menus.get(guild_id, menu_id)
        raw_config = load_payload_json(config_file) if config_file else None
        try:
            update = RoleMenuUpdate(
                type=menu_type or current.type,
                channel_id=channel_id or current.channel_id,
                config=RoleMenuConfig.model_validate(raw_config) if raw_config is not None else current.config,
            )
        except ValueError as exc:
            raise InvalidInputError(f"Invalid role menu: {exc}") from exc
        await ctx.api.role_menus.update(guild_id, menu_id, update)
        return await ctx.api.role_menus.list(guild_id)

    result = run_api(action)
    print_success(console, f"Role menu {menu_id} updated")
    _print_menus(result)
