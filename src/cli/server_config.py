"""`rkdash config`: documentos de configuración del servidor.

Todos siguen el mismo ciclo: cargar, mostrar, editar `campo=valor`, guardar y
recargar.
"""

from __future__ import annotations

from enum import Enum
from typing import List

import typer

from cli.runtime import GuildOption, JsonOption, console, resolve_guild, run_api
from cli.ui_components import build_config_panel, print_json, print_success
from core.services.config_edit import apply_updates
from core.services.restore_settings import clear_excluded, exclude_all, toggle_excluded_role

app = typer.Typer(no_args_is_help=True, help="Logging, welcome/goodbye, anti-spam, birthdays and restore settings.")


class Document(str, Enum):
    logging = "logging"
    welcome = "welcome"
    goodbye = "goodbye"
    spam = "spam"
    birthdays = "birthdays"
    restore = "restore"


_TITLES = {
    Document.logging: "Logging",
    Document.welcome: "Welcome messages",
    Document.goodbye: "Goodbye messages",
    Document.spam: "Anti-spam",
    Document.birthdays: "Birthdays",
    Document.restore: "Member data restore",
}


async def _load(api, document: Document, guild_id: str):
    if document is Document.restore:
        return await api.config.restore_settings(guild_id)
    return await getattr(api.config, document.value)(guild_id)


async def _save(api, document: Document, guild_id: str, model) -> None:
    if document is Document.restore:
        await api.config.update_restore_settings(guild_id, model)
    else:
        await getattr(api.config, f"update_{document.value}")(guild_id, model)


def _render(document: Document, model) -> None:
    console.print(build_config_panel(_TITLES[document], model))


@app.command()
def show(
    document: Document = typer.Argument(...),
    guild: GuildOption = None,
    as_json: JsonOption = False,
) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: _load(ctx.api, document, guild_id))
    if as_json:
        print_json(console, result)
        return
    _render(document, result)


@app.command("set")
def set_fields(
    document: Document = typer.Argument(...),
    assignments: List[str] = typer.Argument(..., help="FIELD=VALUE pairs; id lists take 1,2,3."),
    guild: GuildOption = None,
) -> None:
    """Edit fields of a configuration document and save it."""

    guild_id = resolve_guild(guild)

    async def action(ctx):
        current = await _load(ctx.api, document, guild_id)
        await _save(ctx.api, document, guild_id, apply_updates(current, assignments))
        return await _load(ctx.api, document, guild_id)

    result = run_api(action)
    print_success(console, f"{_TITLES[document]} saved")
    _render(document, result)


@app.command("restore-toggle-role")
def restore_toggle_role(role_id: str = typer.Argument(...), guild: GuildOption = None) -> None:
    """Exclude a role from restores, or include it again."""

    guild_id = resolve_guild(guild)

    async def action(ctx):
        current = await ctx.api.config.restore_settings(guild_id)
        await ctx.api.config.update_restore_settings(guild_id, toggle_excluded_role(current, role_id))
        return await ctx.api.config.restore_settings(guild_id)

    result = run_api(action)
    state = "excluded" if role_id in result.excluded_roles else "included"
    print_success(console, f"Role {role_id} {state}")
    _render(Document.restore, result)


@app.command("restore-exclude-all")
def restore_exclude_all(guild: GuildOption = None) -> None:
    """Exclude every role of the guild from restores."""

    guild_id = resolve_guild(guild)

    async def action(ctx):
        current = await ctx.api.config.restore_settings(guild_id)
        roles = await ctx.api.guilds.roles(guild_id)
        await ctx.api.config.update_restore_settings(guild_id, exclude_all(current, roles))
        return await ctx.api.config.restore_settings(guild_id)

    result = run_api(action)
    print_success(console, f"{len(result.excluded_roles)} roles excluded")
    _render(Document.restore, result)


@app.command("restore-clear-excluded")
def restore_clear_excluded(guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        current = await ctx.api.config.restore_settings(guild_id)
        await ctx.api.config.update_restore_settings(guild_id, clear_excluded(current))
        return await ctx.api.config.restore_settings(guild_id)

    result = run_api(action)
    print_success(console, "Excluded roles cleared")
    _render(Document.restore, result)
