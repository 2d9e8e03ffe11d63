"""`rkdash moderation` y `rkdash warning-actions`.

Avisos, bans, palabras bloqueadas y las acciones automáticas por número de
avisos.
"""

from __future__ import annotations

from typing import List, Optional

import typer

from cli.runtime import GuildOption, JsonOption, YesOption, confirm, console, resolve_guild, run_api
from cli.ui_components import (
    build_bans_table,
    build_records_table,
    build_warning_actions_table,
    build_warnings_table,
    print_json,
    print_success,
)
from core.services.warning_actions import WarningActionDraft, build_actions

app = typer.Typer(no_args_is_help=True, help="Warnings, bans and blocked words.")
actions_app = typer.Typer(no_args_is_help=True, help="Automatic actions triggered by warning counts.")


@app.command()
def warnings(
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Only this member's warnings."),
    guild: GuildOption = None,
    as_json: JsonOption = False,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        if user:
            return await ctx.api.moderation.user_warnings(guild_id, user)
        return await ctx.api.moderation.warnings(guild_id)

    result = run_api(action)
    if as_json:
        print_json(console, result)
        return
    console.print(build_warnings_table(result))


@app.command()
def warn(
    user: str = typer.Argument(..., help="Member id."),
    reason: str = typer.Option("No reason", "--reason", "-r"),
    guild: GuildOption = None,
) -> None:
    """Warn a member, then show their warnings."""

    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.moderation.add_warning(guild_id, user, reason)
        return await ctx.api.moderation.user_warnings(guild_id, user)

    result = run_api(action)
    print_success(console, f"Warned {user}")
    console.print(build_warnings_table(result))


@app.command()
def unwarn(
    warning_id: str = typer.Argument(...),
    guild: GuildOption = None,
    yes: YesOption = False,
) -> None:
    """Delete a warning."""

    guild_id = resolve_guild(guild)
    confirm(f"Delete warning {warning_id}?", yes)

    async def action(ctx):
        await ctx.api.moderation.delete_warning(guild_id, warning_id)
        return await ctx.api.moderation.warnings(guild_id)

    result = run_api(action)
    print_success(console, f"Warning {warning_id} deleted")
    console.print(build_warnings_table(result))


@app.command()
def bans(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.moderation.bans(guild_id))
    if as_json:
        print_json(console, result)
        return
    console.print(build_bans_table(result))


def _print_words(words) -> None:
    console.print(build_records_table(f"Blocked words ({len(words)})", words, ["id", "word"]))


@app.command("blocked-words")
def blocked_words(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.moderation.blocked_words(guild_id))
    if as_json:
        print_json(console, result)
        return
    _print_words(result)


@app.command("block-word")
def block_word(word: str = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)
    word = word.strip()
    if not word:
        raise typer.BadParameter("Word cannot be empty")

    async def action(ctx):
        await ctx.api.moderation.add_blocked_word(guild_id, word)
        return await ctx.api.moderation.blocked_words(guild_id)

    result = run_api(action)
    print_success(console, f"Blocked {word!r}")
    _print_words(result)


@app.command("unblock-word")
def unblock_word(word_id: int = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.moderation.delete_blocked_word(guild_id, word_id)
        return await ctx.api.moderation.blocked_words(guild_id)

    result = run_api(action)
    print_success(console, f"Blocked word {word_id} removed")
    _print_words(result)


@actions_app.command("show")
def show_actions(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.config.warning_actions(guild_id))
    if as_json:
        print_json(console, result)
        return
    if not result:
        console.print("[dim]No warning actions configured.[/dim]")
        return
    console.print(build_warning_actions_table(result))


@actions_app.command("set")
def set_actions(
    rules: List[str] = typer.Argument(
        None,
        help="COUNT:ACTION[:DURATION] rules, e.g. 3:timeout:1h 5:kick 7:ban. No rules clears the table.",
    ),
    guild: GuildOption = None,
) -> None:
    """Replace the whole warning-action table."""

    guild_id = resolve_guild(guild)

    async def action(ctx):
        drafts = [WarningActionDraft.parse(rule) for rule in rules or []]
        await ctx.api.config.update_warning_actions(guild_id, build_actions(drafts))
        return await ctx.api.config.warning_actions(guild_id)

    result = run_api(action)
    print_success(console, "Warning actions saved")
    if result:
        console.print(build_warning_actions_table(result))
