"""`rkdash backups`: manual backups and backup schedules."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from adapters.json_exporter import export_payload_json
from cli.runtime import GuildOption, JsonOption, YesOption, confirm, console, resolve_guild, run_api
from cli.ui_components import build_backups_table, build_schedules_table, print_json, print_success
from core.services.backup_schedules import FREQUENCY_UNITS, ScheduleDraft, describe, toggle_payload

app = typer.Typer(no_args_is_help=True, help="Server backups and their schedules.")


async def _reload(ctx, guild_id: str):
    return await ctx.api.backups.list(guild_id)


@app.command("list")
def list_backups(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    """List backups, newest first."""

    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: _reload(ctx, guild_id))
    if as_json:
        print_json(console, result)
        return
    console.print(build_backups_table(result))


@app.command()
def create(guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.backups.create(guild_id)
        return await _reload(ctx, guild_id)

    result = run_api(action)
    print_success(console, "Backup created")
    console.print(build_backups_table(result))


@app.command()
def show(backup_id: str = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)
    print_json(console, run_api(lambda ctx: ctx.api.backups.get(guild_id, backup_id)))


@app.command()
def delete(backup_id: str = typer.Argument(...), guild: GuildOption = None, yes: YesOption = False) -> None:
    guild_id = resolve_guild(guild)
    confirm(f"Delete backup {backup_id}?", yes)

    async def action(ctx):
        await ctx.api.backups.delete(guild_id, backup_id)
        return await _reload(ctx, guild_id)

    result = run_api(action)
    print_success(console, f"Backup {backup_id} deleted")
    console.print(build_backups_table(result))


@app.command()
def restore(backup_id: str = typer.Argument(...), guild: GuildOption = None, yes: YesOption = False) -> None:
    """Restore the server from a backup."""

    guild_id = resolve_guild(guild)
    confirm(f"Restore backup {backup_id}? This overwrites the current server layout.", yes)
    result = run_api(lambda ctx: ctx.api.backups.restore(guild_id, backup_id))
    print_success(console, f"Restore of {backup_id} started")
    if result:
        print_json(console, result)


@app.command()
def share(backup_id: str = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        shared = await ctx.api.backups.share(guild_id, backup_id)
        return shared, await _reload(ctx, guild_id)

    shared, backups = run_api(action)
    print_success(console, f"Backup {backup_id} shared")
    if shared:
        print_json(console, shared)
    console.print(build_backups_table(backups))


@app.command()
def download(
    backup_id: str = typer.Argument(...),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Where to write the backup JSON."),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)
    data = run_api(lambda ctx: ctx.api.backups.download(guild_id, backup_id))
    target = export_payload_json(payload=data, output_path=output or Path(f"backup-{backup_id}.json"))
    print_success(console, f"Backup written to {target}")


# ------------------------------------------------------------------- schedules


def _print_schedules(schedules) -> None:
    if not schedules:
        console.print("[dim]No backup schedules.[/dim]")
        return
    console.print(build_schedules_table(schedules))


@app.command()
def schedules(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.backups.schedules(guild_id))
    if as_json:
        print_json(console, result)
        return
    _print_schedules(result)


_UNIT_HELP = f"One of: {', '.join(FREQUENCY_UNITS)}."


@app.command("schedule-create")
def schedule_create(
    every: int = typer.Option(1, "--every", help="Frequency value."),
    unit: str = typer.Option("days", "--unit", help=_UNIT_HELP),
    start_time: str = typer.Option("00:00", "--at", help="Start time, HH:MM."),
    max_backups: int = typer.Option(7, "--keep", help="How many backups to keep."),
    timezone: str = typer.Option("UTC", "--timezone", "--tz"),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)
    draft = ScheduleDraft(
        frequency_value=every,
        frequency_unit=unit,
        start_time=start_time,
        max_backups=max_backups,
        timezone=timezone,
    )

    async def action(ctx):
        await ctx.api.backups.create_schedule(guild_id, draft.to_payload())
        return await ctx.api.backups.schedules(guild_id)

    result = run_api(action)
    print_success(console, "Schedule created")
    _print_schedules(result)


@app.command("schedule-update")
def schedule_update(
    schedule_id: int = typer.Argument(...),
    every: Optional[int] = typer.Option(None, "--every"),
    unit: Optional[str] = typer.Option(None, "--unit", help=_UNIT_HELP),
    start_time: Optional[str] = typer.Option(None, "--at"),
    max_backups: Optional[int] = typer.Option(None, "--keep"),
    timezone: Optional[str] = typer.Option(None, "--timezone", "--tz"),
    guild: GuildOption = None,
) -> None:
    """Edit a schedule; options left out keep their current value."""

    guild_id = resolve_guild(guild)

    async def action(ctx):
        current = await ctx.api.backups.schedule(guild_id, schedule_id)
        draft = ScheduleDraft.from_schedule(current)
        if every is not None:
            draft.frequency_value = every
        if unit is not None:
            draft.frequency_unit = unit
        if start_time is not None:
            draft.start_time = start_time
        if max_backups is not None:
            draft.max_backups = max_backups
        if timezone is not None:
            draft.timezone = timezone
        await ctx.api.backups.update_schedule(guild_id, schedule_id, draft.to_payload())
        return await ctx.api.backups.schedules(guild_id)

    result = run_api(action)
    print_success(console, f"Schedule {schedule_id} updated")
    _print_schedules(result)


@app.command("schedule-toggle")
def schedule_toggle(schedule_id: int = typer.Argument(...), guild: GuildOption = None) -> None:
    """Enable a disabled schedule, or disable an enabled one."""

    guild_id = resolve_guild(guild)

    async def action(ctx):
        current = await ctx.api.backups.schedule(guild_id, schedule_id)
        await ctx.api.backups.update_schedule(guild_id, schedule_id, toggle_payload(current))
        return current, await ctx.api.backups.schedules(guild_id)

    current, result = run_api(action)
    state = "disabled" if current.enabled else "enabled"
    print_success(console, f"Schedule {schedule_id} ({describe(current)}) {state}")
    _print_schedules(result)


@app.command("schedule-delete")
def schedule_delete(schedule_id: int = typer.Argument(...), guild: GuildOption = None, yes: YesOption = False) -> None:
    guild_id = resolve_guild(guild)
    confirm(f"Delete backup schedule {schedule_id}?", yes)

    async def action(ctx):
        await ctx.api.backups.delete_schedule(guild_id, schedule_id)
        return await ctx.api.backups.schedules(guild_id)

    result = run_api(action)
    print_success(console, f"Schedule {schedule_id} deleted")
    _print_schedules(result)
