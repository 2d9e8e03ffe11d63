"""`rkdash logs`: server event log."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from adapters.json_exporter import export_payload_json
from cli.runtime import GuildOption, JsonOption, console, resolve_guild, run_api
from cli.ui_components import build_records_table, print_json, print_success

app = typer.Typer(no_args_is_help=True, help="Server event log.")


@app.command("list")
def list_logs(
    log_type: Optional[str] = typer.Option(None, "--type", "-t", help="Only entries of this type."),
    limit: int = typer.Option(100, "--limit", "-n", min=1),
    guild: GuildOption = None,
    as_json: JsonOption = False,
) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.logs.list(guild_id, log_type=log_type, limit=limit))
    if as_json:
        print_json(console, result)
        return
    columns = ["id", "timestamp", "type", "action", "user_name", "moderator_name", "channel_name"]
    console.print(build_records_table(f"Logs ({len(result)})", result, columns))


@app.command()
def types(guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)
    for name in run_api(lambda ctx: ctx.api.logs.types(guild_id)):
        console.print(f"- {name}")


@app.command()
def show(log_id: str = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)
    print_json(console, run_api(lambda ctx: ctx.api.logs.detail(guild_id, log_id)))


@app.command()
def stats(days: int = typer.Option(7, "--days", min=1), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)
    print_json(console, run_api(lambda ctx: ctx.api.logs.stats(guild_id, days=days)))


@app.command("export")
def export_logs(
    log_type: Optional[str] = typer.Option(None, "--type", "-t"),
    output: Path = typer.Option(Path("logs.json"), "--output", "-o"),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)
    data = run_api(lambda ctx: ctx.api.logs.export(guild_id, log_type=log_type))
    print_success(console, f"Logs exported to {export_payload_json(payload=data, output_path=output)}")
