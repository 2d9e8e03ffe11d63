"""Componentes de UI para CLI (Rich).

Tablas y paneles reutilizados por los comandos; cada "pantalla" del dashboard
se compone con estas piezas.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Iterable, Sequence

from pydantic import BaseModel
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.durations import format_duration
from core.domain.leveling import describe_progress
from core.domain.models import (
    Backup,
    BackupSchedule,
    Ban,
    Guild,
    LeaderboardEntry,
    MemberRecord,
    MemberWarning,
    StoredWarningAction,
)
from core.errors import ApiError


def print_banner(console: Console, subtitle: str | None = None) -> None:
    title = Text("RuleKeeper Dashboard", style="bold cyan")
    sub = Text(subtitle or "Moderation • Leveling • Backups", style="dim")
    body = Align.center(Text.assemble(title, "\n", sub), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_error(console: Console, error: BaseException | str) -> None:
    """Banner de error: una línea roja con el mensaje."""

    message = str(error) or error.__class__.__name__
    console.print(f"[bold red]Error:[/bold red] {message}", highlight=False)
    if isinstance(error, ApiError) and error.status_code == 401:
        console.print("[dim]Session expired or missing. Run `rkdash auth login` or `rkdash auth refresh`.[/dim]")


def print_success(console: Console, message: str) -> None:
    console.print(f"[green]✔[/green] {message}", highlight=False)


def print_json(console: Console, payload: Any) -> None:
    from adapters.json_exporter import dumps_stable

    console.print_json(dumps_stable(payload))


def format_timestamp(value: int | float | str | None) -> str:
    if value is None or value == "":
        return "-"
    if isinstance(value, (int, float)):
        # Epoch en segundos o milisegundos según magnitud.
        seconds = value / 1000 if value > 10**11 else value
        return datetime.fromtimestamp(seconds, tz=timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    return str(value)


def progress_bar(fraction: float, width: int = 20) -> str:
    filled = int(round(max(0.0, min(1.0, fraction)) * width))
    return "█" * filled + "░" * (width - filled)


def on_off(value: bool) -> str:
    return "[green]on[/green]" if value else "[red]off[/red]"


def build_config_panel(title: str, model: BaseModel) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", no_wrap=True)
    table.add_column()
    for name, value in model.model_dump().items():
        if isinstance(value, bool):
            shown = on_off(value)
        elif isinstance(value, (list, dict)):
            shown = json.dumps(value, ensure_ascii=False) if value else "[dim]-[/dim]"
        elif value is None:
            shown = "[dim]-[/dim]"
        else:
            shown = str(value)
        table.add_row(name, shown)
    return Panel(table, title=Text(title, style="bold"), border_style="cyan")


def build_guilds_table(guilds: Sequence[Guild]) -> Table:
    table = Table(title=f"Guilds ({len(guilds)})")
    table.add_column("Guild ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Owner")
    table.add_column("Bot")
    for guild in guilds:
        table.add_row(guild.guild_id, guild.name, "yes" if guild.owner else "", on_off(guild.has_bot))
    return table


def build_warnings_table(warnings: Sequence[MemberWarning]) -> Table:
    table = Table(title=f"Warnings ({len(warnings)})")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("User", style="cyan")
    table.add_column("Reason", style="white")
    table.add_column("By", style="magenta")
    table.add_column("When", style="dim")
    for w in warnings:
        user = f"{w.username} ({w.user_id})" if w.username else w.user_id
        table.add_row(w.id, user, w.reason or "No reason", w.warned_by or w.moderator_id or "-", w.timestamp or "-")
    return table


def build_bans_table(bans: Sequence[Ban]) -> Table:
    table = Table(title=f"Bans ({len(bans)})")
    table.add_column("User ID", style="cyan", no_wrap=True)
    table.add_column("Username")
    table.add_column("Reason", style="dim")
    for ban in bans:
        table.add_row(ban.user_id, ban.username, ban.reason or "No reason")
    return table


def build_warning_actions_table(actions: Sequence[StoredWarningAction]) -> Table:
    table = Table(title="Warning actions")
    table.add_column("Warnings", style="cyan", justify="right")
    table.add_column("Action", style="bold")
    table.add_column("Duration")
    for action in actions:
        table.add_row(str(action.warning_count), action.action, format_duration(action.duration_seconds) or "-")
    return table


def build_backups_table(backups: Sequence[Backup]) -> Table:
    table = Table(title=f"Backups ({len(backups)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Created")
    table.add_column("Type")
    table.add_column("Shared", style="dim")
    for backup in backups:
        table.add_row(
            backup.id,
            format_timestamp(backup.created_at),
            "scheduled" if backup.scheduled else "manual",
            backup.share_id or "-",
        )
    return table


def build_schedules_table(schedules: Sequence[BackupSchedule]) -> Table:
    table = Table(title=f"Backup schedules ({len(schedules)})")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Frequency")
    table.add_column("Start")
    table.add_column("Keep", justify="right")
    table.add_column("Timezone", style="dim")
    table.add_column("Enabled")
    for s in schedules:
        table.add_row(
            str(s.id),
            f"Every {s.frequency_value} {s.frequency_unit}",
            s.start_time or "-",
            str(s.max_backups),
            s.timezone or "-",
            on_off(s.enabled),
        )
    return table


def build_leaderboard_table(entries: Sequence[LeaderboardEntry]) -> Table:
    table = Table(title="Leaderboard")
    table.add_column("#", justify="right", style="dim")
    table.add_column("User", style="cyan")
    table.add_column("Level", justify="right", style="bold")
    table.add_column("XP", justify="right")
    table.add_column("Progress")
    for rank, entry in enumerate(entries, start=1):
        progress = describe_progress(entry.level, entry.xp)
        table.add_row(
            str(rank),
            entry.username,
            str(entry.level),
            f"{entry.xp:,.0f}",
            f"{progress_bar(progress.fraction)} {progress.percent}%",
        )
    return table


def build_members_table(members: Sequence[MemberRecord]) -> Table:
    table = Table(title=f"Members ({len(members)})")
    table.add_column("User ID", style="cyan", no_wrap=True)
    table.add_column("Username")
    table.add_column("Level", justify="right")
    table.add_column("XP", justify="right")
    table.add_column("Last message", style="dim")
    for m in members:
        table.add_row(m.user_id, m.username, str(m.level), f"{m.xp:,.0f}", format_timestamp(m.last_message))
    return table


def build_member_panel(member: MemberRecord) -> Panel:
    progress = describe_progress(member.level, member.xp)
    body = Text()
    body.append(f"{member.username}", style="bold")
    body.append(f"  ({member.user_id})\n\n", style="dim")
    body.append(f"Level {member.level}   XP {member.xp:,.0f}\n")
    body.append(f"{progress_bar(progress.fraction, 30)} {progress.percent}%\n")
    body.append(f"{progress.remaining:,.0f} XP to level {member.level + 1}\n", style="dim")
    if member.joined_at:
        body.append(f"\nJoined: {member.joined_at}")
    if member.birthday:
        body.append(f"\nBirthday: {member.birthday}")
    return Panel(body, title=Text("Member", style="bold yellow"), border_style="yellow")


def build_records_table(
    title: str,
    rows: Iterable[BaseModel | dict[str, Any]],
    columns: Sequence[str],
) -> Table:
    """Tabla genérica: una columna por clave de `columns`."""

    table = Table(title=title)
    for i, column in enumerate(columns):
        table.add_column(column, style="cyan" if i == 0 else None, no_wrap=(i == 0))
    for row in rows:
        data = row.model_dump() if isinstance(row, BaseModel) else row
        cells = []
        for column in columns:
            value = data.get(column)
            if isinstance(value, bool):
                cells.append(on_off(value))
            elif isinstance(value, (list, dict)):
                cells.append(json.dumps(value, ensure_ascii=False))
            else:
                cells.append("-" if value is None else str(value))
        table.add_row(*cells)
    return table
