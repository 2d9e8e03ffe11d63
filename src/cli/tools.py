"""`rkdash tools`: offline helpers (no API calls)."""

from __future__ import annotations

import typer

from cli.runtime import console, err_console
from cli.ui_components import print_error, progress_bar
from core.domain.durations import format_duration, parse_duration
from core.domain.leveling import describe_progress

app = typer.Typer(no_args_is_help=True, help="Offline helpers: durations and level math.")


@app.command()
def duration(value: str = typer.Argument(..., help="Duration like 90, 30m, 2h, 1d, 1w; or seconds.")) -> None:
    """Parse a duration and print it in seconds and in its canonical form."""

    seconds = parse_duration(value)
    if seconds is None:
        print_error(err_console, f"Invalid duration format: {value}")
        raise typer.Exit(1)
    console.print(f"{seconds} seconds = {format_duration(seconds)}")


@app.command("level-progress")
def level_progress(
    level: int = typer.Argument(..., min=0),
    xp: float = typer.Argument(..., min=0),
) -> None:
    """Show how far `xp` is between `level` and the next one."""

    progress = describe_progress(level, xp)
    console.print(f"Level {level}: {progress.floor:,.0f} XP -> level {level + 1}: {progress.ceiling:,.0f} XP")
    console.print(f"{progress_bar(progress.fraction, 30)} {progress.percent}%")
    console.print(f"{progress.remaining:,.0f} XP to go")
