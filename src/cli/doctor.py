"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from cli import runtime
from cli.runtime import get_settings
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.errors import DashboardError
from core.session import SessionStore

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get("")
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


async def _check_token(settings: AppSettings, session: SessionStore) -> tuple[bool, str]:
    try:
        async with runtime.open_api(settings, session) as api:
            await api.auth.verify()
        return True, "Token accepted"
    except (DashboardError, httpx.HTTPError) as exc:
        return False, str(exc)


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip network checks."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = get_settings()
    session = SessionStore.from_settings(settings)

    table = Table(title="RuleKeeper Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base URL", "OK", settings.api_base_url)
    table.add_row("User config", "OK", str(get_user_env_file()))
    if settings.default_guild_id:
        table.add_row("Default guild", "OK", settings.default_guild_id)
    else:
        table.add_row("Default guild", "OPTIONAL", "Not set -> pass --guild to every command")

    # Session
    if session.is_authenticated:
        user = session.data.username or "unknown user"
        table.add_row("Session", "OK", f"{user} ({session.path})")
    else:
        table.add_row("Session", "MISSING", "Run `rkdash auth login`")

    ok_http = ok_token = True
    if not offline:
        ok_http, detail_http = asyncio.run(_check_http(settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)
        if session.is_authenticated and ok_http:
            ok_token, detail_token = asyncio.run(_check_token(settings, session))
            table.add_row("Token", "OK" if ok_token else "FAIL", detail_token)

    _console.print(table)

    if not ok_token:
        _console.print("\n[yellow]Note:[/yellow] Try `rkdash auth refresh`, or log in again.")
    if not ok_http:
        raise typer.Exit(1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = get_settings()
    base_url = typer.prompt("API base URL", default=current.api_base_url, show_default=True).strip()
    guild_id = typer.prompt(
        "Default guild id (empty keeps current, 'none' clears)",
        default=current.default_guild_id or "",
        show_default=bool(current.default_guild_id),
    ).strip()

    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("API base URL must start with http:// or https://")

    env_path = write_user_env_vars(
        {
            "RULEKEEPER_API_BASE_URL": base_url,
            "RULEKEEPER_DEFAULT_GUILD_ID": "" if guild_id.lower() == "none" else (guild_id or None),
        }
    )
    get_settings.cache_clear()

    _console.print(f"[green]Saved config to:[/green] {env_path}")
