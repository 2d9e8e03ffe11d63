"""Plumbing shared by every CLI command.

- settings / session loading
- logging setup (rich)
- `run_api`: open the API client, run one action, turn failures into the red
  error line + exit code 1
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Awaitable, Callable, Optional, TypeVar

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.api import ApiClient
from cli.ui_components import print_error
from core.config import AppSettings
from core.errors import DashboardError
from core.session import SessionStore

T = TypeVar("T")

console = Console()
err_console = Console(stderr=True)

GuildOption = Annotated[
    Optional[str],
    typer.Option("--guild", "-g", help="Guild id (defaults to RULEKEEPER_DEFAULT_GUILD_ID)."),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Print raw JSON instead of a table.")]
YesOption = Annotated[bool, typer.Option("--yes", "-y", help="Skip the confirmation prompt.")]


@dataclass
class DashboardContext:
    settings: AppSettings
    session: SessionStore
    api: ApiClient


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        print_error(err_console, f"Invalid configuration: {exc}")
        raise typer.Exit(2) from exc


def configure_logging(level: str) -> None:
    handler = RichHandler(console=err_console, show_path=False, rich_tracebacks=False)
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True)
    # httpx/httpcore loguean cada conexión en DEBUG; ya tenemos nuestros hooks.
    logging.getLogger("httpcore").setLevel(max(logging.getLevelName(level), logging.INFO))


def resolve_guild(guild: str | None) -> str:
    guild_id = (guild or get_settings().default_guild_id or "").strip()
    if not guild_id:
        raise typer.BadParameter("No guild given. Pass --guild or set RULEKEEPER_DEFAULT_GUILD_ID.")
    return guild_id


def open_api(settings: AppSettings, session: SessionStore) -> ApiClient:
    return ApiClient(settings, token_source=session)


def run_api(action: Callable[[DashboardContext], Awaitable[T]]) -> T:
    """Ejecuta `action` con un cliente abierto; cualquier fallo termina en exit 1."""

    settings = get_settings()
    session = SessionStore.from_settings(settings)

    async def _run() -> T:
        async with open_api(settings, session) as api:
            return await action(DashboardContext(settings=settings, session=session, api=api))

    try:
        return asyncio.run(_run())
    except (DashboardError, httpx.HTTPError) as exc:
        print_error(err_console, exc)
        raise typer.Exit(1) from exc


def confirm(message: str, yes: bool) -> None:
    if yes:
        return
    if not typer.confirm(message, default=False):
        raise typer.Abort()
