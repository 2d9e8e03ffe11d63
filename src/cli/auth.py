"""`rkdash auth`: login, OAuth callback, refresh, logout."""

from __future__ import annotations

from typing import Optional

import typer
from rich.panel import Panel

from cli.runtime import DashboardContext, console, get_settings, run_api
from cli.ui_components import print_json, print_success
from core.domain.models import LoginResponse
from core.services.auth_flow import AuthFlow
from core.session import SessionStore

app = typer.Typer(no_args_is_help=True, help="Log in and manage the stored session.")


def _flow(ctx: DashboardContext) -> AuthFlow:
    return AuthFlow(ctx.api.auth, ctx.session)


def _report(response: LoginResponse) -> None:
    if response.has_tokens:
        name = response.user.username if response.user else "unknown user"
        print_success(console, f"Logged in as [bold]{name}[/bold]")
    elif response.requires_mfa:
        console.print("[yellow]This account requires MFA; finish the login in the web dashboard.[/yellow]")
    elif response.oauth_url:
        console.print(Panel(response.oauth_url, title="Open this URL to authorize with Discord", border_style="cyan"))
        console.print("Then run [bold]rkdash auth discord-callback CODE[/bold] with the code you get back.")
    else:
        console.print(f"[yellow]{response.message or 'Login did not return a session.'}[/yellow]")


@app.command()
def login(
    username: str = typer.Option(..., "--username", "-u", prompt=True),
    password: str = typer.Option(..., "--password", "-p", prompt=True, hide_input=True),
    discord: bool = typer.Option(False, "--discord", help="Start the Discord OAuth flow instead."),
    redirect_uri: Optional[str] = typer.Option(None, "--redirect-uri"),
) -> None:
    """Log in with dashboard credentials."""

    response = run_api(
        lambda ctx: _flow(ctx).login(username, password, use_discord=discord, redirect_uri=redirect_uri)
    )
    _report(response)


@app.command("discord-callback")
def discord_callback(
    code: str = typer.Argument(..., help="Authorization code returned by Discord."),
    redirect_uri: Optional[str] = typer.Option(None, "--redirect-uri"),
) -> None:
    """Exchange a Discord OAuth code for a session."""

    response = run_api(lambda ctx: _flow(ctx).discord_callback(code, redirect_uri=redirect_uri))
    _report(response)


@app.command()
def refresh() -> None:
    """Get a new access token using the stored refresh token."""

    run_api(lambda ctx: _flow(ctx).refresh())
    print_success(console, "Access token refreshed")


@app.command()
def verify() -> None:
    """Ask the API whether the stored token is still valid."""

    result = run_api(lambda ctx: _flow(ctx).verify())
    print_json(console, result)


@app.command()
def logout() -> None:
    """Log out (server side best effort) and forget the local session."""

    run_api(lambda ctx: _flow(ctx).logout())
    print_success(console, "Logged out")


@app.command()
def whoami() -> None:
    """Show the locally stored session."""

    session = SessionStore.from_settings(get_settings())
    if not session.is_authenticated:
        console.print("[yellow]Not logged in.[/yellow]")
        raise typer.Exit(1)
    data = session.data
    admin = " [magenta](admin)[/magenta]" if data.is_admin else ""
    console.print(f"[bold]{data.username or 'unknown'}[/bold] ({data.user_id or '-'}){admin}")
    console.print(f"[dim]{session.path}[/dim]")
