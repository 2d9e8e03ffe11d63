"""CLI principal (`rkdash`).

Cada sub-aplicación corresponde a una pantalla del dashboard. El callback raíz
solo configura logging; los comandos abren su propio cliente de API.
"""

from __future__ import annotations

import typer

from cli import (
    announcements,
    auth,
    backups,
    commands,
    doctor,
    forms,
    guilds,
    leveling,
    logs,
    moderation,
    permissions,
    roles,
    server_config,
    tickets,
    tools,
    users,
)
from cli.runtime import configure_logging, console, get_settings
from cli.ui_components import print_banner

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="RuleKeeper dashboard: manage your Discord bot from the terminal.",
)

app.add_typer(auth.app, name="auth")
app.add_typer(guilds.app, name="guilds")
app.add_typer(moderation.app, name="moderation")
app.add_typer(moderation.actions_app, name="warning-actions")
app.add_typer(backups.app, name="backups")
app.add_typer(roles.app, name="roles")
app.add_typer(leveling.app, name="leveling")
app.add_typer(users.app, name="users")
app.add_typer(server_config.app, name="config")
app.add_typer(commands.app, name="commands")
app.add_typer(announcements.app, name="announcements")
app.add_typer(tickets.app, name="tickets")
app.add_typer(forms.app, name="forms")
app.add_typer(logs.app, name="logs")
app.add_typer(permissions.app, name="permissions")
app.add_typer(tools.app, name="tools")
app.add_typer(doctor.app, name="doctor")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging (HTTP requests included)."),
) -> None:
    configure_logging("DEBUG" if verbose else get_settings().log_level)


@app.command()
def banner() -> None:
    """Show the banner and the configured API."""

    print_banner(console, get_settings().api_base_url)


def run() -> None:
    app()
