"""`rkdash forms`: forms and their submissions."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from adapters.json_exporter import export_payload_json, load_payload_json
from cli.runtime import GuildOption, JsonOption, YesOption, confirm, console, resolve_guild, run_api
from cli.ui_components import build_records_table, print_json, print_success
from core.errors import InvalidInputError

app = typer.Typer(no_args_is_help=True, help="Forms and submissions.")


def _print_forms(forms) -> None:
    console.print(build_records_table(f"Forms ({len(forms)})", forms, ["id", "name", "enabled", "description"]))


def _form_body(source: Path) -> dict:
    body = load_payload_json(source)
    if not isinstance(body, dict):
        raise InvalidInputError(f"{source} must contain a JSON object")
    return body


@app.command("list")
def list_forms(guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.forms.list(guild_id))
    if as_json:
        print_json(console, result)
        return
    _print_forms(result)


@app.command()
def show(form_id: str = typer.Argument(...), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)
    print_json(console, run_api(lambda ctx: ctx.api.forms.get(guild_id, form_id)))


@app.command()
def create(source: Path = typer.Argument(..., help="JSON file with the form definition."), guild: GuildOption = None) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.forms.create(guild_id, _form_body(source))
        return await ctx.api.forms.list(guild_id)

    result = run_api(action)
    print_success(console, "Form created")
    _print_forms(result)


@app.command()
def update(
    form_id: str = typer.Argument(...),
    source: Path = typer.Argument(..., help="JSON file with the form definition."),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)

    async def action(ctx):
        await ctx.api.forms.update(guild_id, form_id, _form_body(source))
        return await ctx.api.forms.list(guild_id)

    result = run_api(action)
    print_success(console, f"Form {form_id} updated")
    _print_forms(result)


@app.command()
def delete(form_id: str = typer.Argument(...), guild: GuildOption = None, yes: YesOption = False) -> None:
    guild_id = resolve_guild(guild)
    confirm(f"Delete form {form_id} and all its submissions?", yes)

    async def action(ctx):
        await ctx.api.forms.delete(guild_id, form_id)
        return await ctx.api.forms.list(guild_id)

    result = run_api(action)
    print_success(console, f"Form {form_id} deleted")
    _print_forms(result)


@app.command()
def submissions(form_id: str = typer.Argument(...), guild: GuildOption = None, as_json: JsonOption = False) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: ctx.api.forms.submissions(guild_id, form_id))
    if as_json or not isinstance(result, list):
        print_json(console, result)
        return
    columns = ["id", "user_id", "username", "status", "submitted_at"]
    console.print(build_records_table(f"Submissions ({len(result)})", result, columns))


@app.command()
def submission(
    form_id: str = typer.Argument(...),
    submission_id: str = typer.Argument(...),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)
    print_json(console, run_api(lambda ctx: ctx.api.forms.submission(guild_id, form_id, submission_id)))


@app.command("delete-submission")
def delete_submission(
    form_id: str = typer.Argument(...),
    submission_id: str = typer.Argument(...),
    guild: GuildOption = None,
    yes: YesOption = False,
) -> None:
    guild_id = resolve_guild(guild)
    confirm(f"Delete submission {submission_id}?", yes)
    run_api(lambda ctx: ctx.api.forms.delete_submission(guild_id, form_id, submission_id))
    print_success(console, f"Submission {submission_id} deleted")


@app.command("export")
def export_submissions(
    form_id: str = typer.Argument(...),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)
    data = run_api(lambda ctx: ctx.api.forms.export_submissions(guild_id, form_id))
    target = export_payload_json(payload=data, output_path=output or Path(f"form-{form_id}-submissions.json"))
    print_success(console, f"Submissions exported to {target}")
