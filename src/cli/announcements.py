"""`rkdash announcements`: Twitch / YouTube go-live announcements."""

from __future__ import annotations

from enum import Enum
from typing import Optional

import typer

from adapters.api.announcements import DRAFT_MODELS
from cli.runtime import GuildOption, JsonOption, YesOption, confirm, console, resolve_guild, run_api
from cli.ui_components import build_records_table, print_json, print_success
from core.errors import InvalidInputError, NotFoundError

app = typer.Typer(no_args_is_help=True, help="Twitch and YouTube announcements.")


class Platform(str, Enum):
    twitch = "twitch"
    youtube = "youtube"


# Campo que identifica al canal/streamer de origen en cada plataforma.
_SOURCE_FIELD = {Platform.twitch: "streamer_id", Platform.youtube: "channel_id_yt"}

PlatformArg = typer.Argument(..., help="twitch or youtube.")


def _service(api, platform: Platform):
    return api.twitch if platform is Platform.twitch else api.youtube


def _print(platform: Platform, items) -> None:
    columns = ["id", _SOURCE_FIELD[platform], "channel_id", "role_id", "enabled", "message"]
    console.print(build_records_table(f"{platform.value.title()} announcements ({len(items)})", items, columns))


@app.command("list")
def list_announcements(
    platform: Platform = PlatformArg,
    guild: GuildOption = None,
    as_json: JsonOption = False,
) -> None:
    guild_id = resolve_guild(guild)
    result = run_api(lambda ctx: _service(ctx.api, platform).list(guild_id))
    if as_json:
        print_json(console, result)
        return
    _print(platform, result)


@app.command()
def add(
    platform: Platform = PlatformArg,
    source: str = typer.Argument(..., help="Twitch login or YouTube channel id."),
    channel_id: str = typer.Argument(..., help="Discord channel that receives the announcement."),
    role_id: Optional[str] = typer.Option(None, "--role", help="Role to ping."),
    message: str = typer.Option("", "--message", "-m"),
    guild: GuildOption = None,
) -> None:
    guild_id = resolve_guild(guild)
    draft_model, _ = DRAFT_MODELS[platform.value]

    async def action(ctx):
        try:
            draft = draft_model(
                **{_SOURCE_FIELD[platform]: source},
                channel_id=channel_id,
                role_id=role_id,
                message=message,
            )
        except ValueError as exc:
            raise InvalidInputError("Source and channel are required") from exc
        service = _service(ctx.api, platform)
        await service.add(guild_id, draft)
        return await service.list(guild_id)

    result = run_api(action)
    print_success(console, f"{platform.value.title()} announcement added")
    _print(platform, result)


@app.command()
def update(
    platform: Platform = PlatformArg,
    announcement_id: int = typer.Argument(...),
    source: Optional[str] = typer.Option(None, "--source"),
    channel_id: Optional[str] = typer.Option(None, "--channel"),
    role_id: Optional[str] = typer.Option(None, "--role"),
    message: Optional[str] = typer.Option(None, "--message", "-m"),
    guild: GuildOption = None,
) -> None:
    """Change some fields; the ones not given are left untouched."""

    guild_id = resolve_guild(guild)
    _, update_model = DRAFT_MODELS[platform.value]
    update_body = update_model(
        **{_SOURCE_FIELD[platform]: source},
        channel_id=channel_id,
        role_id=role_id,
        message=message,
    )

    async def action(ctx):
        service = _service(ctx.api, platform)
        await service.update(guild_id, announcement_id, update_body)
        return await service.list(guild_id)

    result = run_api(action)
    print_success(console, f"Announcement {announcement_id} updated")
    _print(platform, result)


@app.command()
def toggle(
    platform: Platform = PlatformArg,
    announcement_id: int = typer.Argument(...),
    guild: GuildOption = None,
) -> None:
    """Enable or disable an announcement."""

    guild_id = resolve_guild(guild)

    async def action(ctx):
        service = _service(ctx.api, platform)
        current = next((a for a in await service.list(guild_id) if a.id == announcement_id), None)
        if current is None:
            raise NotFoundError(f"Announcement {announcement_id} not found")
        await service.set_enabled(guild_id, announcement_id, not current.enabled)
        return await service.list(guild_id)

    result = run_api(action)
    print_success(console, f"Announcement {announcement_id} toggled")
    _print(platform, result)


@app.command()
def delete(
    platform: Platform = PlatformArg,
    announcement_id: int = typer.Argument(...),
    guild: GuildOption = None,
    yes: YesOption = False,
) -> None:
    guild_id = resolve_guild(guild)
    confirm(f"Delete {platform.value} announcement {announcement_id}?", yes)

    async def action(ctx):
        service = _service(ctx.api, platform)
        await service.delete(guild_id, announcement_id)
        return await service.list(guild_id)

    result = run_api(action)
    print_success(console, f"Announcement {announcement_id} deleted")
    _print(platform, result)
