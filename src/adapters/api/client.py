"""Cliente de la API de RuleKeeper.

Un único `httpx.AsyncClient` compartido por todos los servicios. Se usa como
context manager:

    async with ApiClient(settings, token_source=session) as api:
        guilds = await api.guilds.list()
"""

from __future__ import annotations

from types import TracebackType

import httpx

from adapters.api.announcements import twitch_service, youtube_service
from adapters.api.auth import AuthService
from adapters.api.backups import BackupsService
from adapters.api.commands import CommandService
from adapters.api.config import ConfigService
from adapters.api.forms import FormsService
from adapters.api.guilds import GuildService
from adapters.api.logs import LogsService
from adapters.api.moderation import ModerationService
from adapters.api.permissions import PermissionsService
from adapters.api.roles import RoleMenuService, RoleService
from adapters.api.tickets import TicketsService
from adapters.api.users import UsersService
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.interfaces.token_source import TokenSource


class ApiClient:
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        token_source: TokenSource | None = None,
        http: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self._owns_http = http is None
        self.http = http or build_async_client(self.settings, token_source=token_source, transport=transport)

        self.auth = AuthService(self.http)
        self.guilds = GuildService(self.http)
        self.commands = CommandService(self.http)
        self.config = ConfigService(self.http)
        self.moderation = ModerationService(self.http)
        self.backups = BackupsService(self.http)
        self.roles = RoleService(self.http)
        self.role_menus = RoleMenuService(self.http)
        self.users = UsersService(self.http)
        self.twitch = twitch_service(self.http)
        self.youtube = youtube_service(self.http)
        self.tickets = TicketsService(self.http)
        self.forms = FormsService(self.http)
        self.logs = LogsService(self.http)
        self.permissions = PermissionsService(self.http)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
