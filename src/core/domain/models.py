"""Modelos del dominio (Pydantic v2).

Reflejan la forma de las respuestas de la API de RuleKeeper. Son modelos de
vista: se crean al cargar un recurso, se editan localmente y se envían de
vuelta con `model_dump(mode="json")`.

Nota:
- Los nombres de campo son las claves snake_case de la API.
- Los `null` del backend se descartan antes de validar, así los campos toman
  su valor por defecto.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.domain.fields import IdList, IntBool, JsonObjectText


class ApiModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_payload(self, *, exclude_none: bool = True) -> dict[str, Any]:
        """Cuerpo JSON listo para PUT/POST (sin claves nulas)."""

        return self.model_dump(mode="json", exclude_none=exclude_none)


# --------------------------------------------------------------------------- auth


class LoginRequest(ApiModel):
    username: str
    password: str
    use_discord: bool = False
    redirect_uri: str | None = None
    is_mobile: bool = False


class DiscordCallbackRequest(ApiModel):
    code: str = Field(..., min_length=1)
    redirect_uri: str | None = None


class RefreshTokenRequest(ApiModel):
    refresh_token: str = Field(..., min_length=1)


class DashboardUser(ApiModel):
    """Usuario autenticado en el dashboard."""

    user_id: str
    username: str
    discriminator: str | None = None
    avatar: str | None = None
    is_admin: IntBool = False
    is_head_admin: IntBool = False
    type: str = "user"
    guilds: list[str] | None = None


class LoginResponse(ApiModel):
    access_token: str | None = None
    refresh_token: str | None = None
    token_type: str | None = None
    expires_in: int | None = None
    user: DashboardUser | None = None
    oauth_url: str | None = None
    message: str | None = None
    requires_mfa: IntBool = False

    @property
    def has_tokens(self) -> bool:
        return bool(self.access_token and self.refresh_token)


# ------------------------------------------------------------------------- guilds


class Guild(ApiModel):
    guild_id: str
    name: str
    icon: str | None = None
    owner: IntBool = False
    permissions: int | None = None
    has_bot: IntBool = False


class GuildList(ApiModel):
    guilds: list[Guild] = Field(default_factory=list)
    total: int = 0


class Channel(ApiModel):
    id: str
    name: str
    type: int = 0
    position: int | None = None


class Role(ApiModel):
    id: str
    name: str
    color: int = 0
    position: int = 0
    permissions: str = "0"


# ----------------------------------------------------------------------- commands


class GuildCommand(ApiModel):
    id: int | None = None
    command_name: str
    content: str | None = None
    description: str | None = None
    ephemeral: IntBool = False
    created_at: str | None = None
    modified_at: str | None = None
    is_builtin: IntBool = False


class CommandDraft(ApiModel):
    command_name: str = Field(..., min_length=1, max_length=32)
    content: str = Field(..., min_length=1)
    description: str = ""
    ephemeral: bool = False


# -------------------------------------------------------------------------- config


class LogConfig(ApiModel):
    """Qué eventos del servidor se registran y dónde."""

    log_channel_id: str | None = None
    log_config_update: IntBool = True
    message_delete: IntBool = True
    bulk_message_delete: IntBool = True
    message_edit: IntBool = True
    invite_create: IntBool = True
    invite_delete: IntBool = True
    member_role_add: IntBool = True
    member_role_remove: IntBool = True
    member_timeout: IntBool = True
    member_warn: IntBool = True
    member_unwarn: IntBool = True
    member_ban: IntBool = True
    member_unban: IntBool = True
    member_nickname_change: IntBool = True
    role_create: IntBool = True
    role_delete: IntBool = True
    role_update: IntBool = True
    channel_create: IntBool = True
    channel_delete: IntBool = True
    channel_update: IntBool = True
    emoji_create: IntBool = True
    emoji_name_change: IntBool = True
    emoji_delete: IntBool = True
    backup_created: IntBool = True
    backup_failed: IntBool = True
    backup_deleted: IntBool = True
    backup_restored: IntBool = True
    backup_restore_failed: IntBool = True
    backup_schedule_created: IntBool = True
    backup_schedule_deleted: IntBool = True
    excluded_users: IdList = Field(default_factory=list)
    excluded_roles: IdList = Field(default_factory=list)
    excluded_channels: IdList = Field(default_factory=list)
    log_bots: IntBool = True
    log_self: IntBool = False


class WelcomeConfig(ApiModel):
    enabled: IntBool = False
    channel_id: str | None = None
    message_type: Literal["text", "embed"] = "text"
    message_content: str | None = None
    embed_title: str | None = None
    embed_description: str | None = None
    embed_color: int = 0x00FF00
    embed_thumbnail: IntBool = True
    show_server_icon: IntBool = False


class GoodbyeConfig(WelcomeConfig):
    embed_color: int = 0xFF0000


class SpamConfig(ApiModel):
    enabled: IntBool = True
    spam_threshold: int = Field(default=5, ge=1)
    spam_time_window: int = Field(default=10, ge=1, description="Ventana en segundos.")
    mention_threshold: int = Field(default=3, ge=1)
    mention_time_window: int = Field(default=30, ge=1, description="Ventana en segundos.")
    excluded_channels: IdList = Field(default_factory=list)
    excluded_roles: IdList = Field(default_factory=list)
    spam_strikes_before_warning: int = Field(default=1, ge=1)
    no_xp_duration: int = Field(default=60, ge=0, description="Segundos sin XP tras un strike.")


class LevelConfig(ApiModel):
    cooldown: int = Field(default=60, ge=0)
    xp_min: int = Field(default=15, ge=0)
    xp_max: int = Field(default=25, ge=0)
    level_channel: str | None = None
    announce_level_up: IntBool = True
    excluded_channels: IdList = Field(default_factory=list)
    xp_boost_roles: JsonObjectText = Field(
        default_factory=dict,
        description="role_id -> multiplicador de XP.",
    )
    embed_title: str = "🎉 Level Up!"
    embed_description: str = "{user} has reached level **{level}**!"
    embed_color: int = 16766720
    give_xp_to_bots: IntBool = False
    give_xp_to_self: IntBool = False
    cooldown_bypass_users: IdList = Field(default_factory=list)
    cooldown_bypass_roles: IdList = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_xp_range(self) -> "LevelConfig":
        if self.xp_min > self.xp_max:
            raise ValueError("xp_min cannot be greater than xp_max")
        return self


class BirthdayConfig(ApiModel):
    enabled: IntBool = False
    channel_id: str | None = None
    role_id: str | None = None

    def to_payload(self, *, exclude_none: bool = True) -> dict[str, Any]:
        # El endpoint espera un mapa de strings.
        return {
            "enabled": "true" if self.enabled else "false",
            "channel_id": self.channel_id or "",
            "role_id": self.role_id or "",
        }


class RestoreSettings(ApiModel):
    """Qué se restaura cuando un miembro vuelve a entrar al servidor."""

    guild_id: str
    restore_roles: IntBool = True
    restore_xp: IntBool = True
    restore_nickname: IntBool = True
    excluded_roles: IdList = Field(default_factory=list)


# ---------------------------------------------------------------------- moderation


WarningActionKind = Literal["timeout", "kick", "ban"]


class StoredWarningAction(ApiModel):
    """Fila tal como la guarda el backend.

    Se lee sin validar reglas: una fila antigua o inválida se muestra igual
    para poder corregirla desde el editor.
    """

    warning_count: int = 0
    action: str = ""
    duration_seconds: int | None = None


class WarningAction(StoredWarningAction):
    """Regla: al llegar a `warning_count` avisos se aplica `action`."""

    warning_count: int = Field(..., ge=1)
    action: WarningActionKind
    duration_seconds: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _timeout_needs_duration(self) -> "WarningAction":
        if self.action == "timeout" and self.duration_seconds is None:
            raise ValueError("timeout actions require duration_seconds")
        return self


class WarningActions(ApiModel):
    actions: list[StoredWarningAction] = Field(default_factory=list)


class MemberWarning(ApiModel):
    id: str
    user_id: str
    username: str | None = None
    reason: str | None = None
    timestamp: str | None = None
    warned_by: str | None = None
    moderator_id: str | None = None


class Ban(ApiModel):
    user_id: str
    username: str = "Unknown"
    reason: str | None = None


class BlockedWord(ApiModel):
    id: int | None = None
    word: str


# ------------------------------------------------------------------------- backups


class Backup(ApiModel):
    id: str
    guild_id: str | None = None
    created_at: int = Field(default=0, description="Epoch (segundos).")
    file_path: str | None = None
    scheduled: IntBool = False
    share_id: str | None = None


class BackupSchedule(ApiModel):
    id: int
    guild_id: str | None = None
    frequency_value: int = 1
    frequency_unit: str = "days"
    start_time: str | None = None
    start_date: str | None = None
    max_backups: int = 7
    enabled: IntBool = False
    timezone: str | None = None


# --------------------------------------------------------------------------- roles


class AutoRole(ApiModel):
    role_id: str
    role_name: str | None = None


class GameRole(ApiModel):
    id: int
    game_name: str
    role_id: str


class RoleMenuRole(ApiModel):
    role_id: str
    label: str
    description: str | None = None
    emoji: str | None = None


class RoleMenuConfig(ApiModel):
    title: str | None = None
    description: str | None = None
    roles: list[RoleMenuRole] = Field(default_factory=list)
    placeholder: str | None = None
    min_values: int = 1
    max_values: int = 1
    color: str | None = None
    style: str | None = None


RoleMenuKind = Literal["dropdown", "button", "reactionrole"]


class RoleMenu(ApiModel):
    id: str
    guild_id: str
    type: RoleMenuKind
    channel_id: str
    message_id: str | None = None
    config: RoleMenuConfig | None = None
    created_by: str | None = None
    created_at: str | None = None


class RoleMenuDraft(ApiModel):
    guild_id: str
    type: RoleMenuKind
    channel_id: str
    config: RoleMenuConfig = Field(default_factory=RoleMenuConfig)


class RoleMenuUpdate(ApiModel):
    type: RoleMenuKind | None = None
    channel_id: str | None = None
    config: RoleMenuConfig | None = None


# ----------------------------------------------------------------------- community


class LeaderboardEntry(ApiModel):
    user_id: str
    username: str = "Unknown"
    xp: float = 0.0
    level: int = 0


class LevelReward(ApiModel):
    level: int = Field(..., ge=1)
    role_id: str


class MemberRecord(ApiModel):
    user_id: str
    username: str = "Unknown"
    discriminator: str | None = None
    xp: float = 0.0
    level: int = 0
    last_message: int | None = None
    joined_at: str | None = None
    birthday: str | None = None


class Birthday(ApiModel):
    user_id: str
    username: str | None = None
    birthday: str


# ------------------------------------------------------------------- announcements


class TwitchAnnouncement(ApiModel):
    id: int
    streamer_id: str
    channel_id: str
    role_id: str | None = None
    message: str = ""
    enabled: IntBool = True


class TwitchAnnouncementDraft(ApiModel):
    streamer_id: str = Field(..., min_length=1)
    channel_id: str = Field(..., min_length=1)
    role_id: str | None = None
    message: str = ""


class TwitchAnnouncementUpdate(ApiModel):
    streamer_id: str | None = None
    channel_id: str | None = None
    role_id: str | None = None
    message: str | None = None
    enabled: bool | None = None


class YouTubeAnnouncement(ApiModel):
    id: int
    channel_id_yt: str
    channel_id: str
    role_id: str | None = None
    message: str = ""
    enabled: IntBool = True


class YouTubeAnnouncementDraft(ApiModel):
    channel_id_yt: str = Field(..., min_length=1)
    channel_id: str = Field(..., min_length=1)
    role_id: str | None = None
    message: str = ""


class YouTubeAnnouncementUpdate(ApiModel):
    channel_id_yt: str | None = None
    channel_id: str | None = None
    role_id: str | None = None
    message: str | None = None
    enabled: bool | None = None


# ------------------------------------------------------------ tickets / forms / logs


class Ticket(ApiModel):
    id: str
    user_id: str | None = None
    username: str | None = None
    channel_id: str | None = None
    subject: str | None = None
    category: str | None = None
    status: str | None = None
    created_at: str | None = None


class FormSummary(ApiModel):
    id: str
    name: str
    description: str | None = None
    enabled: IntBool = True


class ServerLogEntry(ApiModel):
    id: str
    type: str = ""
    action: str | None = None
    user_id: str | None = None
    user_name: str | None = None
    moderator_id: str | None = None
    moderator_name: str | None = None
    channel_id: str | None = None
    channel_name: str | None = None
    details: Any = None
    timestamp: str | None = None
