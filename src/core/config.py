"""Configuración del Core.

Centraliza variables de entorno (pydantic-settings) para que la CLI y el
cliente HTTP lean la misma configuración:
- URL base de la API de RuleKeeper
- timeouts / User-Agent
- nivel de logging
- guild por defecto y ruta del fichero de sesión
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://rulekeeper.cc/api/v1/"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "rulekeeper-dashboard"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "rulekeeper-dashboard"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "rulekeeper-dashboard"
    return Path.home() / ".config" / "rulekeeper-dashboard"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        try:
            existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))
        except OSError:
            existing = {}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# RuleKeeper dashboard user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="RULEKEEPER_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        min_length=8,
        description="URL base de la API REST del bot (termina en '/').",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="rulekeeper-dashboard/1.0",
        min_length=1,
        description="User-Agent enviado a la API.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING, ERROR).",
    )
    log_http_bodies: bool = Field(
        default=False,
        description="Incluir cuerpos de request/response en los logs DEBUG.",
    )

    default_guild_id: str | None = Field(
        default=None,
        description="Guild usado cuando un comando no recibe --guild.",
    )
    session_file: Path | None = Field(
        default=None,
        description="Ruta del fichero de sesión (tokens). Por defecto en el directorio de usuario.",
    )

    @field_validator("api_base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        # httpx resuelve rutas relativas contra la base; sin '/' final se perdería el último segmento.
        value = value.strip()
        return value if value.endswith("/") else value + "/"

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    def resolved_session_file(self) -> Path:
        return self.session_file or get_user_config_dir() / "session.json"
