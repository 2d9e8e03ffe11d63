"""Sesión persistida del dashboard (tokens + usuario).

Un JSON en el directorio de configuración del usuario. Sustituye al almacén de
preferencias de la app móvil: mismas claves, misma semántica de `clear`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from core.config import AppSettings
from core.domain.models import DashboardUser

logger = logging.getLogger(__name__)


class SessionData(BaseModel):
    access_token: str | None = None
    refresh_token: str | None = None
    user_id: str | None = None
    username: str | None = None
    is_admin: bool = False


class SessionStore:
    """Lectura/escritura de `session.json`.

    Implementa `TokenSource`, así que se puede pasar directamente al cliente HTTP.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._data = self._read()

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "SessionStore":
        return cls(settings.resolved_session_file())

    @property
    def data(self) -> SessionData:
        return self._data

    @property
    def is_authenticated(self) -> bool:
        return bool(self._data.access_token)

    def _read(self) -> SessionData:
        if not self.path.exists():
            return SessionData()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return SessionData.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, exc)
            return SessionData()

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = self._data.model_dump(mode="json", exclude_none=True)
        self.path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
        try:
            self.path.chmod(0o600)
        except OSError:
            logger.debug("Could not restrict permissions on %s", self.path)

    def load(self) -> SessionData:
        self._data = self._read()
        return self._data

    def get_access_token(self) -> str | None:
        return self._data.access_token

    def get_refresh_token(self) -> str | None:
        return self._data.refresh_token

    def save_tokens(self, access_token: str, refresh_token: str) -> None:
        self._data = self._data.model_copy(
            update={"access_token": access_token, "refresh_token": refresh_token}
        )
        self._write()

    def save_user(self, user: DashboardUser) -> None:
        self._data = self._data.model_copy(
            update={"user_id": user.user_id, "username": user.username, "is_admin": user.is_admin}
        )
        self._write()

    def clear(self) -> None:
        self._data = SessionData()
        if self.path.exists():
            self.path.unlink()
