"""Contrato de origen de tokens.

El cliente HTTP no sabe dónde vive la sesión: solo pide el access token en el
momento de enviar cada request (así un login/refresh se ve en la siguiente
llamada sin reconstruir el cliente).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TokenSource(Protocol):
    """Contrato mínimo para proveer el bearer token."""

    def get_access_token(self) -> str | None:
        """Devuelve el access token vigente o `None` si no hay sesión."""

        ...


class StaticTokenSource:
    """Token fijo (scripts, tests o `--token` en la CLI)."""

    def __init__(self, token: str | None) -> None:
        self._token = token

    def get_access_token(self) -> str | None:
        return self._token
