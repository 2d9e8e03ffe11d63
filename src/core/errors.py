"""Errores del dashboard.

Todas las excepciones propias heredan de `DashboardError`, de modo que la CLI
puede capturarlas en un único punto y mostrarlas como mensaje de error.
"""

from __future__ import annotations


class DashboardError(Exception):
    """Base de los errores de la aplicación."""


class ApiError(DashboardError):
    """La API respondió con un status no exitoso."""

    def __init__(self, status_code: int, message: str, *, path: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.path = path
        super().__init__(f"{status_code}: {message}")


class ResponseFormatError(DashboardError):
    """El cuerpo de la respuesta no tiene la forma esperada."""


class NotAuthenticatedError(DashboardError):
    """No hay sesión guardada (o falta el refresh token)."""


class InvalidInputError(DashboardError, ValueError):
    """Entrada de formulario inválida (duraciones, campos de configuración, etc.)."""


class NotFoundError(DashboardError, LookupError):
    """El recurso pedido no aparece en el listado del servidor."""
