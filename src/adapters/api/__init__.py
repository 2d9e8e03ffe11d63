"""Cliente tipado de la API REST de RuleKeeper (un servicio por recurso)."""

from adapters.api.client import ApiClient

__all__ = ["ApiClient"]
