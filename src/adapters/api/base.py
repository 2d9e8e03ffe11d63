"""Base común de los servicios de la API.

Cada servicio agrupa los endpoints de un recurso (guilds, backups, roles...).
Aquí se resuelve lo repetido: construir rutas, enviar la request, convertir
status no exitosos en `ApiError` y validar el cuerpo contra un modelo.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from core.errors import ApiError, ResponseFormatError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_ERROR_KEYS: tuple[str, ...] = ("detail", "error", "message")


def seg(value: object) -> str:
    """Escapa un segmento de ruta (ids, nombres de comando)."""

    return quote(str(value), safe="")


def error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        for key in _ERROR_KEYS:
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    text = response.text.strip() if response.content else ""
    if text and len(text) <= 200 and not text.startswith("<"):
        return text
    return response.reason_phrase or "request failed"


def parse_model(model: type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ResponseFormatError(f"Unexpected {model.__name__} payload: {exc}") from exc


def parse_list(model: type[ModelT], data: Any, *, key: str | None = None) -> list[ModelT]:
    """Valida una lista de `model`. Con `key`, la lista viene envuelta: `{"<key>": [...]}`."""

    if key is not None:
        if not isinstance(data, dict):
            raise ResponseFormatError(f"Expected an object with '{key}', got {type(data).__name__}")
        data = data.get(key) or []
    try:
        return TypeAdapter(list[model]).validate_python(data)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise ResponseFormatError(f"Unexpected {model.__name__} list payload: {exc}") from exc


class ApiService:
    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        response = await self._http.request(method, path, json=json, params=params or None)
        if not response.is_success:
            message = error_message(response)
            logger.info("%s %s failed: %s %s", method, path, response.status_code, message)
            raise ApiError(response.status_code, message, path=path)
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise ResponseFormatError(f"{method} {path} returned a non-JSON body") from exc

    async def _get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def _post(self, path: str, json: Any = None) -> Any:
        return await self._request("POST", path, json=json if json is not None else {})

    async def _put(self, path: str, json: Any) -> Any:
        return await self._request("PUT", path, json=json)

    async def _delete(self, path: str, json: Any = None) -> Any:
        return await self._request("DELETE", path, json=json)
