"""Tipos anotados para campos "raros" del backend.

El backend del bot guarda booleanos como enteros de SQLite (0/1) y listas de
ids como texto JSON. Estos tipos normalizan ambas formas al leer y devuelven
la forma que la API acepta al escribir (`model_dump(mode="json")`).
"""

from __future__ import annotations

import json
from typing import Annotated, Any, Iterable

from pydantic import BeforeValidator, PlainSerializer


def coerce_int_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        text = value.strip()
        return text.lower() == "true" or text == "1"
    return False


def _stringify(item: Any) -> str | None:
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    if isinstance(item, (str, int, float)):
        return str(item)
    return None


def decode_id_list(value: Any) -> list[str]:
    """Normaliza una lista de ids.

    Acepta:
    - lista JSON (`["1", 2]`); valores anidados se descartan
    - texto con una lista JSON (`'["1","2"]'`)
    - texto separado por comas (`"1, 2"`)
    - `None` / texto vacío -> `[]`
    """

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        out: list[str] = []
        for item in value:
            text = _stringify(item)
            if text is not None:
                out.append(text)
        return out
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        if text.startswith("["):
            try:
                parsed = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ValueError(f"invalid JSON id list: {exc.msg}") from exc
            return decode_id_list(parsed)
        return [part.strip() for part in text.split(",") if part.strip()]
    raise ValueError(f"expected a list of ids, got {type(value).__name__}")


def encode_id_list(ids: Iterable[str]) -> str:
    """`["1", "2"]` -> `'["1","2"]'` (texto JSON compacto)."""

    return json.dumps([str(i) for i in ids], separators=(",", ":"))


def decode_json_object(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    if isinstance(value, list) and not value:
        return {}
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return {}
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid JSON object: {exc.msg}") from exc
        return decode_json_object(parsed)
    raise ValueError(f"expected a JSON object, got {type(value).__name__}")


def encode_json_object(data: dict[str, Any]) -> str:
    return json.dumps(data, separators=(",", ":"), sort_keys=True)


IntBool = Annotated[bool, BeforeValidator(coerce_int_bool)]

IdList = Annotated[
    list[str],
    BeforeValidator(decode_id_list),
    PlainSerializer(encode_id_list, return_type=str, when_used="json"),
]

JsonObjectText = Annotated[
    dict[str, float],
    BeforeValidator(decode_json_object),
    PlainSerializer(encode_json_object, return_type=str, when_used="json"),
]
