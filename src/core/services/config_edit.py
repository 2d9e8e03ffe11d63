"""Edición genérica de documentos de configuración a partir de `campo=valor`."""

from __future__ import annotations

from typing import Iterable, TypeVar, get_origin

from pydantic import ValidationError

from core.domain.fields import decode_id_list
from core.domain.models import ApiModel
from core.errors import InvalidInputError

ModelT = TypeVar("ModelT", bound=ApiModel)

_NULL_WORDS = {"none", "null", ""}
_TRUE_WORDS = {"true", "1", "on"}
_FALSE_WORDS = {"false", "0", "off"}


def parse_assignments(assignments: Iterable[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for item in assignments:
        if "=" not in item:
            raise InvalidInputError(f"Expected FIELD=VALUE, got {item!r}")
        key, value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise InvalidInputError(f"Missing field name in {item!r}")
        out[key] = value.strip()
    return out


def _parse_bool(key: str, raw: str) -> bool:
    word = raw.lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise InvalidInputError(f"{key}: expected true/false, 1/0 or on/off, got {raw!r}")


def apply_updates(model: ModelT, assignments: Iterable[str]) -> ModelT:
    """Devuelve una copia validada de `model` con los campos actualizados.

    Listas de ids aceptan `1,2,3` o `["1","2"]`; `none`/`null` vacía un campo
    opcional.
    """

    updates = parse_assignments(assignments)
    fields = type(model).model_fields
    unknown = sorted(set(updates) - set(fields))
    if unknown:
        raise InvalidInputError(
            f"Unknown field(s) for {type(model).__name__}: {', '.join(unknown)}"
        )

    data = model.model_dump()
    for key, raw in updates.items():
        info = fields[key]
        if get_origin(info.annotation) is list:
            data[key] = decode_id_list(raw)
        elif info.annotation is bool:
            data[key] = _parse_bool(key, raw)
        elif raw.lower() in _NULL_WORDS and not info.is_required():
            data[key] = info.get_default(call_default_factory=True)
        else:
            data[key] = raw

    try:
        return type(model).model_validate(data)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'value'}: {err['msg']}" for err in exc.errors()
        )
        raise InvalidInputError(errors) from exc
