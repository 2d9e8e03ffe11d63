"""Exportación JSON de respuestas de la API.

Usado por los comandos `export` (comandos, permisos, logs, envíos de
formularios, backups) para guardar el resultado en disco.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from core.errors import InvalidInputError


def to_jsonable(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json")
    if isinstance(payload, (list, tuple)):
        return [to_jsonable(item) for item in payload]
    if isinstance(payload, dict):
        return {str(k): to_jsonable(v) for k, v in payload.items()}
    return payload


def dumps_stable(payload: Any) -> str:
    return json.dumps(to_jsonable(payload), ensure_ascii=False, indent=2, sort_keys=True)


def export_payload_json(*, payload: Any, output_path: Path) -> Path:
    """Exporta `payload` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps_stable(payload) + "\n", encoding="utf-8")
    return output_path


def load_payload_json(input_path: Path) -> Any:
    """Lee un JSON exportado previamente (para los comandos `import`)."""

    try:
        return json.loads(input_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidInputError(f"Cannot read {input_path}: {exc}") from exc
