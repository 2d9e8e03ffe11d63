"""Duraciones compactas para acciones de moderación.

Formato: `<entero><unidad>` con unidad en `s`, `m`, `h`, `d`, `w` (por defecto
segundos). Ejemplos: `45s`, `30m`, `1h`, `2d`, `1w`, `10`.
"""

from __future__ import annotations

import re

_DURATION_RE = re.compile(r"^(\d+)([smhdw]?)$", re.ASCII)

UNIT_SECONDS: dict[str, int] = {
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": 86400,
    "w": 604800,
}

# De mayor a menor; `format_duration` usa la primera que divide exacto.
_FORMAT_ORDER: tuple[str, ...] = ("w", "d", "h", "m")


def parse_duration(text: str | None) -> int | None:
    """Convierte `"1h"` -> `3600`. Devuelve `None` si el texto no es válido."""

    if text is None:
        return None
    match = _DURATION_RE.match(text.strip().lower())
    if match is None:
        return None
    value, unit = match.groups()
    return int(value) * UNIT_SECONDS[unit or "s"]


def format_duration(seconds: int | None) -> str:
    """Inversa de `parse_duration`: `3600` -> `"1h"`, `90` -> `"90s"`."""

    if seconds is None:
        return ""
    for unit in _FORMAT_ORDER:
        factor = UNIT_SECONDS[unit]
        if seconds % factor == 0:
            return f"{seconds // factor}{unit}"
    return f"{seconds}s"
