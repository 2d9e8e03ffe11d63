"""Selección de roles excluidos al restaurar datos de un miembro."""

from __future__ import annotations

from typing import Iterable

from core.domain.models import RestoreSettings, Role


def toggle_excluded_role(settings: RestoreSettings, role_id: str) -> RestoreSettings:
    excluded = list(settings.excluded_roles)
    if role_id in excluded:
        excluded.remove(role_id)
    else:
        excluded.append(role_id)
    return settings.model_copy(update={"excluded_roles": excluded})


def exclude_all(settings: RestoreSettings, roles: Iterable[Role]) -> RestoreSettings:
    return settings.model_copy(update={"excluded_roles": [r.id for r in roles]})


def clear_excluded(settings: RestoreSettings) -> RestoreSettings:
    return settings.model_copy(update={"excluded_roles": []})
