"""Editor de acciones automáticas por número de avisos.

La tabla se edita como filas de texto (`WarningActionDraft`) y se convierte a
`WarningAction` al guardar.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from core.domain.durations import format_duration, parse_duration
from core.domain.models import StoredWarningAction, WarningAction
from core.errors import InvalidInputError

ACTIONS: tuple[str, ...] = ("timeout", "kick", "ban")


@dataclass
class WarningActionDraft:
    warning_count: str = ""
    action: str = ""
    duration: str = ""

    @classmethod
    def parse(cls, spec: str) -> "WarningActionDraft":
        """`"3:timeout:1h"` / `"5:kick"` -> draft."""

        parts = [p.strip() for p in spec.split(":")]
        if len(parts) not in (2, 3):
            raise InvalidInputError(f"Expected COUNT:ACTION[:DURATION], got {spec!r}")
        return cls(
            warning_count=parts[0],
            action=parts[1].lower(),
            duration=parts[2] if len(parts) == 3 else "",
        )


def drafts_from_actions(actions: Iterable[StoredWarningAction]) -> list[WarningActionDraft]:
    drafts = [
        WarningActionDraft(
            warning_count=str(a.warning_count),
            action=a.action,
            duration=format_duration(a.duration_seconds),
        )
        for a in actions
    ]
    return drafts or [WarningActionDraft()]


def build_actions(drafts: Iterable[WarningActionDraft]) -> list[WarningAction]:
    """Valida las filas y devuelve las acciones a enviar.

    - filas con contador no positivo o acción vacía se ignoran
    - `timeout` exige una duración válida
    """

    actions: list[WarningAction] = []
    for draft in drafts:
        try:
            count = int(draft.warning_count.strip())
        except ValueError:
            continue
        action = draft.action.strip().lower()
        if count <= 0 or not action:
            continue
        if action not in ACTIONS:
            raise InvalidInputError(f"Unknown action: {draft.action} (expected timeout, kick or ban)")

        duration_seconds: int | None = None
        if action == "timeout":
            if not draft.duration.strip():
                raise InvalidInputError("Timeout actions require a duration")
            duration_seconds = parse_duration(draft.duration)
            if duration_seconds is None or duration_seconds <= 0:
                raise InvalidInputError(f"Invalid duration format: {draft.duration}")

        actions.append(WarningAction(warning_count=count, action=action, duration_seconds=duration_seconds))
    return actions
