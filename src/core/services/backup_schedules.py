"""Formulario de backups programados: valores por defecto, validación y payloads."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from core.domain.models import BackupSchedule
from core.errors import InvalidInputError

FREQUENCY_UNITS: tuple[str, ...] = ("days", "weeks", "months", "years")

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


@dataclass
class ScheduleDraft:
    frequency_value: int = 1
    frequency_unit: str = "days"
    start_time: str = "00:00"
    max_backups: int = 7
    timezone: str = "UTC"

    @classmethod
    def from_schedule(cls, schedule: BackupSchedule) -> "ScheduleDraft":
        return cls(
            frequency_value=schedule.frequency_value,
            frequency_unit=schedule.frequency_unit,
            start_time=schedule.start_time or "00:00",
            max_backups=schedule.max_backups,
            timezone=schedule.timezone or "UTC",
        )

    def validate(self) -> "ScheduleDraft":
        if self.frequency_value < 1:
            raise InvalidInputError("Frequency must be at least 1")
        if self.frequency_unit not in FREQUENCY_UNITS:
            raise InvalidInputError(
                f"Unknown frequency unit: {self.frequency_unit} (expected one of {', '.join(FREQUENCY_UNITS)})"
            )
        if not _TIME_RE.match(self.start_time):
            raise InvalidInputError(f"Start time must be HH:MM, got {self.start_time!r}")
        if self.max_backups < 1:
            raise InvalidInputError("Max backups must be at least 1")
        if not self.timezone.strip():
            raise InvalidInputError("Timezone cannot be empty")
        return self

    def to_payload(self) -> dict[str, Any]:
        """Cuerpo para crear/actualizar.

        El backend todavía lee `frequency` y `time` además de las claves nuevas.
        """

        self.validate()
        return {
            "frequency": self.frequency_unit,
            "frequency_value": self.frequency_value,
            "frequency_unit": self.frequency_unit,
            "time": self.start_time,
            "start_time": self.start_time,
            "max_backups": self.max_backups,
            "timezone": self.timezone,
        }


def toggle_payload(schedule: BackupSchedule) -> dict[str, int]:
    return {"enabled": 0 if schedule.enabled else 1}


def describe(schedule: BackupSchedule) -> str:
    text = f"Every {schedule.frequency_value} {schedule.frequency_unit}"
    if schedule.start_time:
        text += f" at {schedule.start_time}"
    if schedule.timezone:
        text += f" ({schedule.timezone})"
    return text
