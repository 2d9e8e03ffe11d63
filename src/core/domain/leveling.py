"""Matemática de niveles/XP usada por el leaderboard y el detalle de miembro."""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import InvalidInputError

XP_BASE = 100
XP_EXPONENT = 1.7

XP_OPERATIONS: tuple[str, ...] = ("add", "remove", "set")


def xp_for_level(level: int) -> float:
    """XP acumulada en la que empieza `level` (`100 * level^1.7`)."""

    return XP_BASE * (level**XP_EXPONENT)


def level_progress(level: int, xp: float) -> float:
    """Fracción [0, 1] recorrida entre `level` y `level + 1`."""

    low = xp_for_level(level)
    high = xp_for_level(level + 1)
    fraction = (xp - low) / (high - low)
    return min(1.0, max(0.0, fraction))


@dataclass(frozen=True)
class LevelProgress:
    level: int
    xp: float
    floor: float
    ceiling: float
    fraction: float

    @property
    def percent(self) -> int:
        return int(round(self.fraction * 100))

    @property
    def remaining(self) -> float:
        return max(0.0, self.ceiling - self.xp)


def describe_progress(level: int, xp: float) -> LevelProgress:
    return LevelProgress(
        level=level,
        xp=xp,
        floor=xp_for_level(level),
        ceiling=xp_for_level(level + 1),
        fraction=level_progress(level, xp),
    )


def preview_xp(current: int, operation: str, amount: int) -> int:
    """XP resultante de aplicar `operation` (add/remove/set) sobre `current`.

    `remove` nunca baja de 0.
    """

    if amount < 0:
        raise InvalidInputError("XP amount must be zero or positive")
    op = operation.strip().lower()
    if op == "add":
        return current + amount
    if op == "remove":
        return max(0, current - amount)
    if op == "set":
        return amount
    raise InvalidInputError(f"Unknown XP operation: {operation} (expected add, remove or set)")
