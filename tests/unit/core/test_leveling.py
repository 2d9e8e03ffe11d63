"""Tests for core/domain/leveling.py"""

import pytest

from core.domain.leveling import describe_progress, level_progress, preview_xp, xp_for_level
from core.errors import InvalidInputError


class TestXpForLevel:
    """Cumulative XP curve: 100 * level^1.7."""

    def test_level_zero_starts_at_zero(self):
        assert xp_for_level(0) == 0

    def test_level_one(self):
        assert xp_for_level(1) == pytest.approx(100.0)

    def test_level_two(self):
        assert xp_for_level(2) == pytest.approx(100 * 2**1.7)

    def test_curve_is_increasing(self):
        """Every level needs more XP than the previous one."""
        values = [xp_for_level(level) for level in range(0, 50)]
        assert values == sorted(values)
        assert len(set(values)) == len(values)


class TestLevelProgress:
    """Fraction of the way from one level to the next."""

    def test_at_floor_is_zero(self):
        assert level_progress(3, xp_for_level(3)) == pytest.approx(0.0)

    def test_at_ceiling_is_one(self):
        assert level_progress(3, xp_for_level(4)) == pytest.approx(1.0)

    def test_midpoint(self):
        mid = (xp_for_level(5) + xp_for_level(6)) / 2
        assert level_progress(5, mid) == pytest.approx(0.5)

    def test_clamped_below(self):
        """XP below the level floor (stale data) shows an empty bar."""
        assert level_progress(10, 0) == 0.0

    def test_clamped_above(self):
        assert level_progress(1, 1_000_000) == 1.0

    @pytest.mark.parametrize("level", [0, 1, 2, 7, 25, 60])
    def test_non_decreasing_in_xp(self, level):
        """More XP never moves the bar backwards, and it stays within [0, 1]."""
        top = xp_for_level(level + 2)
        steps = [top * i / 400 for i in range(-10, 411)]
        fractions = [level_progress(level, xp) for xp in steps]

        assert all(0.0 <= f <= 1.0 for f in fractions)
        assert all(a <= b for a, b in zip(fractions, fractions[1:]))


class TestDescribeProgress:
    def test_fields(self):
        progress = describe_progress(1, 150)

        assert progress.floor == pytest.approx(100.0)
        assert progress.ceiling == pytest.approx(100 * 2**1.7)
        assert 0 < progress.fraction < 1
        assert progress.remaining == pytest.approx(progress.ceiling - 150)

    def test_percent_is_rounded(self):
        mid = (xp_for_level(0) + xp_for_level(1)) / 2
        assert describe_progress(0, mid).percent == 50

    def test_remaining_never_negative(self):
        assert describe_progress(0, 10_000).remaining == 0.0


class TestPreviewXp:
    """Result of an add/remove/set XP edit before it is sent."""

    def test_add(self):
        assert preview_xp(100, "add", 50) == 150

    def test_remove(self):
        assert preview_xp(100, "remove", 30) == 70

    def test_remove_floors_at_zero(self):
        """Removing more XP than the member has leaves zero."""
        assert preview_xp(100, "remove", 500) == 0

    def test_set(self):
        assert preview_xp(100, "set", 5) == 5

    def test_operation_is_case_insensitive(self):
        assert preview_xp(1, " ADD ", 1) == 2

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidInputError):
            preview_xp(100, "add", -1)

    def test_unknown_operation_rejected(self):
        with pytest.raises(InvalidInputError, match="Unknown XP operation"):
            preview_xp(100, "multiply", 2)
