"""
Hours Allocator Unit Tests

Tests for daily allocation and weekly aggregation of worked hours.
"""

from decimal import Decimal

import pytest

from overtime_engine.schemas.overtime import OvertimeRules
from overtime_engine.services.hours_allocator import (
    aggregate_weekly_hours,
    allocate_daily_hours,
    to_hours,
)
from tests.factories import make_week


class TestToHours:
    """Test raw hours normalization."""

    def test_float_converted_exactly(self):
        assert to_hours(7.25) == Decimal("7.25")

    def test_negative_clamped(self):
        assert to_hours(-3) == Decimal("0")

    def test_nan_clamped(self):
        assert to_hours(float("nan")) == Decimal("0")

    def test_infinity_clamped(self):
        assert to_hours(Decimal("Infinity")) == Decimal("0")


class TestDailyAllocation:
    """Test splitting one day's hours into buckets."""

    def test_no_daily_threshold_all_regular(self):
        result = allocate_daily_hours(Decimal("14"), None, Decimal("12"))

        assert result.regular_hours == Decimal("14")
        assert result.daily_overtime_hours == Decimal("0")
        assert result.double_time_hours == Decimal("0")

    def test_at_threshold_all_regular(self):
        result = allocate_daily_hours(Decimal("8"), Decimal("8"), Decimal("12"))

        assert result.regular_hours == Decimal("8")
        assert result.daily_overtime_hours == Decimal("0")

    def test_daily_overtime_without_double_time(self):
        result = allocate_daily_hours(Decimal("10.5"), Decimal("8"), None)

        assert result.regular_hours == Decimal("8")
        assert result.daily_overtime_hours == Decimal("2.5")
        assert result.double_time_hours == Decimal("0")

    def test_at_double_threshold_no_double_time(self):
        result = allocate_daily_hours(Decimal("12"), Decimal("8"), Decimal("12"))

        assert result.daily_overtime_hours == Decimal("4")
        assert result.double_time_hours == Decimal("0")

    def test_double_time(self):
        """8h threshold, 12h double-time threshold, 14 hours worked."""
        result = allocate_daily_hours(Decimal("14"), Decimal("8"), Decimal("12"))

        assert result.regular_hours == Decimal("8")
        assert result.daily_overtime_hours == Decimal("4")
        assert result.double_time_hours == Decimal("2")

    @pytest.mark.parametrize("double_threshold", [Decimal("8"), Decimal("6")])
    def test_degenerate_double_threshold_disables_double_time(self, double_threshold):
        result = allocate_daily_hours(Decimal("14"), Decimal("8"), double_threshold)

        assert result.regular_hours == Decimal("8")
        assert result.daily_overtime_hours == Decimal("6")
        assert result.double_time_hours == Decimal("0")

    def test_negative_hours_clamped_to_zero(self):
        result = allocate_daily_hours(Decimal("-5"), Decimal("8"), Decimal("12"))

        assert result.regular_hours == Decimal("0")
        assert result.daily_overtime_hours == Decimal("0")
        assert result.double_time_hours == Decimal("0")

    def test_nan_hours_clamped_to_zero(self):
        result = allocate_daily_hours(float("nan"), Decimal("8"), None)

        assert result.regular_hours == Decimal("0")

    def test_zero_hours(self):
        result = allocate_daily_hours(0, Decimal("8"), Decimal("12"))

        assert result.regular_hours == Decimal("0")
        assert result.daily_overtime_hours == Decimal("0")

    def test_negative_daily_threshold_treated_as_zero(self):
        result = allocate_daily_hours(Decimal("3"), Decimal("-1"), None)

        assert result.regular_hours == Decimal("0")
        assert result.daily_overtime_hours == Decimal("3")

    def test_float_thresholds(self):
        result = allocate_daily_hours(10, 8.0, 9.5)

        assert result.regular_hours == Decimal("8")
        assert result.daily_overtime_hours == Decimal("1.5")
        assert result.double_time_hours == Decimal("0.5")

    def test_nan_daily_threshold_treated_as_zero(self):
        result = allocate_daily_hours(10, Decimal("NaN"), None)

        assert result.regular_hours == Decimal("0")
        assert result.daily_overtime_hours == Decimal("10")

    def test_nan_double_threshold_disables_double_time(self):
        result = allocate_daily_hours(14, Decimal("8"), float("nan"))

        assert result.daily_overtime_hours == Decimal("6")
        assert result.double_time_hours == Decimal("0")

    @pytest.mark.parametrize("bad_hours", ["", "ten", "1..5"])
    def test_unparsable_hours_clamped_to_zero(self, bad_hours):
        result = allocate_daily_hours(bad_hours, Decimal("8"), None)

        assert result.regular_hours == Decimal("0")
        assert result.daily_overtime_hours == Decimal("0")

    def test_unparsable_hours_string_to_hours(self):
        assert to_hours("") == Decimal("0")
        assert to_hours("7.5") == Decimal("7.5")


class TestWeeklyAggregation:
    """Test aggregation over a pay period."""

    def test_weekly_overtime_without_daily_rules(self, federal_rules):
        """Mon-Thu 10h, Fri 5h: 45 hours, 5 over the weekly threshold."""
        result = aggregate_weekly_hours(make_week(10, 10, 10, 10, 5), federal_rules)

        assert result.regular_hours == Decimal("40")
        assert result.weekly_overtime_hours == Decimal("5")
        assert result.daily_overtime_hours == Decimal("0")
        assert result.double_time_hours == Decimal("0")

    def test_under_weekly_threshold(self, federal_rules):
        result = aggregate_weekly_hours(make_week(8, 8, 8, 8), federal_rules)

        assert result.regular_hours == Decimal("32")
        assert result.weekly_overtime_hours == Decimal("0")

    def test_daily_hours_not_counted_twice(self, california_rules):
        """Daily OT comes out of the day before the weekly cap is applied."""
        result = aggregate_weekly_hours(make_week(10, 10, 10, 10, 10), california_rules)

        # 5 days x 8 regular = 40, 5 days x 2 daily OT = 10
        assert result.regular_hours == Decimal("40")
        assert result.daily_overtime_hours == Decimal("10")
        assert result.weekly_overtime_hours == Decimal("0")

    def test_daily_and_weekly_combined(self, california_rules):
        result = aggregate_weekly_hours(make_week(9, 9, 9, 9, 9, 13), california_rules)

        # Regular: 6 x 8 = 48 -> 40 regular, 8 weekly OT
        # Daily OT: 5 x 1 + 4 = 9; double-time: 1
        assert result.regular_hours == Decimal("40")
        assert result.weekly_overtime_hours == Decimal("8")
        assert result.daily_overtime_hours == Decimal("9")
        assert result.double_time_hours == Decimal("1")

    def test_empty_period(self, federal_rules):
        result = aggregate_weekly_hours({}, federal_rules)

        assert result.total_hours == Decimal("0")

    def test_negative_day_clamped(self, federal_rules):
        result = aggregate_weekly_hours(make_week(-4, 8), federal_rules)

        assert result.regular_hours == Decimal("8")

    def test_order_independent(self, california_rules):
        week = make_week(14, 3, 9, 11, 7)
        reversed_week = dict(reversed(list(week.items())))

        assert aggregate_weekly_hours(week, california_rules) == aggregate_weekly_hours(
            reversed_week, california_rules
        )

    def test_zero_weekly_threshold(self):
        rules = OvertimeRules(weekly_threshold_hours=Decimal("0"))
        result = aggregate_weekly_hours(make_week(4, 4), rules)

        assert result.regular_hours == Decimal("0")
        assert result.weekly_overtime_hours == Decimal("8")

    def test_threshold_monotonicity(self):
        """Raising the weekly threshold never raises weekly overtime."""
        week = make_week(11, 9, 12, 10, 8, 6)
        previous = None
        for threshold in range(0, 70, 5):
            rules = OvertimeRules(weekly_threshold_hours=Decimal(threshold))
            weekly_ot = aggregate_weekly_hours(week, rules).weekly_overtime_hours
            if previous is not None:
                assert weekly_ot <= previous
            previous = weekly_ot

    def test_input_not_mutated(self, california_rules):
        week = make_week(14, 10)
        snapshot = dict(week)

        aggregate_weekly_hours(week, california_rules)

        assert week == snapshot

    def test_degenerate_rules_logged(self, caplog):
        rules = OvertimeRules(
            daily_threshold_hours=Decimal("8"),
            daily_double_threshold_hours=Decimal("8"),
        )

        with caplog.at_level("WARNING"):
            result = aggregate_weekly_hours(make_week(14), rules)

        assert result.double_time_hours == Decimal("0")
        assert "double-time disabled" in caplog.text
