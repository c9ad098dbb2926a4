"""
Hours Allocator

Splits worked hours into regular, daily overtime, double-time and
weekly overtime buckets under a jurisdiction's overtime rules.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation

from overtime_engine.schemas.overtime import DailyAllocation, OvertimeResult, OvertimeRules

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

HoursValue = Decimal | float | int | str


def _to_finite_decimal(value: HoursValue) -> Decimal | None:
    """Decimal for `value`, or None if it is unparsable, NaN or infinite."""
    if isinstance(value, Decimal):
        number = value
    else:
        try:
            number = Decimal(str(value))
        except InvalidOperation:
            return None
    if not number.is_finite():
        return None
    return number


def to_hours(value: HoursValue) -> Decimal:
    """
    Convert a raw hours value to a non-negative Decimal.

    Negative, NaN, infinite and unparsable values become zero.
    """
    hours = _to_finite_decimal(value)
    if hours is None or hours < 0:
        return ZERO
    return hours


def daily_threshold_hours(value: HoursValue | None) -> Decimal | None:
    """Normalize a daily threshold; NaN, infinite, unparsable or negative becomes zero."""
    if value is None:
        return None
    return to_hours(value)


def double_time_threshold_hours(value: HoursValue | None) -> Decimal | None:
    """Normalize a double-time threshold; NaN, infinite or unparsable disables it."""
    if value is None:
        return None
    return _to_finite_decimal(value)


def allocate_daily_hours(
    hours_worked: HoursValue,
    daily_threshold: HoursValue | None,
    double_time_threshold: HoursValue | None,
) -> DailyAllocation:
    """
    Split one day's worked hours into regular / daily OT / double-time.

    Algorithm:
    1. Clamp hours to >= 0
    2. Without a daily threshold, or at/below it, everything is regular
    3. Above the daily threshold, the threshold is regular and the rest is OT
    4. The band between the daily and double-time thresholds is daily OT,
       anything beyond the double-time threshold is double-time

    Never raises; degenerate thresholds fall back to a safe allocation.
    """
    hours = to_hours(hours_worked)
    daily_threshold = daily_threshold_hours(daily_threshold)
    double_time_threshold = double_time_threshold_hours(double_time_threshold)

    if daily_threshold is None or hours <= daily_threshold:
        return DailyAllocation(regular_hours=hours)

    overtime_total = hours - daily_threshold

    if double_time_threshold is None or hours <= double_time_threshold:
        return DailyAllocation(
            regular_hours=daily_threshold,
            daily_overtime_hours=overtime_total,
        )

    # A double-time threshold at or below the daily threshold would yield a
    # negative daily OT band; treat double-time as disabled instead.
    if double_time_threshold <= daily_threshold:
        return DailyAllocation(
            regular_hours=daily_threshold,
            daily_overtime_hours=overtime_total,
        )

    return DailyAllocation(
        regular_hours=daily_threshold,
        daily_overtime_hours=double_time_threshold - daily_threshold,
        double_time_hours=hours - double_time_threshold,
    )


def aggregate_weekly_hours(
    daily_hours: Mapping[str, HoursValue],
    rules: OvertimeRules,
) -> OvertimeResult:
    """
    Classify a pay period's hours.

    Runs the daily allocation over every entry, sums the buckets, then
    caps the summed regular hours at the weekly threshold and moves the
    excess into weekly overtime. The caller supplies one entry per
    calendar day.
    """
    if (
        rules.daily_threshold_hours is not None
        and rules.daily_double_threshold_hours is not None
        and rules.daily_double_threshold_hours <= rules.daily_threshold_hours
    ):
        logger.warning(
            f"Double-time threshold {rules.daily_double_threshold_hours} is not above "
            f"daily threshold {rules.daily_threshold_hours}; double-time disabled"
        )

    regular = ZERO
    daily_ot = ZERO
    double_time = ZERO

    for work_date, hours in daily_hours.items():
        allocation = allocate_daily_hours(
            hours,
            rules.daily_threshold_hours,
            rules.daily_double_threshold_hours,
        )
        logger.debug(f"Allocated {work_date}: {allocation}")
        regular += allocation.regular_hours
        daily_ot += allocation.daily_overtime_hours
        double_time += allocation.double_time_hours

    weekly_ot = ZERO
    if regular > rules.weekly_threshold_hours:
        weekly_ot = regular - rules.weekly_threshold_hours
        regular = rules.weekly_threshold_hours

    return OvertimeResult(
        regular_hours=regular,
        weekly_overtime_hours=weekly_ot,
        daily_overtime_hours=daily_ot,
        double_time_hours=double_time,
    )
