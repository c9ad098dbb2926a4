"""
Overtime Warnings

Flags scheduled hours that cross, or come close to, an overtime
threshold so managers can act before payroll is run.
"""

from collections.abc import Mapping
from decimal import Decimal

from overtime_engine.schemas.overtime import OvertimeRules, OvertimeWarning
from overtime_engine.services.hours_allocator import (
    ZERO,
    HoursValue,
    daily_threshold_hours,
    to_hours,
)

# Severity cut-offs, in hours over the threshold
DAILY_ERROR_HOURS = Decimal("2")
DAILY_WARNING_HOURS = Decimal("1")
WEEKLY_ERROR_HOURS = Decimal("4")
WEEKLY_WARNING_HOURS = Decimal("2")

# Warn when this close to the weekly threshold
APPROACHING_WEEKLY_HOURS = Decimal("2")


def _format_threshold(hours: Decimal) -> str:
    return f"{hours.normalize():f}"


def check_daily_overtime(
    work_date: str,
    hours_worked: HoursValue,
    rules: OvertimeRules,
) -> OvertimeWarning | None:
    """Warn when a day's hours exceed the daily overtime threshold."""
    threshold = daily_threshold_hours(rules.daily_threshold_hours)
    if threshold is None:
        return None

    hours = to_hours(hours_worked)
    if hours <= threshold:
        return None

    overtime = hours - threshold
    if overtime > DAILY_ERROR_HOURS:
        severity = "error"
    elif overtime > DAILY_WARNING_HOURS:
        severity = "warning"
    else:
        severity = "info"

    return OvertimeWarning(
        warning_type="daily",
        work_date=work_date,
        current_hours=hours,
        threshold_hours=threshold,
        overtime_hours=overtime,
        message=f"Daily OT: {overtime:.1f}h over {_format_threshold(threshold)}h threshold",
        severity=severity,
    )


def check_weekly_overtime(
    daily_hours: Mapping[str, HoursValue],
    rules: OvertimeRules,
    additional_hours: HoursValue = 0,
) -> OvertimeWarning | None:
    """
    Warn when the week's total hours exceed, or approach, the weekly threshold.

    `additional_hours` lets a scheduler test a proposed shift before saving it.
    """
    threshold = rules.weekly_threshold_hours
    hours = sum((to_hours(h) for h in daily_hours.values()), ZERO)
    hours += to_hours(additional_hours)

    if hours > threshold:
        overtime = hours - threshold
        if overtime > WEEKLY_ERROR_HOURS:
            severity = "error"
        elif overtime > WEEKLY_WARNING_HOURS:
            severity = "warning"
        else:
            severity = "info"
        return OvertimeWarning(
            warning_type="weekly",
            current_hours=hours,
            threshold_hours=threshold,
            overtime_hours=overtime,
            message=f"Weekly OT: {overtime:.1f}h over {_format_threshold(threshold)}h threshold",
            severity=severity,
        )

    remaining = threshold - hours
    if ZERO < remaining <= APPROACHING_WEEKLY_HOURS:
        return OvertimeWarning(
            warning_type="weekly",
            current_hours=hours,
            threshold_hours=threshold,
            overtime_hours=ZERO,
            message=f"Approaching weekly threshold: {remaining:.1f}h remaining",
            severity="info",
        )

    return None


def collect_overtime_warnings(
    daily_hours: Mapping[str, HoursValue],
    rules: OvertimeRules,
) -> list[OvertimeWarning]:
    """All daily warnings in date order, followed by the weekly warning."""
    warnings: list[OvertimeWarning] = []
    for work_date in sorted(daily_hours):
        warning = check_daily_overtime(work_date, daily_hours[work_date], rules)
        if warning is not None:
            warnings.append(warning)

    weekly = check_weekly_overtime(daily_hours, rules)
    if weekly is not None:
        warnings.append(weekly)
    return warnings
