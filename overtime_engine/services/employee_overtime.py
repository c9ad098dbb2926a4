"""
Employee Overtime Service

Top-level entry point for one employee's hours and pay in a pay period.
"""

import logging
from collections.abc import Iterable, Mapping

from overtime_engine.config import default_overtime_rules
from overtime_engine.schemas.overtime import (
    EmployeeOvertimeInput,
    EmployeeOvertimeOutput,
    OvertimeAdjustment,
    OvertimeResult,
    OvertimeRules,
)
from overtime_engine.services.adjustment_engine import reconcile_adjustments
from overtime_engine.services.hours_allocator import (
    ZERO,
    HoursValue,
    aggregate_weekly_hours,
    to_hours,
)
from overtime_engine.services.pay_calculator import calculate_overtime_pay

logger = logging.getLogger(__name__)


def calculate_employee_overtime(
    daily_hours: Mapping[str, HoursValue],
    is_exempt: bool,
    hourly_rate_cents: int,
    total_tips_cents: int = 0,
    adjustments: Iterable[OvertimeAdjustment] = (),
    rules: OvertimeRules | None = None,
) -> EmployeeOvertimeOutput:
    """
    Classify one employee's hours and compute gross pay for them.

    Exempt (salaried) employees get every hour as regular, no overtime of
    any kind, and no adjustments. Non-exempt employees go through weekly
    aggregation, then adjustments, then pay.

    Args:
        daily_hours: Worked hours keyed by date (YYYY-MM-DD)
        is_exempt: True for salaried employees not subject to overtime
        hourly_rate_cents: Base hourly rate in cents
        total_tips_cents: Tips for the period in cents
        adjustments: Reclassifications already filtered to this employee/period
        rules: Overtime rules; defaults to the configured standard rule set

    Returns:
        EmployeeOvertimeOutput with hour buckets, pay buckets and audit trail
    """
    if rules is None:
        rules = default_overtime_rules()

    adjustments = tuple(adjustments)
    notes: list[str] = []

    if is_exempt:
        regular = sum((to_hours(h) for h in daily_hours.values()), ZERO)
        hours = OvertimeResult(regular_hours=regular)
        if adjustments:
            notes.append(f"Skipped {len(adjustments)} adjustment(s) for exempt employee")
        pay = calculate_overtime_pay(hours, hourly_rate_cents, total_tips_cents, rules)
        return EmployeeOvertimeOutput(
            hours=hours,
            pay=pay,
            calculation_notes=tuple(notes),
        )

    base = aggregate_weekly_hours(daily_hours, rules)
    hours, applied = reconcile_adjustments(base, adjustments)

    for record in applied:
        if record.clamped:
            notes.append(
                f"Adjustment {record.adjustment.adjustment_type.value} on "
                f"{record.adjustment.punch_date} clamped from "
                f"{record.requested_hours}h to {record.applied_hours}h"
            )

    pay = calculate_overtime_pay(hours, hourly_rate_cents, total_tips_cents, rules)
    logger.debug(f"Computed overtime: hours={hours} pay={pay}")

    return EmployeeOvertimeOutput(
        hours=hours,
        pay=pay,
        applied_adjustments=tuple(applied),
        calculation_notes=tuple(notes),
    )


def calculate_from_input(
    input_data: EmployeeOvertimeInput,
    rules: OvertimeRules | None = None,
) -> EmployeeOvertimeOutput:
    """Run `calculate_employee_overtime` for a schema-validated request."""
    return calculate_employee_overtime(
        daily_hours=input_data.daily_hours,
        is_exempt=input_data.is_exempt,
        hourly_rate_cents=input_data.hourly_rate_cents,
        total_tips_cents=input_data.total_tips_cents,
        adjustments=input_data.adjustments,
        rules=rules,
    )
