"""
Payroll Period Service

Runs the employee overtime calculation for every employee in a pay
period and totals the results.
"""

import logging
from collections.abc import Iterable

from overtime_engine.config import default_overtime_rules
from overtime_engine.schemas.overtime import (
    EmployeeOvertimeInput,
    OvertimePayResult,
    OvertimeResult,
    OvertimeRules,
    PayrollPeriodSummary,
)
from overtime_engine.services.employee_overtime import calculate_from_input
from overtime_engine.services.hours_allocator import ZERO

logger = logging.getLogger(__name__)


def calculate_payroll_period(
    employees: Iterable[EmployeeOvertimeInput],
    rules: OvertimeRules | None = None,
    period_start: str | None = None,
    period_end: str | None = None,
) -> PayrollPeriodSummary:
    """
    Calculate hours and pay for a batch of employees.

    Each employee is independent; the totals are plain sums of the
    per-employee buckets, so they reconcile to the cent.

    Raises:
        ValueError: If an employee id appears more than once
    """
    if rules is None:
        rules = default_overtime_rules()

    results = {}
    clamped: list[str] = []

    regular = weekly_ot = daily_ot = double_time = ZERO
    regular_pay = overtime_pay = double_time_pay = 0

    for employee in employees:
        if employee.employee_id in results:
            raise ValueError(f"Duplicate employee in payroll period: {employee.employee_id}")

        output = calculate_from_input(employee, rules)
        results[employee.employee_id] = output

        if any(record.clamped for record in output.applied_adjustments):
            clamped.append(employee.employee_id)

        regular += output.hours.regular_hours
        weekly_ot += output.hours.weekly_overtime_hours
        daily_ot += output.hours.daily_overtime_hours
        double_time += output.hours.double_time_hours

        regular_pay += output.pay.regular_pay
        overtime_pay += output.pay.overtime_pay
        double_time_pay += output.pay.double_time_pay

    logger.info(
        f"Calculated payroll period {period_start} to {period_end} "
        f"for {len(results)} employees"
    )

    return PayrollPeriodSummary(
        period_start=period_start,
        period_end=period_end,
        employee_results=results,
        total_hours=OvertimeResult(
            regular_hours=regular,
            weekly_overtime_hours=weekly_ot,
            daily_overtime_hours=daily_ot,
            double_time_hours=double_time,
        ),
        total_pay=OvertimePayResult(
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            double_time_pay=double_time_pay,
            total_gross_pay=regular_pay + overtime_pay + double_time_pay,
        ),
        employees_with_clamped_adjustments=clamped,
    )
