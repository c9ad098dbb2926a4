"""Overtime and pay computation engine."""

from overtime_engine.schemas.overtime import (
    AdjustmentType,
    AppliedAdjustment,
    DailyAllocation,
    EmployeeOvertimeInput,
    EmployeeOvertimeOutput,
    OvertimeAdjustment,
    OvertimePayResult,
    OvertimeResult,
    OvertimeRules,
    OvertimeWarning,
    PayrollPeriodSummary,
)
from overtime_engine.services.adjustment_engine import apply_adjustments, reconcile_adjustments
from overtime_engine.services.employee_overtime import (
    calculate_employee_overtime,
    calculate_from_input,
)
from overtime_engine.services.hours_allocator import aggregate_weekly_hours, allocate_daily_hours
from overtime_engine.services.overtime_warnings import (
    check_daily_overtime,
    check_weekly_overtime,
    collect_overtime_warnings,
)
from overtime_engine.services.pay_calculator import calculate_overtime_pay
from overtime_engine.services.payroll_period import calculate_payroll_period
from overtime_engine.services.rule_validation import validate_overtime_rules

__all__ = [
    "AdjustmentType",
    "AppliedAdjustment",
    "DailyAllocation",
    "EmployeeOvertimeInput",
    "EmployeeOvertimeOutput",
    "OvertimeAdjustment",
    "OvertimePayResult",
    "OvertimeResult",
    "OvertimeRules",
    "OvertimeWarning",
    "PayrollPeriodSummary",
    "aggregate_weekly_hours",
    "allocate_daily_hours",
    "apply_adjustments",
    "calculate_employee_overtime",
    "calculate_from_input",
    "calculate_overtime_pay",
    "calculate_payroll_period",
    "check_daily_overtime",
    "check_weekly_overtime",
    "collect_overtime_warnings",
    "reconcile_adjustments",
    "validate_overtime_rules",
]
