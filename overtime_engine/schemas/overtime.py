"""
Overtime Engine Schemas

Input/output models for hour classification and overtime pay.

Hours are carried as Decimal so that results are exactly reproducible
for payroll audits. Money is carried as integer cents.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class OvertimeRules(BaseModel):
    """
    Overtime configuration for one jurisdiction.

    Supplied per computation; the engine never persists or owns it.
    A `None` threshold disables the corresponding rule.
    """

    model_config = ConfigDict(frozen=True)

    weekly_threshold_hours: Decimal = Field(
        default=Decimal("40"),
        ge=0,
        description="Hours per workweek before weekly overtime applies",
    )
    weekly_ot_multiplier: Decimal = Field(
        default=Decimal("1.5"),
        description="Pay multiplier for weekly overtime",
    )
    daily_threshold_hours: Decimal | None = Field(
        default=None,
        description="Hours per day before daily overtime applies (None disables)",
    )
    daily_ot_multiplier: Decimal = Field(
        default=Decimal("1.5"),
        description="Pay multiplier for daily overtime",
    )
    daily_double_threshold_hours: Decimal | None = Field(
        default=None,
        description="Hours per day before double-time applies (None disables)",
    )
    daily_double_multiplier: Decimal = Field(
        default=Decimal("2.0"),
        description="Pay multiplier for double-time",
    )
    exclude_tips_from_ot_rate: bool = Field(
        default=True,
        description="If False, tips are blended into the overtime base rate",
    )


class AdjustmentType(str, Enum):
    """Direction of a manual hour reclassification."""
    REGULAR_TO_OVERTIME = "regular_to_overtime"
    OVERTIME_TO_REGULAR = "overtime_to_regular"


class OvertimeAdjustment(BaseModel):
    """
    Manager-approved reclassification of already-computed hours.

    `employee_id`, `punch_date` and `reason` are audit metadata; the
    caller filters adjustments to the employee and period being computed.
    """

    model_config = ConfigDict(frozen=True)

    employee_id: str = Field(..., description="Employee the adjustment belongs to")
    punch_date: date = Field(..., description="Work date being corrected")
    adjustment_type: AdjustmentType
    hours: Decimal = Field(..., gt=0, description="Hours to move between buckets")
    reason: str = Field(default="", description="Free-text justification")


class DailyAllocation(BaseModel):
    """Hour buckets for a single day."""

    model_config = ConfigDict(frozen=True)

    regular_hours: Decimal = Field(default=Decimal("0"), ge=0)
    daily_overtime_hours: Decimal = Field(default=Decimal("0"), ge=0)
    double_time_hours: Decimal = Field(default=Decimal("0"), ge=0)


class OvertimeResult(BaseModel):
    """Hour buckets for one employee over one pay period."""

    model_config = ConfigDict(frozen=True)

    regular_hours: Decimal = Field(default=Decimal("0"), ge=0)
    weekly_overtime_hours: Decimal = Field(default=Decimal("0"), ge=0)
    daily_overtime_hours: Decimal = Field(default=Decimal("0"), ge=0)
    double_time_hours: Decimal = Field(default=Decimal("0"), ge=0)

    @computed_field
    @property
    def total_hours(self) -> Decimal:
        """All classified hours."""
        return (
            self.regular_hours
            + self.weekly_overtime_hours
            + self.daily_overtime_hours
            + self.double_time_hours
        )


class OvertimePayResult(BaseModel):
    """
    Pay buckets in integer cents.

    `overtime_pay` combines weekly and daily overtime. `total_gross_pay`
    must equal the sum of the three components.
    """

    model_config = ConfigDict(frozen=True)

    regular_pay: int = 0
    overtime_pay: int = 0
    double_time_pay: int = 0
    total_gross_pay: int = 0

    @model_validator(mode="after")
    def check_total(self) -> "OvertimePayResult":
        expected = self.regular_pay + self.overtime_pay + self.double_time_pay
        if self.total_gross_pay != expected:
            raise ValueError(
                f"total_gross_pay {self.total_gross_pay} does not equal "
                f"component sum {expected}"
            )
        return self


class AppliedAdjustment(BaseModel):
    """Audit record for one adjustment after it was folded into the result."""

    model_config = ConfigDict(frozen=True)

    adjustment: OvertimeAdjustment
    requested_hours: Decimal
    applied_hours: Decimal = Field(..., ge=0)
    clamped: bool = Field(
        default=False,
        description="True if fewer hours were available than requested",
    )


class EmployeeOvertimeInput(BaseModel):
    """One employee's computation request for a pay period."""

    model_config = ConfigDict(frozen=True)

    employee_id: str = Field(..., description="Unique employee identifier")
    daily_hours: dict[str, Decimal] = Field(
        default_factory=dict,
        description="Worked hours keyed by date (YYYY-MM-DD)",
    )
    is_exempt: bool = Field(default=False, description="Salaried, not subject to overtime")
    hourly_rate_cents: int = Field(..., ge=0)
    total_tips_cents: int = Field(default=0, ge=0)
    adjustments: tuple[OvertimeAdjustment, ...] = ()


class EmployeeOvertimeOutput(BaseModel):
    """Hour and pay breakdown for one employee, with audit trail."""

    model_config = ConfigDict(frozen=True)

    hours: OvertimeResult
    pay: OvertimePayResult
    applied_adjustments: tuple[AppliedAdjustment, ...] = ()
    calculation_notes: tuple[str, ...] = ()


class OvertimeWarning(BaseModel):
    """Scheduling warning for hours over, or close to, an overtime threshold."""

    model_config = ConfigDict(frozen=True)

    warning_type: Literal["daily", "weekly"]
    work_date: str | None = None
    current_hours: Decimal
    threshold_hours: Decimal
    overtime_hours: Decimal
    message: str
    severity: Literal["info", "warning", "error"]


class PayrollPeriodSummary(BaseModel):
    """Per-employee results and totals for one pay period."""

    model_config = ConfigDict(frozen=True)

    period_start: str | None = None
    period_end: str | None = None
    employee_results: dict[str, EmployeeOvertimeOutput] = Field(default_factory=dict)
    total_hours: OvertimeResult = Field(default_factory=OvertimeResult)
    total_pay: OvertimePayResult = Field(default_factory=OvertimePayResult)
    employees_with_clamped_adjustments: list[str] = Field(default_factory=list)
