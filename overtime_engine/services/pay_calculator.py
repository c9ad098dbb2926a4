"""
Pay Calculator

Converts classified hours into pay buckets in integer cents.
"""

from decimal import ROUND_HALF_UP, Decimal

from overtime_engine.schemas.overtime import OvertimePayResult, OvertimeResult, OvertimeRules


def round_cents(amount: Decimal) -> int:
    """Round to the nearest whole cent, half-up."""
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def overtime_base_rate(
    hourly_rate_cents: int,
    total_tips_cents: int,
    total_hours: Decimal,
    exclude_tips: bool,
) -> Decimal:
    """
    Rate (in cents per hour) that overtime multipliers apply to.

    When tips are included, they are spread evenly over every hour worked
    in the period and added to the hourly rate. Not rounded.
    """
    rate = Decimal(hourly_rate_cents)
    if exclude_tips or total_hours == 0 or total_tips_cents == 0:
        return rate
    return rate + Decimal(total_tips_cents) / total_hours


def calculate_overtime_pay(
    hours: OvertimeResult,
    hourly_rate_cents: int,
    total_tips_cents: int,
    rules: OvertimeRules,
) -> OvertimePayResult:
    """
    Calculate regular, overtime and double-time pay.

    Algorithm:
    1. Total hours across all buckets
    2. Overtime base rate (hourly rate, optionally tip-blended)
    3. Regular pay at the bare hourly rate; never tip-inflated
    4. Weekly and daily overtime pay at the base rate times their multipliers
    5. Double-time pay at the base rate times the double-time multiplier
    6. Gross pay is the sum of the rounded buckets

    Each bucket is rounded half-up to whole cents before summing; the
    total is never rounded on its own so line items always reconcile.
    """
    # Step 1-2: Overtime base rate
    ot_rate = overtime_base_rate(
        hourly_rate_cents,
        total_tips_cents,
        hours.total_hours,
        rules.exclude_tips_from_ot_rate,
    )

    # Step 3: Regular pay
    regular_pay = round_cents(hours.regular_hours * Decimal(hourly_rate_cents))

    # Step 4: Weekly + daily overtime, rounded separately
    weekly_ot_pay = round_cents(
        hours.weekly_overtime_hours * ot_rate * rules.weekly_ot_multiplier
    )
    daily_ot_pay = round_cents(
        hours.daily_overtime_hours * ot_rate * rules.daily_ot_multiplier
    )
    overtime_pay = weekly_ot_pay + daily_ot_pay

    # Step 5: Double-time
    double_time_pay = round_cents(
        hours.double_time_hours * ot_rate * rules.daily_double_multiplier
    )

    return OvertimePayResult(
        regular_pay=regular_pay,
        overtime_pay=overtime_pay,
        double_time_pay=double_time_pay,
        total_gross_pay=regular_pay + overtime_pay + double_time_pay,
    )
