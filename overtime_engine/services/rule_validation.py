"""
Overtime Rule Validation

The engine tolerates misconfigured rules; this check lets callers reject
them before they are saved.
"""

from decimal import Decimal

from overtime_engine.schemas.overtime import OvertimeRules

MINIMUM_MULTIPLIER = Decimal("1")


def validate_overtime_rules(rules: OvertimeRules) -> list[str]:
    """
    Check a rule set for configuration mistakes.

    Returns:
        List of issues; empty when the rules are valid
    """
    issues: list[str] = []

    daily = rules.daily_threshold_hours
    double = rules.daily_double_threshold_hours

    if daily is not None and daily < 0:
        issues.append(f"Daily threshold {daily} must not be negative")
    if double is not None and double < 0:
        issues.append(f"Double-time threshold {double} must not be negative")

    if double is not None:
        if daily is None:
            issues.append("Double-time threshold has no effect without a daily threshold")
        elif double <= daily:
            issues.append(
                f"Double-time threshold {double} must exceed daily threshold {daily}"
            )

    multipliers = {
        "weekly_ot_multiplier": rules.weekly_ot_multiplier,
        "daily_ot_multiplier": rules.daily_ot_multiplier,
        "daily_double_multiplier": rules.daily_double_multiplier,
    }
    for name, value in multipliers.items():
        if value < MINIMUM_MULTIPLIER:
            issues.append(f"{name} {value} is below {MINIMUM_MULTIPLIER}")

    return issues
