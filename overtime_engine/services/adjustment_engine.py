"""
Adjustment Engine

Applies manager-approved hour reclassifications between the regular and
weekly overtime buckets.
"""

import logging
from collections.abc import Iterable

from overtime_engine.schemas.overtime import (
    AdjustmentType,
    AppliedAdjustment,
    OvertimeAdjustment,
    OvertimeResult,
)

logger = logging.getLogger(__name__)


def reconcile_adjustments(
    base: OvertimeResult,
    adjustments: Iterable[OvertimeAdjustment],
) -> tuple[OvertimeResult, list[AppliedAdjustment]]:
    """
    Fold adjustments over the (regular, weekly overtime) pair in order.

    Each adjustment moves at most the hours currently available in its
    source bucket. A request for more than is available is clamped, not
    rejected; the returned audit records mark those with `clamped=True`.
    Daily overtime and double-time are never touched, so the total of
    regular + weekly overtime is conserved.

    Returns:
        Tuple of (adjusted_result, applied_adjustments)
    """
    regular = base.regular_hours
    weekly_ot = base.weekly_overtime_hours
    applied: list[AppliedAdjustment] = []

    for adjustment in adjustments:
        if adjustment.adjustment_type == AdjustmentType.REGULAR_TO_OVERTIME:
            moved = min(adjustment.hours, regular)
            regular -= moved
            weekly_ot += moved
        else:
            moved = min(adjustment.hours, weekly_ot)
            weekly_ot -= moved
            regular += moved

        # Clamped: the source bucket held fewer hours than requested.
        clamped = moved < adjustment.hours
        if clamped:
            logger.warning(
                f"Adjustment {adjustment.adjustment_type.value} for "
                f"{adjustment.employee_id} on {adjustment.punch_date} requested "
                f"{adjustment.hours}h, only {moved}h available"
            )

        applied.append(
            AppliedAdjustment(
                adjustment=adjustment,
                requested_hours=adjustment.hours,
                applied_hours=moved,
                clamped=clamped,
            )
        )

    result = OvertimeResult(
        regular_hours=regular,
        weekly_overtime_hours=weekly_ot,
        daily_overtime_hours=base.daily_overtime_hours,
        double_time_hours=base.double_time_hours,
    )
    return result, applied


def apply_adjustments(
    base: OvertimeResult,
    adjustments: Iterable[OvertimeAdjustment],
) -> OvertimeResult:
    """Apply adjustments and return only the adjusted hour buckets."""
    result, _ = reconcile_adjustments(base, adjustments)
    return result
