"""
Test Configuration and Fixtures

Provides standard rule sets and isolates cached settings between tests.
"""

from decimal import Decimal

import pytest

from overtime_engine.config import get_settings
from overtime_engine.schemas.overtime import OvertimeRules


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings so environment overrides never leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def federal_rules() -> OvertimeRules:
    """FLSA rules: 40 hours/week at 1.5x, no daily overtime."""
    return OvertimeRules(
        weekly_threshold_hours=Decimal("40"),
        weekly_ot_multiplier=Decimal("1.5"),
    )


@pytest.fixture
def california_rules() -> OvertimeRules:
    """Daily OT over 8 hours, double-time over 12, weekly OT over 40."""
    return OvertimeRules(
        weekly_threshold_hours=Decimal("40"),
        weekly_ot_multiplier=Decimal("1.5"),
        daily_threshold_hours=Decimal("8"),
        daily_ot_multiplier=Decimal("1.5"),
        daily_double_threshold_hours=Decimal("12"),
        daily_double_multiplier=Decimal("2.0"),
    )
