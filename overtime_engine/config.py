"""
Overtime Engine Configuration

Environment-based defaults for the overtime rule set used when a caller
does not supply one.
"""

import logging
from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from overtime_engine.schemas.overtime import OvertimeRules


class Settings(BaseSettings):
    """Engine settings loaded from OVERTIME_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OVERTIME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    # Standard rule set (FLSA weekly overtime only)
    weekly_threshold_hours: Decimal = Field(default=Decimal("40"), ge=0)
    weekly_ot_multiplier: Decimal = Decimal("1.5")
    daily_threshold_hours: Decimal | None = None
    daily_ot_multiplier: Decimal = Decimal("1.5")
    daily_double_threshold_hours: Decimal | None = None
    daily_double_multiplier: Decimal = Decimal("2.0")
    exclude_tips_from_ot_rate: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def default_overtime_rules() -> OvertimeRules:
    """Build the fallback rule set from settings."""
    settings = get_settings()
    return OvertimeRules(
        weekly_threshold_hours=settings.weekly_threshold_hours,
        weekly_ot_multiplier=settings.weekly_ot_multiplier,
        daily_threshold_hours=settings.daily_threshold_hours,
        daily_ot_multiplier=settings.daily_ot_multiplier,
        daily_double_threshold_hours=settings.daily_double_threshold_hours,
        daily_double_multiplier=settings.daily_double_multiplier,
        exclude_tips_from_ot_rate=settings.exclude_tips_from_ot_rate,
    )


def configure_logging() -> None:
    """Apply the configured log level for host applications."""
    logging.basicConfig(level=get_settings().log_level.upper())
