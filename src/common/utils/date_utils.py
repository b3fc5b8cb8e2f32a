"""Utility functions for date manipulation."""

from datetime import date, datetime

import pytz

from src.common.config.settings import settings


def now_local(tz_name: str | None = None) -> datetime:
    """Returns the current timezone-aware datetime in the configured time zone."""
    return datetime.now(pytz.timezone(tz_name or settings.TIMEZONE))


def today_local(tz_name: str | None = None) -> date:
    """Returns today's date in the configured time zone."""
    return now_local(tz_name).date()


def truncate_to_date(value: date | datetime | None) -> date | None:
    """Drops the time of day from a datetime; plain dates pass through."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date or datetime, got {type(value).__name__}")
