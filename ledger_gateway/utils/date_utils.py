"""Date manipulation utilities"""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


def to_calendar_date(value: datetime) -> date:
    """Drop the time component; responses carry date-only precision"""
    return value.date()
