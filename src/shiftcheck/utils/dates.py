"""Date formatting and holiday lookup helpers."""
import calendar
from datetime import date, datetime, timedelta
from typing import List, Mapping, Optional

DATE_FORMAT = "%Y-%m-%d"


def format_date(d: date) -> str:
    """Format a date as zero-padded YYYY-MM-DD (calendar based, locale independent)."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date(s: str) -> date:
    """Parse a YYYY-MM-DD string back into a date."""
    return datetime.strptime(s.strip(), DATE_FORMAT).date()


def is_holiday(date_str: str, holidays: Optional[Mapping[str, bool]]) -> bool:
    """True only when the calendar explicitly marks the date as a holiday."""
    if not holidays:
        return False
    return holidays.get(date_str) is True


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month (month is 1-based)."""
    return calendar.monthrange(year, month)[1]


def month_dates(year: int, month: int) -> List[date]:
    """Every calendar date of the month, in order."""
    return [date(year, month, day) for day in range(1, days_in_month(year, month) + 1)]


def shift_date(d: date, days: int) -> date:
    return d + timedelta(days=days)
