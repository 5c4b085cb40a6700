"""Date manipulation utilities"""

import calendar
from datetime import date
from typing import List

from age_of_money.domain.exceptions import InvalidReportRangeError


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative if end is earlier)"""
    return (end - start).days


def month_start(day: date) -> date:
    return day.replace(day=1)


def month_end(day: date) -> date:
    """Last calendar day of the month containing day"""
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def generate_month_range(start: date, end: date) -> List[date]:
    """First day of every month from start to end (inclusive)"""
    months = []
    current = month_start(start)
    while current <= end:
        months.append(current)
        if current.month == 12:
            current = current.replace(year=current.year + 1, month=1)
        else:
            current = current.replace(month=current.month + 1)
    return months


def month_label(day: date) -> str:
    """Short label used on charts, e.g. 'Jan 2024'"""
    return f"{calendar.month_abbr[day.month]} {day.year}"


def parse_month(value: str) -> date:
    """
    Parse a 'YYYY-MM' string into the first day of that month.

    Raises:
        InvalidReportRangeError: If the value is not a valid month
    """
    try:
        year, month = value.split("-")
        return date(int(year), int(month), 1)
    except (ValueError, AttributeError) as e:
        raise InvalidReportRangeError(f"Invalid month '{value}', expected YYYY-MM") from e
