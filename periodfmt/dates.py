"""Date utilities for periodfmt.

Pure functions for calendar arithmetic on the proleptic Gregorian calendar.
"""

import calendar
from datetime import date, datetime, timedelta

from periodfmt.domain.models import Period


def parse_date(text: str) -> date:
    """Parse a calendar date.

    Args:
        text: Date in YYYY-MM-DD format.

    Returns:
        Parsed date.

    Raises:
        ValueError: If the text is not a valid YYYY-MM-DD date.
    """
    value = datetime.strptime(text, "%Y-%m-%d").date()
    # strptime also accepts one-digit month and day fields
    if value.isoformat() != text:
        raise ValueError(f"Invalid date: {text!r}")
    return value


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month, leap years included."""
    return calendar.monthrange(year, month)[1]


def add_months(value: date, months: int) -> date:
    """Add months, keeping the day-of-month where the target month allows.

    If the target month is too short the last day of that month is used:
    2001-01-31 plus one month is 2001-02-28.

    Raises:
        OverflowError: If the result is outside the supported date range.
    """
    total = value.year * 12 + (value.month - 1) + months
    year, month_index = divmod(total, 12)
    if not date.min.year <= year <= date.max.year:
        raise OverflowError(f"date value out of range: year {year}")

    month = month_index + 1
    day = min(value.day, days_in_month(year, month))
    return date(year, month, day)


def add_days(value: date, days: int) -> date:
    """Add a number of days.

    Raises:
        OverflowError: If the result is outside the supported date range.
    """
    return value + timedelta(days=days)


def add_period_steps(value: date, period: Period) -> tuple[date, date]:
    """Add a period and keep the intermediate date.

    Args:
        value: Base date.
        period: Period to add.

    Returns:
        Tuple of (after_months, result) where:
        - after_months: Base date advanced by the months field only
        - result: after_months advanced by the days field
    """
    after_months = add_months(value, period.months)
    return after_months, add_days(after_months, period.days)


def add_period(value: date, period: Period) -> date:
    """Add a period to a date, months first and then days."""
    return add_period_steps(value, period)[1]
