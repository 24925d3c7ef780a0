"""Calendar-month windows used by filters and aggregations.

All windows are half-open: ``start <= day < end``.
"""

from datetime import date
from typing import List, Optional, Tuple

Window = Tuple[date, date]

# Named ranges accepted by the transaction list, counted in months back from
# the current month (the current month included).
DATE_RANGE_MONTHS = {
    "current_month": 1,
    "last_3_months": 3,
    "last_6_months": 6,
}

REPORT_RANGE_MONTHS = {
    "3months": 3,
    "6months": 6,
    "12months": 12,
}


def first_of_month(day: date) -> date:
    return date(day.year, day.month, 1)


def add_months(day: date, months: int) -> date:
    """First day of the month `months` away from the month of `day`."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_window(day: date) -> Window:
    """Window covering the calendar month of `day`."""
    start = first_of_month(day)
    return start, add_months(start, 1)


def trailing_months(today: date, months: int) -> Window:
    """The current month plus the `months - 1` months before it."""
    end = add_months(today, 1)
    return add_months(today, -(months - 1)), end


def year_window(today: date) -> Window:
    return date(today.year, 1, 1), date(today.year + 1, 1, 1)


def date_range_window(date_range: Optional[str], today: date) -> Optional[Window]:
    """Resolve a transaction-list date range name; None means unbounded."""
    if not date_range or date_range == "all":
        return None
    if date_range == "last_month":
        return month_window(add_months(today, -1))
    if date_range == "current_year":
        return year_window(today)
    if date_range in DATE_RANGE_MONTHS:
        return trailing_months(today, DATE_RANGE_MONTHS[date_range])
    raise ValueError(f"Unknown date range: {date_range}")


def report_window(time_range: str, today: date) -> Window:
    """Resolve a report/chart time range name."""
    if time_range == "year":
        return year_window(today)
    if time_range in REPORT_RANGE_MONTHS:
        return trailing_months(today, REPORT_RANGE_MONTHS[time_range])
    raise ValueError(f"Unknown time range: {time_range}")


def month_starts(window: Window) -> List[date]:
    """First day of every month inside the window, in order."""
    start, end = window
    months = []
    current = first_of_month(start)
    while current < end:
        months.append(current)
        current = add_months(current, 1)
    return months


def percent_change(current: float, previous: float) -> float:
    if not previous:
        return 0.0
    return round((current - previous) / abs(previous) * 100, 1)
