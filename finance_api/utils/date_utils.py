"""Date manipulation utilities"""

from datetime import date


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month"""
    if month == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)
    return (next_month - date(year, month, 1)).days


def add_months(start: date, months: int) -> date:
    """
    Move a date forward by whole months, keeping the day of month.

    Excess months carry into subsequent years. When the target month is
    shorter than the start day, the day snaps to that month's last day
    (Jan 31 + 1 month -> Feb 28/29).
    """
    total_months = start.month - 1 + months
    year = start.year + total_months // 12
    month = total_months % 12 + 1
    day = min(start.day, days_in_month(year, month))
    return date(year, month, day)
