"""Month view annotated with which days have a logged entry."""

import calendar
from datetime import date, datetime
from typing import List, Optional, Sequence

from weightwise.analytics.base import CalendarDay

DAYS_PER_WEEK = 7


def month_grid(year: int, month: int, entries: Sequence) -> List[Optional[CalendarDay]]:
    """
    Build a Sunday-first grid for one month.

    Cells before the 1st are None placeholders. Every real day carries
    has_entry=True when any entry falls on that calendar date, ignoring time.

    Raises:
        ValueError: If month is not in 1..12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1..12, got {month}")

    first_weekday, days_in_month = calendar.monthrange(year, month)
    # monthrange weekday is Monday=0; shift so Sunday is column 0
    leading = (first_weekday + 1) % DAYS_PER_WEEK

    logged_days = {
        e.date.date() if isinstance(e.date, datetime) else e.date
        for e in entries
    }

    grid: List[Optional[CalendarDay]] = [None] * leading
    for day in range(1, days_in_month + 1):
        current = date(year, month, day)
        grid.append(CalendarDay(date=current, has_entry=current in logged_days))
    return grid
