"""
Trend analytics over a weight log.

All functions take a snapshot of entries (anything with `weight` and `date`
attributes) and return fresh derived values. Inputs are never mutated.
"""

import math
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Sequence, TypeVar, Union

from weightwise.analytics.base import ProgressStats, WeeklyProgress, WeightChange
from weightwise.utils.enums import Period
from weightwise.utils.metrics import week_start

E = TypeVar("E")

SECONDS_PER_DAY = 24 * 60 * 60


def sort_for_chart(entries: Sequence[E]) -> List[E]:
    """Oldest first."""
    return sorted(entries, key=lambda e: e.date)


def sort_for_display(entries: Sequence[E]) -> List[E]:
    """Newest first."""
    return sorted(entries, key=lambda e: e.date, reverse=True)


def filter_by_period(
    entries: Sequence[E],
    period: Union[Period, str],
    now: Optional[datetime] = None,
) -> List[E]:
    """
    Keep entries inside a rolling lookback window.

    Args:
        entries: Weight entries in any order
        period: week (7d), month (30d), quarter (90d) or year (365d)
        now: Reference instant (default: current time)

    Returns:
        Entries with date >= now - period, in input order

    Raises:
        ValueError: If period is not a known Period
    """
    period = Period(period)
    if now is None:
        now = datetime.now()
    cutoff = now - timedelta(days=period.days)
    return [e for e in entries if _to_datetime(e.date) >= cutoff]


def weekly_aggregates(entries: Sequence[E]) -> List[WeeklyProgress]:
    """
    Bucket entries by the Sunday that starts their week.

    Weeks without entries do not appear; nothing is interpolated.
    """
    buckets: Dict[date, List[float]] = defaultdict(list)
    for entry in entries:
        anchor = week_start(entry.date)
        if isinstance(anchor, datetime):
            anchor = anchor.date()
        buckets[anchor].append(entry.weight)

    return [
        WeeklyProgress(
            week=week,
            average_weight=sum(weights) / len(weights),
            entries=len(weights),
        )
        for week, weights in sorted(buckets.items())
    ]


def progress_stats(
    entries: Sequence[E],
    period: Optional[Union[Period, str]] = None,
    now: Optional[datetime] = None,
) -> Optional[ProgressStats]:
    """
    Net change and daily rate between the first and last entry of a window.

    Returns None when fewer than two entries fall inside the window. Callers
    should render that as "not enough data", never as zero change.
    """
    window = filter_by_period(entries, period, now) if period is not None else list(entries)
    if len(window) < 2:
        return None

    ordered = sort_for_chart(window)
    first, last = ordered[0], ordered[-1]

    total_change = last.weight - first.weight
    elapsed = _to_datetime(last.date) - _to_datetime(first.date)
    time_span_days = math.ceil(elapsed.total_seconds() / SECONDS_PER_DAY)

    # Identical timestamps give no elapsed time, so the rate is undefined
    avg_change_per_day = total_change / time_span_days if time_span_days else None

    return ProgressStats(
        total_change=total_change,
        time_span_days=time_span_days,
        avg_change_per_day=avg_change_per_day,
        count=len(window),
    )


def latest_change(entries: Sequence[E]) -> Optional[WeightChange]:
    """Change from the previous entry to the newest one."""
    if len(entries) < 2:
        return None
    latest, previous = sort_for_display(entries)[:2]
    change = latest.weight - previous.weight
    # Losing (or holding) weight counts as positive progress
    return WeightChange(change=abs(change), is_positive=change <= 0)


def entries_this_week(entries: Sequence[E], now: Optional[datetime] = None) -> List[E]:
    """Entries logged since midnight of this week's Sunday."""
    if now is None:
        now = datetime.now()
    start = datetime.combine(week_start(now.date()), datetime.min.time())
    return [e for e in entries if _to_datetime(e.date) >= start]


def _to_datetime(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, datetime.min.time())
