"""Derived records produced by the analytics functions."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, List


@dataclass(frozen=True)
class WeeklyProgress:
    """Mean weight for one Sunday-anchored calendar week."""

    week: date
    average_weight: float
    entries: int


@dataclass(frozen=True)
class ProgressStats:
    """Trend over a window of entries. Negative total_change is a loss."""

    total_change: float
    time_span_days: int
    avg_change_per_day: Optional[float]
    count: int


@dataclass(frozen=True)
class WeightChange:
    """Difference between the two most recent entries."""

    change: float
    is_positive: bool


@dataclass(frozen=True)
class CalendarDay:
    date: date
    has_entry: bool


@dataclass(frozen=True)
class ChartSeries:
    """Plain data series handed to the charting layer."""

    labels: List[str] = field(default_factory=list)
    weights: List[float] = field(default_factory=list)
    target: Optional[List[float]] = None
    y_min: Optional[float] = None
    y_max: Optional[float] = None
