from weightwise.analytics.base import (
    WeeklyProgress,
    ProgressStats,
    WeightChange,
    CalendarDay,
    ChartSeries,
)
from weightwise.analytics.progress import (
    filter_by_period,
    weekly_aggregates,
    progress_stats,
    latest_change,
    entries_this_week,
    sort_for_chart,
    sort_for_display,
)
from weightwise.analytics.goals import (
    goal_direction,
    goal_progress,
    is_goal_complete,
    days_until,
    weight_to_go,
    split_goals,
)
from weightwise.analytics.calendar import month_grid
from weightwise.analytics.chart import chart_series

__all__ = [
    "WeeklyProgress",
    "ProgressStats",
    "WeightChange",
    "CalendarDay",
    "ChartSeries",
    "filter_by_period",
    "weekly_aggregates",
    "progress_stats",
    "latest_change",
    "entries_this_week",
    "sort_for_chart",
    "sort_for_display",
    "goal_direction",
    "goal_progress",
    "is_goal_complete",
    "days_until",
    "weight_to_go",
    "split_goals",
    "month_grid",
    "chart_series",
]
