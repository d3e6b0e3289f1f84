from pydantic import BaseModel
from typing import Optional, List
from datetime import date

from weightwise.schemas.goal import GoalResponse
from weightwise.schemas.weight_entry import WeightEntryResponse
from weightwise.utils.enums import Period, BMICategory


class WeeklyProgressResponse(BaseModel):
    week: date
    average_weight: float
    entries: int

    class Config:
        from_attributes = True


class ProgressStatsResponse(BaseModel):
    total_change: float  # Negative means weight lost
    time_span_days: int
    avg_change_per_day: Optional[float]
    count: int

    class Config:
        from_attributes = True


class ChartSeriesResponse(BaseModel):
    labels: List[str] = []
    weights: List[float] = []
    target: Optional[List[float]] = None
    y_min: Optional[float] = None
    y_max: Optional[float] = None

    class Config:
        from_attributes = True


class ProgressResponse(BaseModel):
    user_id: str
    period: Period
    entries: List[WeightEntryResponse]
    weekly_progress: List[WeeklyProgressResponse]
    stats: Optional[ProgressStatsResponse]  # None means not enough data
    chart: ChartSeriesResponse


class WeightChangeResponse(BaseModel):
    change: float
    is_positive: bool

    class Config:
        from_attributes = True


class BMIResponse(BaseModel):
    value: float
    category: BMICategory


class CalendarDayResponse(BaseModel):
    date: date
    has_entry: bool

    class Config:
        from_attributes = True


class DashboardResponse(BaseModel):
    user_id: str
    current_weight: float
    target_weight: float
    weight_to_go: float
    bmi: BMIResponse
    latest_change: Optional[WeightChangeResponse]
    entries_this_week: int
    recent_entries: List[WeightEntryResponse]
    year: int
    month: int
    calendar: List[Optional[CalendarDayResponse]]


class GoalProgressItem(BaseModel):
    goal: GoalResponse
    progress: float  # 0-100
    is_complete: bool
    days_left: int  # Negative when overdue
    weight_to_go: float


class GoalOverviewResponse(BaseModel):
    user_id: str
    current_weight: float
    active: List[GoalProgressItem]
    completed: List[GoalProgressItem]
