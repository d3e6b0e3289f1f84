from typing import Optional
from datetime import datetime
import logging

from weightwise.analytics import (
    filter_by_period,
    weekly_aggregates,
    progress_stats,
    latest_change,
    entries_this_week,
    sort_for_display,
    goal_progress,
    is_goal_complete,
    days_until,
    weight_to_go,
    split_goals,
    month_grid,
    chart_series,
)
from weightwise.config import settings
from weightwise.models.goal import Goal
from weightwise.models.user import User
from weightwise.schemas.analytics import (
    ProgressResponse,
    WeeklyProgressResponse,
    ProgressStatsResponse,
    ChartSeriesResponse,
    DashboardResponse,
    BMIResponse,
    WeightChangeResponse,
    CalendarDayResponse,
    GoalProgressItem,
    GoalOverviewResponse,
)
from weightwise.schemas.goal import GoalResponse
from weightwise.schemas.weight_entry import WeightEntryResponse
from weightwise.services.repository import TrackerRepository
from weightwise.utils.enums import Period
from weightwise.utils.metrics import calculate_bmi, categorize_bmi

logger = logging.getLogger(__name__)

RECENT_ENTRIES_LIMIT = 5


class UserNotFoundError(LookupError):
    """Raised when the repository's user does not exist."""


class AnalyticsService:
    """
    Read-only views over one user's weight log.

    Takes a snapshot through the injected repository and hands it to the pure
    analytics functions. Never writes.
    """

    def __init__(self, repository: TrackerRepository):
        self.repository = repository

    async def get_progress(
        self,
        period: Optional[Period] = None,
        now: Optional[datetime] = None,
    ) -> ProgressResponse:
        """
        Chart page data for a lookback period.

        Weekly aggregates cover the whole log; the entry list, stats and chart
        series cover only the selected period.
        """
        period = Period(period or settings.DEFAULT_PERIOD)
        user = await self._require_user()
        entries = await self.repository.list_entries()

        filtered = filter_by_period(entries, period, now)
        stats = progress_stats(filtered)
        if stats is None:
            logger.debug(f"Not enough entries for {period.value} stats (user {user.id})")

        return ProgressResponse(
            user_id=str(user.id),
            period=period,
            entries=[WeightEntryResponse.model_validate(e) for e in sort_for_display(filtered)],
            weekly_progress=[WeeklyProgressResponse.model_validate(w) for w in weekly_aggregates(entries)],
            stats=ProgressStatsResponse.model_validate(stats) if stats else None,
            chart=ChartSeriesResponse.model_validate(
                chart_series(filtered, user.target_weight, padding=settings.CHART_PADDING_LBS)
            ),
        )

    async def get_dashboard(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> DashboardResponse:
        """Headline numbers plus the month calendar (default: current month)."""
        if now is None:
            now = datetime.now()
        year = year or now.year
        month = month or now.month

        user = await self._require_user()
        entries = await self.repository.list_entries()

        bmi = calculate_bmi(user.current_weight, user.height)
        change = latest_change(entries)

        return DashboardResponse(
            user_id=str(user.id),
            current_weight=user.current_weight,
            target_weight=user.target_weight,
            weight_to_go=weight_to_go(user.current_weight, user.target_weight),
            bmi=BMIResponse(value=round(bmi, 1), category=categorize_bmi(bmi)),
            latest_change=WeightChangeResponse.model_validate(change) if change else None,
            entries_this_week=len(entries_this_week(entries, now)),
            recent_entries=[
                WeightEntryResponse.model_validate(e)
                for e in sort_for_display(entries)[:RECENT_ENTRIES_LIMIT]
            ],
            year=year,
            month=month,
            calendar=[
                CalendarDayResponse.model_validate(day) if day else None
                for day in month_grid(year, month, entries)
            ],
        )

    async def get_goal_overview(self, now: Optional[datetime] = None) -> GoalOverviewResponse:
        user = await self._require_user()
        goals = await self.repository.list_goals()
        active, completed = split_goals(goals, user.current_weight)

        return GoalOverviewResponse(
            user_id=str(user.id),
            current_weight=user.current_weight,
            active=[self._goal_item(g, user, now) for g in active],
            completed=[self._goal_item(g, user, now) for g in completed],
        )

    def _goal_item(self, goal: Goal, user: User, now: Optional[datetime]) -> GoalProgressItem:
        return GoalProgressItem(
            goal=GoalResponse.model_validate(goal),
            progress=round(goal_progress(goal, user.current_weight), 1),
            is_complete=is_goal_complete(goal, user.current_weight),
            days_left=days_until(goal.target_date, now),
            weight_to_go=weight_to_go(user.current_weight, goal.target_weight),
        )

    async def _require_user(self) -> User:
        user = await self.repository.get_user()
        if user is None:
            raise UserNotFoundError(f"User {self.repository.user_id} not found")
        return user
