from fastapi import APIRouter, Depends, Query
from typing import Optional

from weightwise.schemas.analytics import ProgressResponse, DashboardResponse, GoalOverviewResponse
from weightwise.services.analytics_service import AnalyticsService
from weightwise.services.repository import TrackerRepository
from weightwise.routers.deps import get_repository
from weightwise.utils.enums import Period

router = APIRouter()


@router.get("/progress", response_model=ProgressResponse)
async def get_progress(
    period: Optional[Period] = Query(None, description="Lookback window: week, month, quarter or year"),
    repository: TrackerRepository = Depends(get_repository)
):
    """
    Progress analytics for the chart page.

    Returns:
    - Entries inside the period, newest first
    - Weekly average weights over the whole log
    - Net change and daily rate for the period (null with fewer than 2 entries)
    - Chart data series with target line and axis bounds
    """
    service = AnalyticsService(repository)
    return await service.get_progress(period)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    year: Optional[int] = Query(None, ge=1900, le=9999, description="Calendar year (default: current)"),
    month: Optional[int] = Query(None, ge=1, le=12, description="Calendar month (default: current)"),
    repository: TrackerRepository = Depends(get_repository)
):
    """Current weight, BMI, latest change, this week's count and the month calendar"""
    service = AnalyticsService(repository)
    return await service.get_dashboard(year=year, month=month)


@router.get("/goals", response_model=GoalOverviewResponse)
async def get_goal_overview(
    repository: TrackerRepository = Depends(get_repository)
):
    """Progress, completion and days remaining for every goal"""
    service = AnalyticsService(repository)
    return await service.get_goal_overview()
