from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.core.progress import InsightCategory


class _FromAttributes(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class GoalProjectionRead(_FromAttributes):
    weight_to_lose: float
    days_remaining: int
    daily_pace_grams: float
    weekly_pace_kg: float
    monthly_pace_kg: float


class PaceRead(_FromAttributes):
    daily_grams: Optional[float] = None
    weekly_kg: Optional[float] = None
    monthly_kg: Optional[float] = None


class TimelineItemRead(_FromAttributes):
    id: Optional[int] = None
    date: date
    weight: float
    variation: Optional[float] = None


class DailyChartPointRead(_FromAttributes):
    date: date
    weight: float
    expected_weight: Optional[float] = None
    met_goal: Optional[bool] = None


class WeeklyChartPointRead(_FromAttributes):
    date: date
    weight: float
    variation: float


class WeeklyChartRead(_FromAttributes):
    points: list[WeeklyChartPointRead]
    min_weight: float
    max_weight: float
    average_weight: float
    total_change: float


class MonthlyPointRead(_FromAttributes):
    month_start: date
    weight: float


class DailySummaryRead(_FromAttributes):
    today: date
    current_weight: Optional[float] = None
    previous_weight: Optional[float] = None
    delta: Optional[float] = None
    insight: InsightCategory
    is_gain: bool
    total_change: float
    projection: Optional[GoalProjectionRead] = None
    pace: Optional[PaceRead] = None
    timeline: list[TimelineItemRead] = []
    chart: list[DailyChartPointRead] = []


class WeeklySummaryRead(_FromAttributes):
    week_start: date
    week_end: date
    current_weight: Optional[float] = None
    week_delta: Optional[float] = None
    last_week_weight: Optional[float] = None
    vs_last_week: Optional[float] = None
    total_change: float
    weekly_goal: Optional[float] = None
    daily_goal: Optional[float] = None
    progress_percent: Optional[float] = None
    is_gain: bool
    chart: Optional[WeeklyChartRead] = None


class MonthlySummaryRead(_FromAttributes):
    month_start: date
    month_end: date
    current_weight: Optional[float] = None
    month_delta: Optional[float] = None
    last_month_weight: Optional[float] = None
    vs_last_month: Optional[float] = None
    total_change: float
    monthly_goal: Optional[float] = None
    progress_percent: Optional[float] = None
    is_gain: bool
    series: list[MonthlyPointRead] = []


class GoalStatusRead(_FromAttributes):
    target_weight: float
    target_date: Optional[date] = None
    initial_weight: Optional[float] = None
    stored_pace: PaceRead
    current_weight: Optional[float] = None
    remaining_kg: Optional[float] = None
    completion_percent: Optional[float] = None
    projection: Optional[GoalProjectionRead] = None
