"""Goal progress calculations.

Pure functions over already-fetched weight entries and an optional goal.
Nothing in here touches the database or reads the clock: callers pass
`today` explicitly, so the same inputs always give the same outputs.

Entries and goals are read by attribute (`.date`, `.weight`,
`.target_weight`, ...), which means ORM rows, API schemas and the small
dataclasses below can all be passed in.

All weights are kilograms as floats. Gram figures are kilograms * 1000 and
are never rounded here.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Iterable, Optional

from app.core.constants import (
    DAILY_CHART_POINTS,
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    GRAMS_PER_KG,
    INSIGHT_THRESHOLD_KG,
    MONTHLY_SERIES_MONTHS,
    TIMELINE_DEFAULT_ITEMS,
)
from app.core.time_utils import month_bounds, shift_months, week_bounds


class InvalidMeasurement(ValueError):
    """Raised when a caller hands over a weight or date that can't be real."""


class InsightCategory(str, Enum):
    no_entry_today = "no-entry-today"
    no_baseline = "no-baseline"
    strong_loss = "strong-loss"
    mild_loss = "mild-loss"
    stable = "stable"
    mild_gain = "mild-gain"
    notable_gain = "notable-gain"


@dataclass(frozen=True)
class EntryPoint:
    date: date
    weight: float
    id: Optional[int] = None


@dataclass(frozen=True)
class GoalTarget:
    target_weight: Optional[float]
    target_date: Optional[date] = None
    initial_weight: Optional[float] = None
    daily_goal: Optional[float] = None  # grams/day
    weekly_goal: Optional[float] = None  # kg/week
    monthly_goal: Optional[float] = None  # kg/month


@dataclass(frozen=True)
class GoalProjection:
    weight_to_lose: float
    days_remaining: int
    daily_pace_grams: float
    weekly_pace_kg: float
    monthly_pace_kg: float


@dataclass(frozen=True)
class Pace:
    daily_grams: Optional[float]
    weekly_kg: Optional[float]
    monthly_kg: Optional[float]


@dataclass(frozen=True)
class TimelineItem:
    date: date
    weight: float
    variation: Optional[float]
    id: Optional[int] = None


@dataclass(frozen=True)
class DailyChartPoint:
    date: date
    weight: float
    expected_weight: Optional[float]
    met_goal: Optional[bool]


@dataclass(frozen=True)
class WeeklyChartPoint:
    date: date
    weight: float
    variation: float


@dataclass(frozen=True)
class WeeklyChart:
    points: list[WeeklyChartPoint]
    min_weight: float
    max_weight: float
    average_weight: float
    total_change: float


@dataclass(frozen=True)
class MonthlyPoint:
    month_start: date
    weight: float


@dataclass(frozen=True)
class DailySummary:
    today: date
    current_weight: Optional[float]
    previous_weight: Optional[float]
    delta: Optional[float]
    insight: InsightCategory
    is_gain: bool
    total_change: float
    projection: Optional[GoalProjection]
    pace: Optional[Pace]
    timeline: list[TimelineItem] = field(default_factory=list)
    chart: list[DailyChartPoint] = field(default_factory=list)


@dataclass(frozen=True)
class WeeklySummary:
    week_start: date
    week_end: date
    current_weight: Optional[float]
    week_delta: Optional[float]
    last_week_weight: Optional[float]
    vs_last_week: Optional[float]
    total_change: float
    weekly_goal: Optional[float]
    daily_goal: Optional[float]
    progress_percent: Optional[float]
    is_gain: bool
    chart: Optional[WeeklyChart]


@dataclass(frozen=True)
class MonthlySummary:
    month_start: date
    month_end: date
    current_weight: Optional[float]
    month_delta: Optional[float]
    last_month_weight: Optional[float]
    vs_last_month: Optional[float]
    total_change: float
    monthly_goal: Optional[float]
    progress_percent: Optional[float]
    is_gain: bool
    series: list[MonthlyPoint] = field(default_factory=list)


@dataclass(frozen=True)
class GoalStatus:
    target_weight: float
    target_date: Optional[date]
    initial_weight: Optional[float]
    stored_pace: Pace
    current_weight: Optional[float]
    remaining_kg: Optional[float]
    completion_percent: Optional[float]
    projection: Optional[GoalProjection]


# --------- Input checks --------- #

def _check_weight(value) -> float:
    if value is None or isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidMeasurement(f"weight must be a number, got {value!r}")
    weight = float(value)
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidMeasurement(f"weight must be a positive finite number, got {value!r}")
    return weight


def _check_date(value) -> date:
    # datetime is a date subclass but would break day arithmetic against dates
    if not isinstance(value, date) or isinstance(value, datetime):
        raise InvalidMeasurement(f"date must be a calendar date, got {value!r}")
    return value


def _points(entries: Iterable) -> list[EntryPoint]:
    return [
        EntryPoint(
            date=_check_date(e.date),
            weight=_check_weight(e.weight),
            id=getattr(e, "id", None),
        )
        for e in entries
    ]


def _newest_first(entries: Iterable) -> list[EntryPoint]:
    # sorted() is stable, so same-day entries keep the caller's order
    return sorted(_points(entries), key=lambda p: p.date, reverse=True)


def _optional_weight(value) -> Optional[float]:
    return None if value is None else _check_weight(value)


# --------- Daily figures --------- #

def current_weight(entries: Iterable, today: date) -> Optional[float]:
    """Weight logged today, else the most recent weight. None if no entries."""
    ordered = _newest_first(entries)
    if not ordered:
        return None
    for p in ordered:
        if p.date == today:
            return p.weight
    return ordered[0].weight


def previous_weight(entries: Iterable, today: date) -> Optional[float]:
    """Weight logged yesterday, else the second most recent weight."""
    ordered = _newest_first(entries)
    yesterday = today - timedelta(days=1)
    for p in ordered:
        if p.date == yesterday:
            return p.weight
    if len(ordered) > 1:
        return ordered[1].weight
    return None


def delta_vs_previous(entries: Iterable, today: date) -> Optional[float]:
    """Current minus previous weight; negative means weight was lost."""
    entries = list(entries)
    current = current_weight(entries, today)
    previous = previous_weight(entries, today)
    if current is None or previous is None:
        return None
    return current - previous


def total_change(entries: Iterable, today: date) -> float:
    """Current weight minus the earliest recorded weight (0.0 without data)."""
    ordered = _newest_first(entries)
    if not ordered:
        return 0.0
    current = current_weight(ordered, today)
    return current - ordered[-1].weight


def has_entry_on(entries: Iterable, day: date) -> bool:
    return any(p.date == day for p in _points(entries))


def insight_category(delta: Optional[float], has_today_entry: bool = True) -> InsightCategory:
    """Classify today's change into a display category.

    Thresholds are +/- INSIGHT_THRESHOLD_KG:
      delta < -0.3         -> strong-loss
      -0.3 <= delta < 0    -> mild-loss
      delta == 0           -> stable
      0 < delta <= 0.3     -> mild-gain
      delta > 0.3          -> notable-gain
    """
    if not has_today_entry:
        return InsightCategory.no_entry_today
    if delta is None:
        return InsightCategory.no_baseline
    if delta < -INSIGHT_THRESHOLD_KG:
        return InsightCategory.strong_loss
    if delta < 0:
        return InsightCategory.mild_loss
    if delta == 0:
        return InsightCategory.stable
    if delta <= INSIGHT_THRESHOLD_KG:
        return InsightCategory.mild_gain
    return InsightCategory.notable_gain


# --------- Periods --------- #

def period_entries(entries: Iterable, start: date, end: date) -> list[EntryPoint]:
    """Entries dated within [start, end], oldest first."""
    inside = [p for p in _points(entries) if start <= p.date <= end]
    return sorted(inside, key=lambda p: p.date)


def period_delta(entries: Iterable, start: date, end: date) -> Optional[float]:
    """Latest minus earliest weight inside the period.

    Needs at least two entries in the period, otherwise None.
    """
    inside = period_entries(entries, start, end)
    if len(inside) < 2:
        return None
    return inside[-1].weight - inside[0].weight


def _latest_in(entries: Iterable, start: date, end: date) -> Optional[float]:
    inside = period_entries(entries, start, end)
    return inside[-1].weight if inside else None


# --------- Goal --------- #

def goal_projection(current: Optional[float], goal, today: date) -> Optional[GoalProjection]:
    """Pace needed to go from `current` to the goal's target by its date.

    Returns None when the goal is missing either field, there is no current
    weight, the target is already reached, or the target date isn't after
    `today`.
    """
    if goal is None or current is None:
        return None
    target = goal.target_weight
    target_date = goal.target_date
    if target is None or target_date is None:
        return None

    weight_to_lose = _check_weight(current) - _check_weight(target)
    if weight_to_lose <= 0:
        return None

    days_remaining = (_check_date(target_date) - today).days
    if days_remaining <= 0:
        return None

    return GoalProjection(
        weight_to_lose=weight_to_lose,
        days_remaining=days_remaining,
        daily_pace_grams=weight_to_lose / days_remaining * GRAMS_PER_KG,
        weekly_pace_kg=weight_to_lose / (days_remaining / DAYS_PER_WEEK),
        monthly_pace_kg=weight_to_lose / (days_remaining / DAYS_PER_MONTH),
    )


def progress_percent(delta: Optional[float], period_goal: Optional[float]) -> Optional[float]:
    """Share of a period goal covered by `delta`, capped at 100.

    Uses the absolute value, so a gain also yields a percentage; callers
    tell loss and gain apart by the sign of `delta`.
    """
    if delta is None or period_goal is None or period_goal <= 0:
        return None
    return min(100.0, abs(delta) / period_goal * 100)


def goal_completion_percent(
    initial: Optional[float], current: Optional[float], target: Optional[float]
) -> Optional[float]:
    """How much of the initial -> target distance is already covered (0-100)."""
    if initial is None or current is None or target is None:
        return None
    span = initial - target
    if span <= 0:
        return None
    return max(0.0, min(100.0, (initial - current) / span * 100))


def stored_pace(goal) -> Pace:
    return Pace(
        daily_grams=goal.daily_goal,
        weekly_kg=goal.weekly_goal,
        monthly_kg=goal.monthly_goal,
    )


def effective_pace(goal, projection: Optional[GoalProjection]) -> Optional[Pace]:
    """Saved pace figures, with gaps filled from the live projection."""
    if goal is None:
        return None
    saved = stored_pace(goal)
    if projection is None:
        live = Pace(daily_grams=None, weekly_kg=None, monthly_kg=None)
    else:
        live = Pace(
            daily_grams=projection.daily_pace_grams,
            weekly_kg=projection.weekly_pace_kg,
            monthly_kg=projection.monthly_pace_kg,
        )

    def pick(stored_value, live_value):
        return stored_value if stored_value is not None else live_value

    pace = Pace(
        daily_grams=pick(saved.daily_grams, live.daily_grams),
        weekly_kg=pick(saved.weekly_kg, live.weekly_kg),
        monthly_kg=pick(saved.monthly_kg, live.monthly_kg),
    )
    if pace.daily_grams is None and pace.weekly_kg is None and pace.monthly_kg is None:
        return None
    return pace


# --------- Chart series --------- #

def timeline(entries: Iterable, limit: int = TIMELINE_DEFAULT_ITEMS) -> list[TimelineItem]:
    """Most recent entries, each with the change since the next older one shown."""
    shown = _newest_first(entries)[:limit]
    items = []
    for i, p in enumerate(shown):
        older = shown[i + 1] if i + 1 < len(shown) else None
        variation = p.weight - older.weight if older is not None else None
        items.append(TimelineItem(date=p.date, weight=p.weight, variation=variation, id=p.id))
    return items


def daily_chart(entries: Iterable, daily_goal_grams: Optional[float]) -> list[DailyChartPoint]:
    """Last few entries oldest first, against the weight expected from the daily goal.

    The expected line starts at the first charted weight and drops by the
    daily goal for every charted entry after it.
    """
    recent = list(reversed(_newest_first(entries)[:DAILY_CHART_POINTS]))
    if not recent:
        return []
    first_weight = recent[0].weight
    has_goal = daily_goal_grams is not None and daily_goal_grams > 0

    points = []
    for i, p in enumerate(recent):
        expected = first_weight - (daily_goal_grams / GRAMS_PER_KG) * i if has_goal else None
        points.append(
            DailyChartPoint(
                date=p.date,
                weight=p.weight,
                expected_weight=expected,
                met_goal=(p.weight <= expected) if expected is not None else None,
            )
        )
    return points


def weekly_chart(entries: Iterable, start: date, end: date) -> Optional[WeeklyChart]:
    inside = period_entries(entries, start, end)
    if not inside:
        return None
    points = []
    for i, p in enumerate(inside):
        variation = p.weight - inside[i - 1].weight if i > 0 else 0.0
        points.append(WeeklyChartPoint(date=p.date, weight=p.weight, variation=variation))
    weights = [p.weight for p in inside]
    return WeeklyChart(
        points=points,
        min_weight=min(weights),
        max_weight=max(weights),
        average_weight=sum(weights) / len(weights),
        total_change=weights[-1] - weights[0],
    )


def monthly_series(
    entries: Iterable, today: date, months: int = MONTHLY_SERIES_MONTHS
) -> list[MonthlyPoint]:
    """Latest weight of each of the last `months` calendar months, oldest first.

    Months without entries are left out.
    """
    points = _points(entries)
    series = []
    for back in range(months - 1, -1, -1):
        start, end = month_bounds(shift_months(today, -back))
        latest = _latest_in(points, start, end)
        if latest is not None:
            series.append(MonthlyPoint(month_start=start, weight=latest))
    return series


# --------- View models --------- #

def build_daily_summary(entries: Iterable, goal, today: date) -> DailySummary:
    points = _points(entries)
    current = current_weight(points, today)
    previous = previous_weight(points, today)
    delta = current - previous if current is not None and previous is not None else None
    projection = goal_projection(current, goal, today)
    return DailySummary(
        today=today,
        current_weight=current,
        previous_weight=previous,
        delta=delta,
        insight=insight_category(delta, has_entry_on(points, today)),
        is_gain=delta is not None and delta > 0,
        total_change=total_change(points, today),
        projection=projection,
        pace=effective_pace(goal, projection),
        timeline=timeline(points),
        chart=daily_chart(points, goal.daily_goal if goal is not None else None),
    )


def build_weekly_summary(entries: Iterable, goal, today: date) -> WeeklySummary:
    points = _points(entries)
    start, end = week_bounds(today)
    last_start, last_end = week_bounds(today - timedelta(weeks=1))

    latest = _latest_in(points, start, end)
    last_week = _latest_in(points, last_start, last_end)
    week_delta = period_delta(points, start, end)
    weekly_goal = goal.weekly_goal if goal is not None else None
    return WeeklySummary(
        week_start=start,
        week_end=end,
        current_weight=latest,
        week_delta=week_delta,
        last_week_weight=last_week,
        vs_last_week=latest - last_week if latest is not None and last_week is not None else None,
        total_change=total_change(points, today),
        weekly_goal=weekly_goal,
        daily_goal=goal.daily_goal if goal is not None else None,
        progress_percent=progress_percent(week_delta, weekly_goal),
        is_gain=week_delta is not None and week_delta > 0,
        chart=weekly_chart(points, start, end),
    )


def build_monthly_summary(entries: Iterable, goal, today: date) -> MonthlySummary:
    points = _points(entries)
    start, end = month_bounds(today)
    last_start, last_end = month_bounds(shift_months(today, -1))

    latest = _latest_in(points, start, end)
    last_month = _latest_in(points, last_start, last_end)
    month_delta = period_delta(points, start, end)
    monthly_goal = goal.monthly_goal if goal is not None else None
    return MonthlySummary(
        month_start=start,
        month_end=end,
        current_weight=latest,
        month_delta=month_delta,
        last_month_weight=last_month,
        vs_last_month=latest - last_month if latest is not None and last_month is not None else None,
        total_change=total_change(points, today),
        monthly_goal=monthly_goal,
        progress_percent=progress_percent(month_delta, monthly_goal),
        is_gain=month_delta is not None and month_delta > 0,
        series=monthly_series(points, today),
    )


def build_goal_status(entries: Iterable, goal, today: date) -> Optional[GoalStatus]:
    if goal is None:
        return None
    current = current_weight(entries, today)
    target = _check_weight(goal.target_weight)
    initial = _optional_weight(goal.initial_weight)
    return GoalStatus(
        target_weight=target,
        target_date=goal.target_date,
        initial_weight=initial,
        stored_pace=stored_pace(goal),
        current_weight=current,
        remaining_kg=current - target if current is not None else None,
        completion_percent=goal_completion_percent(initial, current, target),
        projection=goal_projection(current, goal, today),
    )
